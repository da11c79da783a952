"""Merge-insertion sorting of integers given on the command line."""

from __future__ import annotations

import bisect
import re
import sys
import time
from collections import deque
from collections.abc import Iterable, Sequence

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_ALLOWED = frozenset("0123456789+-")
_INTEGER_PREFIX = re.compile(r"\s*[+-]?\d+")
_MISSING = object()


class InputError(Exception):
    """Raised when the command-line values cannot be read."""


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _parse_one(arg: str) -> int:
    for char in arg:
        if char not in _ALLOWED:
            raise InputError(f"not a digital value => {char}")
    match = _INTEGER_PREFIX.match(arg)
    value = int(match.group(0)) if match else 0
    if value == 0 and not arg.startswith("0"):
        raise InputError("Bad input value")
    if value <= LONG_MIN or value >= LONG_MAX:
        raise InputError("value overflow")
    return _to_int32(value)


def parse_values(args: Sequence[str]) -> list[int]:
    """Read each argument as an integer."""
    if not args:
        raise InputError("too few arguments")
    return [_parse_one(arg) for arg in args]


def merge_insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted list: pair up, sort the larger halves, insert the rest."""
    items = list(values)
    if len(items) <= 1:
        return items
    pairs = list(zip(items[::2], items[1::2]))
    larger = [max(pair) for pair in pairs]
    smaller = [min(pair) for pair in pairs]
    if len(items) % 2:
        smaller.append(items[-1])
    ordered = merge_insertion_sort(larger)
    for value in smaller:
        bisect.insort_left(ordered, value)
    return ordered


def merge_insertion_sort_deque(values: Iterable[int]) -> deque[int]:
    """The same sort, built on deques with linear-scan insertion."""
    items = deque(values)
    if len(items) <= 1:
        return items
    larger: deque[int] = deque()
    smaller: deque[int] = deque()
    stream = iter(items)
    for first in stream:
        second = next(stream, _MISSING)
        if second is _MISSING:
            smaller.append(first)
            break
        if first > second:
            larger.append(first)
            smaller.append(second)
        else:
            larger.append(second)
            smaller.append(first)
    ordered = merge_insertion_sort_deque(larger)
    for value in smaller:
        position = next(
            (index for index, item in enumerate(ordered) if not item < value),
            len(ordered),
        )
        ordered.insert(position, value)
    return ordered


def _timed(sort, values: list[int]):
    start = time.process_time()
    result = sort(values)
    return result, (time.process_time() - start) * 1e3


def _joined(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_values(args)
    except InputError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    as_list, list_ms = _timed(merge_insertion_sort, values)
    _, deque_ms = _timed(merge_insertion_sort_deque, values)
    print(f"Before: {_joined(values)}")
    print(f"After: {_joined(as_list)}")
    count = len(as_list)
    print(f"Time to process a range of {count} elements with list : {list_ms:g} ms")
    print(f"Time to process a range of {count} elements with deque : {deque_ms:g} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
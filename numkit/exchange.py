"""Convert dated amounts with a table of historical exchange rates."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date, timedelta

DATABASE = "data.csv"
MAX_AMOUNT = 1000.0

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_STRICT_DATE = re.compile(r"\s*(\d{1,4})-\s*(\d{1,2})-\s*(\d{1,2})")
_LOOSE_DATE = re.compile(r"\s*([+-]?\d+)-\s*([+-]?\d+)-\s*([+-]?\d+)")


class ExchangeError(Exception):
    """Raised for an unreadable file, a malformed line or an unknown date."""


@dataclass(frozen=True)
class Entry:
    """One line of input: the date, the amount as written, and its value."""

    date: str
    value: str
    amount: float


def _atof(text: str) -> float:
    """Read the longest leading number of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(0)) if match else 0.0


def _calendar_date(text: str) -> date:
    """Turn ``Y-M-D`` into a date, rolling out-of-range days and months over."""
    match = _LOOSE_DATE.match(text)
    if match is None:
        raise ExchangeError(f"Wrong date format: {text}")
    year, month, day = (int(part) for part in match.groups())
    year, month_index = divmod(year * 12 + month - 1, 12)
    try:
        return date(year, month_index + 1, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError) as err:
        raise ExchangeError(f"Wrong date format: {text}") from err


class RateTable:
    """Exchange rates keyed by ``YYYY-MM-DD`` dates."""

    def __init__(self, rates: Mapping[str, float]) -> None:
        self._rates = dict(rates)
        if not self._rates:
            raise ExchangeError("rate database is empty")
        self.min_date = min(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __contains__(self, key: object) -> bool:
        return key in self._rates

    def rate_for(self, date: str) -> float:
        """Return the rate of ``date``, or of the closest earlier date known."""
        if date in self._rates:
            return self._rates[date]
        day = _calendar_date(date)
        while True:
            try:
                day -= timedelta(days=1)
            except OverflowError as err:
                raise ExchangeError("date too old!") from err
            key = day.isoformat()
            if key < self.min_date:
                raise ExchangeError("date too old!")
            if key in self._rates:
                return self._rates[key]


def load_rates(path) -> RateTable:
    """Read ``date,rate`` lines from ``path`` into a rate table."""
    try:
        with open(path, encoding="utf-8") as db:
            lines = db.read().splitlines()
    except OSError as err:
        raise ExchangeError(f"opening file: {path}") from err
    return RateTable({line[:10]: _atof(line[11:]) for line in lines if line})


def parse_entry(line: str) -> Entry | None:
    """Parse a ``date | value`` line; return None for a header line."""
    if "|" not in line or len(line) < 11:
        raise ExchangeError("invalid input format.")
    when = line[:10]
    if not when[0].isdigit():
        return None
    match = _STRICT_DATE.match(when)
    if match is None:
        raise ExchangeError(f"Wrong date format: {when}")
    _, month, day = (int(part) for part in match.groups())
    if not (1 <= month <= 12 and 1 <= day <= 31):
        raise ExchangeError(f"Wrong date format: {when}")
    value = line[13:]
    amount = _atof(value)
    if amount < 0:
        raise ExchangeError("not a positive number.")
    if amount > MAX_AMOUNT:
        raise ExchangeError("too large a number.")
    return Entry(when, value, amount)


def convert_lines(
    lines: Iterable[str], table: RateTable
) -> Iterator[str | ExchangeError]:
    """Yield a result line for each entry, or the error that line raised."""
    for raw in lines:
        line = raw.rstrip("\n")
        try:
            entry = parse_entry(line)
            if entry is None:
                continue
            rate = table.rate_for(entry.date)
        except ExchangeError as err:
            yield err
            continue
        yield f"{entry.date} => {entry.value} = {entry.amount * rate:g}"


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: input file needed!", file=sys.stderr)
        return 1
    path = args[0]
    try:
        infile = open(path, encoding="utf-8")
    except OSError:
        print(f"Error: opening file: {path}", file=sys.stderr)
        return 1
    with infile:
        try:
            table = load_rates(DATABASE)
        except ExchangeError as err:
            print(f"Error: {err}", file=sys.stderr)
            return 1
        for result in convert_lines(infile, table):
            if isinstance(result, ExchangeError):
                print(f"Error: {result}", file=sys.stderr)
            else:
                print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
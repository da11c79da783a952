# numkit

numkit provides three small command-line tools that work with numbers. Each tool can also be used from Python.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## `numkit-btc`: convert amounts with historical rates

```
numkit-btc input.txt
```

The tool reads exchange rates from `data.csv` in the current directory. The first ten characters of each line are a `YYYY-MM-DD` date. One separator character follows, and the rest of the line is the rate. Empty lines are skipped.

Each line of the input file has the form `date | value`:

- Lines whose first character is not a digit, such as a header line, are skipped silently.
- A line without `|`, or shorter than 11 characters, is an error.
- A date with a month outside 1–12 or a day outside 1–31 is an error.
- A value below 0 or above 1000 is an error.

For each valid line the tool prints `date => value = result`, where the result is the value multiplied by the rate. When a date is not in the table, the tool uses the closest earlier date that is. A date earlier than the first date in the table gives the error `date too old!`.

Errors on individual lines are printed to stderr as `Error: ...`, and processing continues with the next line. The exit status is 1 only when the argument is missing, when the input file cannot be opened, or when `data.csv` cannot be read or is empty. Otherwise it is 0.

From Python:

```python
from numkit.exchange import RateTable, convert_lines, load_rates, parse_entry

table = RateTable({"2011-01-03": 0.3, "2011-01-09": 0.32})
table.rate_for("2011-01-05")              # 0.3, taken from 2011-01-03

for result in convert_lines(["2011-01-05 | 10"], table):
    print(result)                         # 2011-01-05 => 10 = 3
```

- `load_rates(path)` reads a rate file into a `RateTable`.
- `parse_entry(line)` returns an `Entry` with the fields `date`, `value` and `amount`. For a header line it returns `None`.
- `convert_lines` yields a result string for each valid line. For an invalid line it yields the `ExchangeError` instead of raising it.

## `numkit-rpn`: evaluate reverse Polish notation

```
numkit-rpn "8 9 * 9 - 9 - 9 - 4 - 1 +"
```

Operands are single digits, and the operators are `+`, `-`, `*` and `/`. Spaces are ignored. Any other character is an error, and so is an expression shorter than three characters once the spaces are removed.

Division is integer division that truncates toward zero. Dividing by zero leaves the left operand unchanged.

```python
from numkit.rpn import evaluate

evaluate("1 2 * 2 / 2 * 2 4 - +")   # 0
```

A malformed expression raises `RPNError`. The command prints the error to stderr and exits with status 1.

## `numkit-pmerge`: merge-insertion sort

```
numkit-pmerge 3 5 9 7 4
```

Every argument must consist only of digits, `+` and `-`. The tool prints the values before and after sorting, then how long the sort took with a list-based implementation and with a deque-based one. Values are stored as 32-bit signed integers.

```python
from numkit.pmerge import merge_insertion_sort, merge_insertion_sort_deque, parse_values

values = parse_values(["3", "5", "9", "7", "4"])
merge_insertion_sort(values)         # [3, 4, 5, 7, 9]
merge_insertion_sort_deque(values)   # deque([3, 4, 5, 7, 9])
```

Bad arguments raise `InputError`. The command prints the error to stderr and exits with status 1.
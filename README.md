# philosim

The opening stage of a dining philosophers simulation. It checks the
command line and sets up the table with its forks and philosophers. It then
starts one thread per philosopher plus a monitor thread, and waits for them
all to finish.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
philo NB_PHILO TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MAX_MEALS]
```

Four or five arguments are accepted. Each one must be a whole number from 0
to 2147483647. A value that reads as zero must be written exactly as `0`.
Times are in milliseconds. If `MAX_MEALS` is left out, it is shown as `-1`.

Example:

```
$ philo 3 800 200 200
```

This prints the settings it read:

```
nbphilo = 3
time to die = 800
time to eat = 200
time to sleep = 200
howmanyeat = -1
```

It also prints a `monitor` line and one `routine for philo N` line for each
philosopher. These lines come from separate threads, so their order can
change from one run to the next.

Exit status:

- `0` on success.
- `1` if the arguments are wrong. In that case the program prints the reason
  (`Error: Too few arguments.`, `Error: Too much arguments.` or
  `Argument(s) not valid.`) followed by a usage line.

## What it does not do

No simulation takes place yet. The philosophers never pick up forks, eat,
sleep or die, and no meal count is kept. Each philosopher thread prints one
line saying that it has started, then stops. The monitor thread does the
same and does not watch for deaths or full philosophers.

## Library use

The argument lists below leave out the program name.

```python
import io

from philosim.parse import ArgumentError, parse_arguments
from philosim.table import end_simulation, init_table

args = ["2", "400", "100", "100"]
try:
    values = parse_arguments(args)  # [2, 400, 100, 100]
except ArgumentError as err:
    print(err)
else:
    out = io.StringIO()
    table = init_table(args, out)
    end_simulation(table)
    print(out.getvalue())
```

- `philosim.parse.parse_arguments(args)` returns the argument values as
  integers, or raises `ArgumentError`, a subclass of `ValueError`.
- `philosim.table.init_table(args, out=None)` builds a `Table` with its
  `Fork` and `Philosopher` objects and starts the threads. Output goes to
  `out`, or to standard output if `out` is not given. Philosopher `N` has
  fork `N` on the left and fork `N + 1` on the right. The last philosopher's
  right fork is fork 1.
- `philosim.table.end_simulation(table)` waits for every philosopher thread
  and then for the monitor.
- `philosim.table.routine(philo, out)` and `philosim.table.monitor(table, out)`
  are the functions the threads run.
- `philosim.numbers.atol(text)` reads an optional `+` or `-` sign followed by
  leading digits, and stops at the first character that is not a digit. It
  returns `0` when no digit follows the sign.
- `philosim.cli.main(argv=None)` runs the `philo` command and returns its
  exit status.
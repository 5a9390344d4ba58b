# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread and shares one fork with each neighbour. The main thread runs a
monitor that watches for a philosopher who has gone too long without eating.
The monitor can also stop the simulation once every philosopher has eaten a
given number of meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [meals]
```

The same command is available as `python -m philosophers.cli`.

- `number_of_philosophers`: 1 to 200.
- `time_to_die`: milliseconds a philosopher may go without starting a meal.
  It must not be 0.
- `time_to_eat`, `time_to_sleep`: durations in milliseconds.
- `meals` (optional): the simulation stops once every philosopher has eaten
  at least this many times. A value of 0 sets no target.

Every argument must be a plain non-negative decimal number no greater than
2147483647. Signs, spaces and empty arguments are rejected.

Each event is printed as `<milliseconds since start> <philosopher id> <action>`:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
200 3 has taken a fork
...
410 2 died
```

The possible actions are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Nothing more is printed after a death or after the
meal target is reached. Odd-numbered philosophers pick up their right fork
first and even-numbered ones their left fork first. A lone philosopher has only
one fork, so it takes it, waits and dies.

### Exit status

| Status | Meaning |
|--------|---------|
| 0 | the simulation finished |
| 1 | wrong number of arguments (usage is printed) |
| 2 | invalid arguments, or a philosopher count outside 1-200 |
| 4 | a thread could not be started |

## Library use

```python
import sys
from philosophers.args import parse_args
from philosophers.cli import run

config = parse_args(["5", "800", "200", "200", "7"])
philosophers = run(config, sys.stdout)
print([p.meal_state()[1] for p in philosophers])
```

- `philosophers.args`: `parse_number`, `is_valid_args` and `parse_args`.
  `parse_args` returns a frozen `Config` and raises `ArgumentError`, whose
  `exit_code` is the status the command would return.
- `philosophers.table`: `Table` holds the start time, the stop flag and the
  serialised output (`print_status`, `announce_death`, `stop`, `stopped`,
  `elapsed`, `precise_sleep`). `current_millis` reads a monotonic clock.
- `philosophers.philosopher`: `Philosopher`, whose `run` is the thread body and
  whose `meal_state` returns `(last_meal_millis, meals_eaten)`.
- `philosophers.monitor`: `check_death`, `all_full` and the polling loop
  `monitor`.
- `philosophers.cli`: `build_philosophers`, `run` and `main`.

## Tests

```
pip install .[test]
pytest
```
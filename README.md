# dining

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread and repeatedly thinks, picks up the two forks beside them,
eats and sleeps. A monitor thread stops the simulation when a philosopher
has gone too long without eating, or when every philosopher has eaten the
required number of meals.

## Installation

```
pip install .
```

## Command line

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [meals_required]
```

The same command is available as `python -m dining.cli`.

All times are in milliseconds and every value must be positive. With the
optional last argument, a philosopher stops once they have eaten that many
times, and the simulation ends when all of them have. If the arguments are
wrong, `Invalid arguments` is written to standard error and the exit
status is 1; otherwise the exit status is 0.

Each state change is printed as one line: the milliseconds since the
start, the philosopher's number (counted from 1) and the state, for
example:

```
0 1 is thinking
0 2 is thinking
0 2 has taken a fork
```

The states are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Once the simulation has stopped, no more lines
are printed. A lone philosopher takes their only fork, waits
`time_to_die` milliseconds and prints `died`. When the monitor finds a
starving philosopher it stops the simulation at once, so output simply
ends there.

Example: five philosophers who must each eat seven times.

```
philo 5 800 200 200 7
```

## As a library

```python
import io

from dining.parsing import parse_args
from dining.simulation import Simulation

settings = parse_args(["4", "410", "200", "200", "3"])
out = io.StringIO()
Simulation(settings, output=out).run()
print(out.getvalue())
```

- `dining.parsing.parse_args(args)` takes the arguments after the program
  name and returns a frozen `Settings` (`num_philos`, `time_to_die`,
  `time_to_eat`, `time_to_sleep`, `meals_required`, the last `None` when
  not given). It raises `ArgumentError`, a `ValueError`, when there are
  not four or five arguments or a value is not positive.
- Numbers are read leniently by `c_atoi` and `c_atol`: leading whitespace
  and one sign are accepted, reading stops at the first non-digit, and text
  without digits reads as 0. `c_atoi` wraps to a signed 32-bit value;
  `c_atol` saturates at the signed 64-bit limits.
- `dining.simulation.Simulation(settings, output=None)` writes to
  standard output unless another text stream is given. `run()` starts the
  philosopher threads and the monitor, and returns when all have finished.

## Tests

```
pip install ".[test]"
pytest
```
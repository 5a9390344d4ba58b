"""Command-line entry point that seats the philosophers and runs the meal."""

from __future__ import annotations

import os
import sys
import threading
from typing import Sequence, TextIO

from philosophers.args import USAGE_EXIT_CODE, ArgumentError, Config, parse_args
from philosophers.monitor import monitor
from philosophers.philosopher import Philosopher
from philosophers.table import Table

THREAD_EXIT_CODE = 4


def build_philosophers(config: Config, table: Table) -> list[Philosopher]:
    """Seat the philosophers around the table, one fork between neighbours."""
    count = config.philosophers
    forks = [threading.Lock() for _ in range(count)]
    return [
        Philosopher(
            position + 1,
            forks[position],
            forks[(position + 1) % count],
            table,
            config.time_to_die,
            config.time_to_eat,
            config.time_to_sleep,
        )
        for position in range(count)
    ]


def run(config: Config, out: TextIO | None = None) -> list[Philosopher]:
    """Run one simulation to its end and return the philosophers."""
    table = Table(out)
    philosophers = build_philosophers(config, table)
    threads = [
        threading.Thread(target=p.run, name=f"philosopher-{p.identifier}", daemon=True)
        for p in philosophers
    ]
    for thread in threads:
        thread.start()
    monitor(table, philosophers, config.time_to_die, config.meal_target)
    for thread in threads:
        thread.join()
    return philosophers


def _program_name() -> str:
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "philosophers"


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        config = parse_args(argv)
    except ArgumentError as exc:
        if exc.exit_code == USAGE_EXIT_CODE:
            print(f"Usage: {_program_name()} number t_die t_eat t_sleep [meals]")
        else:
            print(exc)
        return exc.exit_code
    try:
        run(config, sys.stdout)
    except RuntimeError:
        print("Error: Thread creation failed")
        return THREAD_EXIT_CODE
    return 0


if __name__ == "__main__":
    sys.exit(main())
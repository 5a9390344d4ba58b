"""Watcher that ends the simulation on a death or when everyone has eaten."""

from __future__ import annotations

import time
from typing import Sequence

from philosophers.philosopher import Philosopher
from philosophers.table import Table, current_millis


def check_death(table: Table, philosopher: Philosopher, time_to_die: int) -> bool:
    """Announce the philosopher's death if it starved; return whether it did."""
    last_meal, _ = philosopher.meal_state()
    if current_millis() - last_meal > time_to_die:
        table.announce_death(philosopher.identifier)
        return True
    return False


def all_full(philosophers: Sequence[Philosopher], meal_target: int | None) -> bool:
    """True when a positive meal target is set and everyone has reached it."""
    if meal_target is None or meal_target <= 0:
        return False
    return all(p.meal_state()[1] >= meal_target for p in philosophers)


def monitor(
    table: Table,
    philosophers: Sequence[Philosopher],
    time_to_die: int,
    meal_target: int | None,
) -> None:
    """Poll the philosophers every millisecond until the table stops."""
    while True:
        for philosopher in philosophers:
            check_death(table, philosopher, time_to_die)
            if table.stopped():
                return
        if all_full(philosophers, meal_target):
            table.stop()
            return
        time.sleep(0.001)
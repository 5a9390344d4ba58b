"""A philosopher thread body: take forks, eat, sleep, think."""

from __future__ import annotations

import threading

from philosophers.table import Table, current_millis

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"


class Philosopher:
    """One diner sharing a fork on each side with its neighbours."""

    def __init__(
        self,
        identifier: int,
        left_fork: threading.Lock,
        right_fork: threading.Lock,
        table: Table,
        time_to_die: int,
        time_to_eat: int,
        time_to_sleep: int,
    ) -> None:
        self.identifier = identifier
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.table = table
        self.time_to_die = time_to_die
        self.time_to_eat = time_to_eat
        self.time_to_sleep = time_to_sleep
        self._meal_lock = threading.Lock()
        self._last_meal = table.start_time
        self._meals_eaten = 0

    def meal_state(self) -> tuple[int, int]:
        """Return ``(last_meal_millis, meals_eaten)`` consistently."""
        with self._meal_lock:
            return self._last_meal, self._meals_eaten

    def take_forks(self) -> None:
        """Take both forks; odd philosophers start with the right one."""
        if self.identifier % 2:
            order = (self.right_fork, self.left_fork)
        else:
            order = (self.left_fork, self.right_fork)
        for fork in order:
            fork.acquire()
            self.table.print_status(self.identifier, TAKEN_FORK)

    def release_forks(self) -> None:
        self.right_fork.release()
        self.left_fork.release()

    def eat(self) -> None:
        self.table.print_status(self.identifier, EATING)
        with self._meal_lock:
            self._last_meal = current_millis()
            self._meals_eaten += 1
        self.table.precise_sleep(self.time_to_eat)

    def run(self) -> None:
        """Dine until the table stops."""
        if self.left_fork is self.right_fork:
            self.table.print_status(self.identifier, TAKEN_FORK)
            self.table.precise_sleep(self.time_to_die)
            return
        while not self.table.stopped():
            self.take_forks()
            try:
                self.eat()
            finally:
                self.release_forks()
            self.table.print_status(self.identifier, SLEEPING)
            self.table.precise_sleep(self.time_to_sleep)
            self.table.print_status(self.identifier, THINKING)
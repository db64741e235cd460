"""Threaded dining philosophers simulation with a monitoring loop."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from dining.parsing import Settings

_POLL_SECONDS = 0.0005
_MONITOR_SECONDS = 0.001
_START_DELAY_SECONDS = 0.002
_ODD_STAGGER_MS = 0.2


def now_ms() -> int:
    """Return wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(ms: float) -> None:
    """Sleep for ``ms`` milliseconds, truncated to whole milliseconds."""
    end = now_ms() + int(ms)
    while now_ms() < end:
        time.sleep(_POLL_SECONDS)


class Philosopher:
    """One philosopher sitting between two forks."""

    def __init__(self, simulation: Simulation, index: int) -> None:
        count = len(simulation.forks)
        self.simulation = simulation
        self.id = index + 1
        self.left_index = index
        self.right_index = (index + 1) % count
        self.left_fork = simulation.forks[self.left_index]
        self.right_fork = simulation.forks[self.right_index]
        self.last_meal = now_ms()
        self.meals_eaten = 0
        self.meal_lock = threading.Lock()

    def take_forks(self) -> None:
        """Pick up both forks, lower-numbered one first."""
        if self.id % 2 == 1:
            precise_sleep(_ODD_STAGGER_MS)
        if self.left_index < self.right_index:
            order = (self.left_fork, self.right_fork)
        else:
            order = (self.right_fork, self.left_fork)
        for fork in order:
            fork.acquire()
            self.simulation.log(self, "has taken a fork")

    def eat(self) -> None:
        """Eat while holding both forks, then put them down."""
        with self.meal_lock:
            self.last_meal = now_ms()
            self.simulation.log(self, "is eating")
        precise_sleep(self.simulation.settings.time_to_eat)
        with self.meal_lock:
            self.meals_eaten += 1
        self.left_fork.release()
        self.right_fork.release()

    def run(self) -> None:
        """Think, eat and sleep until the simulation stops or meals are done."""
        sim = self.simulation
        settings = sim.settings
        while not sim.is_stopped():
            sim.log(self, "is thinking")
            if sim.is_stopped():
                break
            if settings.num_philos == 1:
                sim.log(self, "has taken a fork")
                precise_sleep(settings.time_to_die)
                sim.log(self, "died")
                return
            self.take_forks()
            self.eat()
            if (
                settings.meals_required is not None
                and self.meals_eaten >= settings.meals_required
            ):
                break
            sim.log(self, "is sleeping")
            precise_sleep(settings.time_to_sleep)


class Simulation:
    """Shared table state: forks, philosophers, stop flag and log."""

    def __init__(self, settings: Settings, output: TextIO | None = None) -> None:
        self.settings = settings
        self.output = output if output is not None else sys.stdout
        self.start_time = now_ms()
        self._stopped = False
        self._stop_lock = threading.Lock()
        self._log_lock = threading.Lock()
        self.forks = [threading.Lock() for _ in range(settings.num_philos)]
        self.philosophers = [Philosopher(self, i) for i in range(settings.num_philos)]

    def is_stopped(self) -> bool:
        with self._stop_lock:
            return self._stopped

    def stop(self) -> None:
        with self._stop_lock:
            self._stopped = True

    def log(self, philosopher: Philosopher, state: str) -> bool:
        """Print a timestamped state line; return whether it was printed.

        Nothing is printed once the simulation has stopped. Logging a death
        stops the simulation.
        """
        with self._log_lock:
            if self.is_stopped():
                return False
            if state == "died":
                self.stop()
            timestamp = now_ms() - self.start_time
            print(f"{timestamp} {philosopher.id} {state}", file=self.output, flush=True)
            return True

    def check_death(self, philosopher: Philosopher, now: int) -> bool:
        """Stop the simulation if ``philosopher`` starved; return whether it did."""
        required = self.settings.meals_required
        with philosopher.meal_lock:
            since_meal = now - philosopher.last_meal
            complete = required is not None and philosopher.meals_eaten >= required
        if since_meal > self.settings.time_to_die and not complete:
            self.stop()
            self.log(philosopher, "died")
            return True
        return False

    def all_ate_enough(self) -> bool:
        """Return whether every philosopher has eaten the required meals."""
        required = self.settings.meals_required
        if required is None:
            return False
        done = True
        for philosopher in self.philosophers:
            with philosopher.meal_lock:
                if philosopher.meals_eaten < required:
                    done = False
        return done

    def monitor(self) -> None:
        """Watch for starvation or completion until the simulation stops."""
        while not self.is_stopped():
            now = now_ms()
            if self.all_ate_enough():
                self.stop()
                return
            for philosopher in self.philosophers:
                self.check_death(philosopher, now)
                if self.is_stopped():
                    return
            time.sleep(_MONITOR_SECONDS)

    def run(self) -> None:
        """Start every philosopher, monitor them, and wait for all to finish."""
        threads = [
            threading.Thread(target=philosopher.run, name=f"philosopher-{philosopher.id}")
            for philosopher in self.philosophers
        ]
        for thread in threads:
            thread.start()
        time.sleep(_START_DELAY_SECONDS)
        monitor = threading.Thread(target=self.monitor, name="monitor")
        monitor.start()
        monitor.join()
        for thread in threads:
            thread.join()
"""The dining table: forks, philosophers and their threads."""

from __future__ import annotations

import sys
import threading
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

from philosim.numbers import atol

_output_lock = threading.Lock()


def _emit(out: TextIO, text: str) -> None:
    with _output_lock:
        out.write(text)


@dataclass
class Fork:
    """A fork shared by two neighbouring philosophers."""

    id: int
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


@dataclass
class Philosopher:
    """A philosopher seated between two forks."""

    id: int
    left_fork: Fork
    right_fork: Fork
    table: Table = field(repr=False)
    time_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    thread: threading.Thread | None = field(default=None, repr=False)


@dataclass
class Table:
    """The simulation settings together with its forks and philosophers."""

    nb_philo: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    how_many_eat: int = -1
    philos: list[Philosopher] = field(default_factory=list)
    forks: list[Fork] = field(default_factory=list)
    monitor: threading.Thread | None = field(default=None, repr=False)


def routine(philo: Philosopher, out: TextIO) -> Philosopher:
    """Run one philosopher's routine."""
    _emit(out, f"routine for philo {philo.id}\n")
    return philo


def monitor(table: Table, out: TextIO) -> Table:
    """Run the monitor that watches over the table."""
    _emit(out, "monitor\n")
    return table


def init_table(args: Sequence[str], out: TextIO | None = None) -> Table:
    """Build the table from the arguments and start all threads.

    ``args`` excludes the program name. A missing fifth argument leaves
    ``how_many_eat`` at -1.
    """
    stream = sys.stdout if out is None else out
    table = Table(
        nb_philo=atol(args[0]),
        time_to_die=atol(args[1]),
        time_to_eat=atol(args[2]),
        time_to_sleep=atol(args[3]),
        how_many_eat=atol(args[4]) if len(args) > 4 else -1,
    )

    table.monitor = threading.Thread(target=monitor, args=(table, stream))
    table.monitor.start()

    table.forks = [Fork(id=number) for number in range(1, table.nb_philo + 1)]

    for index, left in enumerate(table.forks):
        right = table.forks[(index + 1) % len(table.forks)]
        philo = Philosopher(id=index + 1, left_fork=left, right_fork=right, table=table)
        table.philos.append(philo)
        philo.thread = threading.Thread(target=routine, args=(philo, stream))
        philo.thread.start()

    _emit(
        stream,
        f"nbphilo = {table.nb_philo}\n"
        f"time to die = {table.time_to_die}\n"
        f"time to eat = {table.time_to_eat}\n"
        f"time to sleep = {table.time_to_sleep}\n"
        f"howmanyeat = {table.how_many_eat}\n",
    )
    return table


def end_simulation(table: Table) -> None:
    """Wait for every philosopher thread and then the monitor to finish."""
    for philo in table.philos:
        if philo.thread is not None:
            philo.thread.join()
    if table.monitor is not None:
        table.monitor.join()
import io

import pytest

from philosim.table import Fork, Table, end_simulation, init_table, monitor, routine


@pytest.fixture
def finished_table():
    out = io.StringIO()
    table = init_table(["3", "800", "200", "100"], out)
    end_simulation(table)
    return table, out.getvalue()


def test_settings_are_read(finished_table):
    table, _ = finished_table
    assert (table.nb_philo, table.time_to_die, table.time_to_eat, table.time_to_sleep) == (
        3,
        800,
        200,
        100,
    )
    assert table.how_many_eat == -1


def test_meal_limit_is_read():
    out = io.StringIO()
    table = init_table(["2", "10", "20", "30", "4"], out)
    end_simulation(table)
    assert table.how_many_eat == 4
    assert "howmanyeat = 4\n" in out.getvalue()


def test_forks_are_numbered_from_one(finished_table):
    table, _ = finished_table
    assert [fork.id for fork in table.forks] == [1, 2, 3]


def test_forks_are_shared_around_the_table(finished_table):
    table, _ = finished_table
    count = len(table.philos)
    for index, philo in enumerate(table.philos):
        assert philo.left_fork is table.forks[index]
        assert philo.right_fork is table.forks[(index + 1) % count]
        assert philo.table is table
        assert philo.id == index + 1


def test_all_threads_finish(finished_table):
    table, _ = finished_table
    assert not table.monitor.is_alive()
    assert all(not philo.thread.is_alive() for philo in table.philos)


def test_output_lines(finished_table):
    table, text = finished_table
    lines = text.splitlines()
    assert lines.count("monitor") == 1
    for philo in table.philos:
        assert lines.count(f"routine for philo {philo.id}") == 1
    assert "nbphilo = 3\ntime to die = 800\ntime to eat = 200\n" in text
    assert "time to sleep = 100\nhowmanyeat = -1\n" in text


def test_no_philosophers_still_runs_monitor():
    out = io.StringIO()
    table = init_table(["0", "1", "1", "1"], out)
    end_simulation(table)
    assert table.philos == []
    assert out.getvalue().splitlines().count("monitor") == 1


def test_single_philosopher_uses_one_fork_twice():
    out = io.StringIO()
    table = init_table(["1", "1", "1", "1"], out)
    end_simulation(table)
    assert table.philos[0].left_fork is table.philos[0].right_fork


def test_routine_reports_and_returns_philosopher(finished_table):
    table, _ = finished_table
    out = io.StringIO()
    philo = table.philos[1]
    assert routine(philo, out) is philo
    assert out.getvalue() == "routine for philo 2\n"


def test_monitor_reports_and_returns_table():
    table = Table(nb_philo=0, time_to_die=1, time_to_eat=1, time_to_sleep=1)
    out = io.StringIO()
    assert monitor(table, out) is table
    assert out.getvalue() == "monitor\n"


def test_fork_lock_is_usable():
    fork = Fork(id=1)
    with fork.lock:
        assert fork.lock.locked()
    assert not fork.lock.locked()
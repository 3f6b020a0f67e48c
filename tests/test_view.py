from __future__ import annotations

from datetime import date, datetime

from task_dashboard.models import Priority
from task_dashboard.store import TaskStore
from task_dashboard.view import day_key, filter_by_date, marked_dates, same_day


def test_day_key_drops_time_of_day() -> None:
    assert day_key(datetime(2024, 6, 1, 23, 59)) == date(2024, 6, 1)
    assert day_key(date(2024, 6, 1)) == date(2024, 6, 1)
    assert type(day_key(datetime(2024, 6, 1))) is date


def test_same_day_between_date_and_datetime() -> None:
    assert same_day(date(2024, 6, 1), datetime(2024, 6, 1, 18))
    assert not same_day(datetime(2024, 6, 1, 23, 59), datetime(2024, 6, 2, 0, 0))


def test_filter_without_selection_returns_all_in_order() -> None:
    store = TaskStore()
    for day in (3, 1, 2):
        store.create(f"t{day}", "s", "d", date(2024, 6, day))
    tasks = store.all()

    visible = filter_by_date(tasks, None)

    assert visible == list(tasks)
    assert visible is not tasks


def test_filter_includes_same_day_with_other_time() -> None:
    store = TaskStore()
    morning = store.create("morning", "s", "d", datetime(2024, 6, 1, 8, 0))
    store.create("next day", "s", "d", datetime(2024, 6, 2, 8, 0))

    assert filter_by_date(store.all(), datetime(2024, 6, 1, 20, 0)) == [morning]
    assert filter_by_date(store.all(), date(2024, 6, 1)) == [morning]


def test_filter_does_not_mutate_input() -> None:
    store = TaskStore()
    store.create("a", "s", "d", date(2024, 6, 1))
    store.create("b", "s", "d", date(2024, 6, 2))
    tasks = list(store.all())

    filter_by_date(tasks, date(2024, 6, 2))

    assert [task.title for task in tasks] == ["a", "b"]


def test_marked_dates_deduplicates_by_calendar_day() -> None:
    store = TaskStore()
    store.create("a", "s", "d", datetime(2024, 6, 1, 9))
    store.create("b", "s", "d", datetime(2024, 6, 1, 17))

    assert marked_dates(store.all()) == {date(2024, 6, 1)}


def test_marked_dates_empty() -> None:
    assert marked_dates([]) == set()


def test_dashboard_scenario() -> None:
    store = TaskStore()
    a = store.create("A", "s", "d", date(2024, 6, 1), Priority.HIGH)
    b = store.create("B", "s", "d", date(2024, 6, 1), Priority.LOW)
    c = store.create("C", "s", "d", date(2024, 6, 2), Priority.MEDIUM)

    assert filter_by_date([a, b, c], date(2024, 6, 1)) == [a, b]
    assert marked_dates([a, b, c]) == {date(2024, 6, 1), date(2024, 6, 2)}

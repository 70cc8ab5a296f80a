from datetime import date, time, timedelta

import pytest

from taskdesk.admin_panel import ValidationError
from taskdesk.employee_panel import EmployeePanel, sort_tasks
from taskdesk.schedule import Schedule
from taskdesk.task import Task
from taskdesk.users import Employee, UserAggregate, UserRepository

TODAY = date(2024, 5, 10)


def _task(title, deadline, created, status=False, priority="Niski", description="opis"):
    return Task(title, description, deadline, "1", created, status, priority)


@pytest.fixture
def panel():
    repo = UserRepository()
    employee = Employee(
        1, "jan", "password", "Jan", "Nowak", "jan@example.com", repository=repo
    )
    tasks = [
        _task("Raport", "2024-05-20", "t1", priority="Niski", description="opis raportu"),
        _task("Spotkanie", "2024-05-12", "t2", priority="Wysoki"),
        _task("raport roczny", "2024-05-15", "t3", status=True, priority="Średni"),
    ]
    repo.users_map[1] = UserAggregate(user=employee, tasks=tasks, schedule=Schedule(1))
    return EmployeePanel(employee)


def test_refresh_filters_case_insensitively(panel):
    titles = {t.title for t in panel.refresh_tasks("RAPORT")}
    assert titles == {"Raport", "raport roczny"}


def test_refresh_empty_pattern_returns_all(panel):
    assert len(panel.refresh_tasks("")) == 3


def test_refresh_puts_done_tasks_last(panel):
    tasks = panel.refresh_tasks("", "Deadline ↑")
    assert [t.status for t in tasks] == [False, False, True]
    assert tasks[0].title == "Spotkanie"


def test_invalid_regex_raises(panel):
    with pytest.raises(ValidationError):
        panel.refresh_tasks("(")


def test_sort_tasks_priority_desc():
    tasks = [
        _task("a", "2024-01-02", "x", priority="Niski"),
        _task("b", "2024-01-03", "y", priority="Wysoki"),
        _task("c", "2024-01-01", "z", priority="Wysoki"),
    ]
    assert [t.title for t in sort_tasks(tasks, "Priorytet ↓")] == ["c", "b", "a"]


def test_set_task_status(panel):
    panel.set_task_status("t1", True)
    done = [t.title for t in panel.refresh_tasks("") if t.status]
    assert set(done) == {"Raport", "raport roczny"}


def test_set_task_status_unknown_timestamp_changes_nothing(panel):
    before = [t.status for t in panel.refresh_tasks("")]
    panel.set_task_status("missing", True)
    assert [t.status for t in panel.refresh_tasks("")] == before


def test_visible_days_follow_offset(panel):
    panel.next_days()
    days = panel.visible_days(TODAY)
    assert days[0] == TODAY + timedelta(days=3)
    assert len(days) == 3


def test_prev_days_never_before_today(panel):
    assert panel.prev_days() == 0
    panel.next_days()
    assert panel.prev_days() == 0


def test_availability_defaults_to_zero(panel):
    ranges = panel.availability_ranges(TODAY)
    assert [(s, e) for _, s, e in ranges] == [(0, 0)] * 3


def test_save_schedule_round_trip(panel):
    ranges = panel.save_schedule([(8, 12), (time(9), time(10)), (5, 5)], TODAY)
    assert ranges[0] == (TODAY, 8, 12)
    assert ranges[1][1:] == (9, 10)
    assert ranges[2][1:] == (0, 0)
    schedule = panel.repository.get_user_schedule(1)
    assert schedule.get_availability(TODAY.isoformat()) == list(range(8, 13))


def test_save_schedule_requires_three_ranges(panel):
    with pytest.raises(ValueError):
        panel.save_schedule([(8, 12)], TODAY)


def test_task_description(panel):
    assert panel.task_description("Raport") == "opis raportu"
    assert panel.task_description("Nieznane") == "Brak opisu"
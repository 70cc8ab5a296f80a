import pytest

from taskdesk.task import Task


def make_task(**overrides):
    values = dict(
        title="Raport",
        description="Opis zadania",
        deadline="2030-05-01",
        assigned_to="2",
        created_date="2030-04-01T10:00:00",
        status=False,
        priority="Wysoki",
    )
    values.update(overrides)
    return Task(**values)


def test_to_string_joins_fields_with_semicolons():
    task = make_task(status=True)
    assert task.to_string() == "Raport;Opis zadania;2030-05-01;2;2030-04-01T10:00:00;1;Wysoki"


def test_to_string_writes_zero_for_open_task():
    assert make_task(status=False).to_string().split(";")[5] == "0"


@pytest.mark.parametrize("status", [True, False])
def test_round_trip(status):
    task = make_task(status=status)
    assert Task.from_string(task.to_string()) == task


def test_from_string_reads_all_fields():
    task = Task.from_string("T;D;2030-01-02;5;stamp;1;Niski")
    assert task.title == "T"
    assert task.description == "D"
    assert task.deadline == "2030-01-02"
    assert task.assigned_to == "5"
    assert task.created_date == "stamp"
    assert task.status is True
    assert task.priority == "Niski"


def test_from_string_missing_fields_are_empty():
    task = Task.from_string("T;D")
    assert task.title == "T"
    assert task.description == "D"
    assert task.deadline == ""
    assert task.priority == ""
    assert task.status is False


def test_from_string_ignores_extra_fields():
    task = Task.from_string("T;D;dl;1;stamp;0;Niski;extra;more")
    assert task.priority == "Niski"


def test_from_string_status_only_one_is_true():
    assert Task.from_string("T;D;dl;1;stamp;yes;Niski").status is False
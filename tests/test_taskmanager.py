from taskdesk.task import Task
from taskdesk.taskmanager import TaskManager


def make_task(title, assigned_to="1", status=False):
    return Task(title, "opis", "2030-01-01", assigned_to, "stamp-" + title, status, "Niski")


def test_missing_file_gives_no_tasks(tmp_path):
    manager = TaskManager(tmp_path / "tasks.txt")
    assert manager.tasks == []


def test_add_task_persists(tmp_path):
    path = tmp_path / "tasks.txt"
    manager = TaskManager(path)
    task = make_task("Raport")
    manager.add_task(task)
    assert path.read_text(encoding="utf-8") == task.to_string() + "\n"
    assert TaskManager(path).tasks == [task]


def test_load_skips_blank_and_unseparated_lines(tmp_path):
    path = tmp_path / "tasks.txt"
    task = make_task("A")
    path.write_text("\nnoise\n" + task.to_string() + "\n", encoding="utf-8")
    assert TaskManager(path).tasks == [task]


def test_search_matches_title_or_assignee(tmp_path):
    manager = TaskManager(tmp_path / "tasks.txt")
    first = make_task("Raport roczny", assigned_to="1")
    second = make_task("Spotkanie", assigned_to="7")
    third = make_task("Inne", assigned_to="2")
    for task in (first, second, third):
        manager.add_task(task)
    assert manager.search_tasks("Raport") == [first]
    assert manager.search_tasks("7") == [second]
    assert manager.search_tasks("") == [first, second, third]


def test_set_task_status_saves(tmp_path):
    path = tmp_path / "tasks.txt"
    manager = TaskManager(path)
    manager.add_task(make_task("A"))
    manager.set_task_status(0, True)
    assert TaskManager(path).tasks[0].status is True


def test_set_task_status_out_of_range_is_ignored(tmp_path):
    path = tmp_path / "tasks.txt"
    manager = TaskManager(path)
    manager.add_task(make_task("A"))
    manager.set_task_status(5, True)
    manager.set_task_status(-1, True)
    assert [task.status for task in TaskManager(path).tasks] == [False]
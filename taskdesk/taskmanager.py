"""A file-backed list of tasks."""

from __future__ import annotations

from pathlib import Path

from taskdesk.task import Task


class TaskManager:
    """Keeps tasks in memory and mirrors them to a text file, one per line."""

    def __init__(self, file_path: str | Path = "tasks.txt") -> None:
        self.file_path = Path(file_path)
        self._tasks: list[Task] = []
        self.load_tasks()

    def load_tasks(self) -> None:
        """Reload tasks from the file; a missing file gives no tasks."""
        self._tasks = []
        try:
            text = self.file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        self._tasks = [Task.from_string(line) for line in text.splitlines() if ";" in line]

    def save_tasks(self) -> None:
        """Write every task to the file, replacing its contents."""
        with self.file_path.open("w", encoding="utf-8") as out:
            for task in self._tasks:
                out.write(task.to_string() + "\n")

    def add_task(self, task: Task) -> None:
        """Append a task and save."""
        self._tasks.append(task)
        self.save_tasks()

    def search_tasks(self, filter_text: str) -> list[Task]:
        """Tasks whose title or assignee contains filter_text."""
        return [
            task
            for task in self._tasks
            if filter_text in task.title or filter_text in task.assigned_to
        ]

    @property
    def tasks(self) -> list[Task]:
        """The tasks currently held."""
        return self._tasks

    def set_task_status(self, index: int, ready: bool) -> None:
        """Set the done flag of the task at index and save; out-of-range is ignored."""
        if 0 <= index < len(self._tasks):
            self._tasks[index].status = ready
            self.save_tasks()
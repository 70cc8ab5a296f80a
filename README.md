# taskdesk

A small library for keeping track of a team's tasks and of when each
employee is available. Administrators create tasks and accounts and get a
suggestion of who should take a task. Employees mark their tasks done and
record the hours they can work.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `taskdesk.task`

`Task` is a dataclass with the fields `title`, `description`, `deadline`
(`yyyy-MM-dd`), `assigned_to`, `created_date`, `status` (done flag) and
`priority` (`Wysoki`, `Średni`, `Niski`).

- `Task.from_string(line)` parses seven `;`-separated fields. Missing
  fields become empty strings. The status is true only for `1`.
- `task.to_string()` writes the same form, with the status as `1` or `0`.

### `taskdesk.schedule`

`Schedule(user_id)` maps day keys (`yyyy-MM-dd`) to lists of available
hours.

- `set_availability(day, hours)` sets the hours for a day.
- `get_availability(day)` returns the hours for a day, or an empty list
  if none are set.
- `all_availability()` returns every day ordered by day key.
- `Schedule.from_file(user_id, file_path)` reads lines of the form
  `id;day;h1,h2,...` and keeps only the lines for `user_id`. A missing
  file gives an empty schedule.
- `clear_old_availability(days_to_keep, today=None)` drops valid dates
  that are more than `days_to_keep` days before `today`.

### `taskdesk.taskmanager`

`TaskManager(file_path="tasks.txt")` keeps a flat list of tasks and stores
them in a text file, one `Task.to_string()` line per task. It loads the
file when it is created. A missing file gives an empty list.

- `tasks` is the list of tasks it currently holds.
- `load_tasks()` reads the file again. Only lines that contain `;` are
  read.
- `save_tasks()` rewrites the whole file.
- `add_task(task)` appends a task and saves.
- `set_task_status(index, ready)` sets a task's done flag and saves. An
  index out of range is ignored.
- `search_tasks(filter_text)` returns the tasks whose title or assignee
  contains `filter_text`.

### `taskdesk.users`

- `User(user_id, login, password, role, first_name, last_name, email)`
  holds an account. `password` is stored as given, so it should be a hash.
  - `User.hash_password(password)` returns the SHA-256 hex digest of the
    UTF-8 text.
  - `user.log(login, password)` checks a login and a plain-text password.
  - `full_name` and `window_title()` are also available.
- `UserAggregate` holds a `user`, that user's `tasks` and a `schedule`.
- `UserRepository` holds aggregates in `users_map`, keyed by user id. It
  provides:
  - `get_user_aggregate`, `get_user_tasks`, `get_user_schedule` and
    `get_user_by_id`, which return `None` for an unknown id.
  - `find_user_id_by_login`.
  - `update_user`.
- `Admin(..., repository=...)` is a user with the role `admin`.
  - `new_task(assigned_user_id, title, description, deadline, priority)`
    adds an open task. The task is stamped with the current time, to the
    second. It raises `KeyError` for an unknown user.
  - `new_user(login, hashed_password, role, first_name, last_name, email)`
    adds an account under the highest id plus one and returns that id. It
    raises `LoginTakenError` if the login is already in use.
- `Employee(..., repository=...)` is a user with the role `employee`.
  - `change_task_status(timestamp, new_status)` changes the status of the
    employee's task with that creation stamp.
  - `set_availability(day, hours)` sets the employee's hours for a day.

### `taskdesk.admin_panel`

`AdminPanel(admin, repository=None)` provides the administrator's
operations. Without a `repository` it uses the admin's own.

- `employees()` returns `(id, full name)` for every employee, in id order.
- `suggest_assignee(deadline, today=None)` picks the best employee for a
  task due on `deadline`, or returns `None` if there are no employees.
  Each employee gets a score:
  - plus 1.0 for each free hour from today to the deadline, inclusive;
  - minus 0.7 for each task they already have due on that day;
  - minus 0.5 times the sum of those tasks' priority values.

  The highest score wins. On a tie, the lowest id wins.
- `save_task(title, description, deadline, priority, assigned_user_id)`
  creates a task. `deadline` is a `datetime.date`. It rejects an empty
  title, or a `;` in the title or description.
- `add_employee(first_name, last_name, email, login, password, role)`
  creates an account and returns its id. It rejects:
  - empty fields;
  - a malformed e-mail address;
  - a `;` in any field.

  It hashes the password before storing it.
- `search_tasks(pattern="", sort_option="")` matches a case-insensitive
  regular expression against each task's title, employee name, deadline,
  creation stamp and priority. It returns `TaskRow` objects, with open
  tasks first.
- `task_description(title, employee_name)` returns the description of
  that employee's task with that title, or `Brak opisu`.
- `prev_days()`, `next_days()` and `schedule_days(user_id, today=None)`
  page through an employee's availability three days at a time.
  `prev_days()` goes back no further than six days before today.

Rejected input raises `ValidationError`, which is a subclass of
`ValueError`. So does an invalid search pattern.

The module also provides these functions:

- `priority_value(priority)`: `Wysoki` is 3, `Średni` is 2, `Niski` is 1
  and anything else is 0.
- `sort_task_list(tasks, sort_option)`.

### `taskdesk.employee_panel`

`EmployeePanel(employee, repository=None)` provides the employee's
operations.

- `refresh_tasks(search_text="", sort_option="")` returns the employee's
  tasks whose title matches a case-insensitive regular expression, sorted.
- `set_task_status(timestamp, status)` marks a task done or not done, by
  its creation stamp.
- `visible_days(today=None)` returns the three days currently shown.
- `availability_ranges(today=None)` returns `(day, first hour, last hour)`
  for each visible day. A day with nothing set gives `(day, 0, 0)`.
- `save_schedule(ranges, today=None)` takes exactly three `(start, end)`
  pairs. Each value is a `datetime.time` or a whole hour. The hours from
  start to end inclusive are stored for the matching day. A pair whose
  start is not before its end is skipped. It raises `ValueError` for the
  wrong number of pairs.
- `prev_days()` moves the three-day window back, never before today.
  `next_days()` moves it forward.
- `task_description(title)` returns the description of the first task
  with that title, or `Brak opisu`.

`sort_tasks(tasks, sort_option)` sorts a task list the same way as
`sort_task_list`.

## Sorting

The sort options are:

- `Deadline ↑`
- `Deadline ↓`
- `Priorytet ↑`
- `Priorytet ↓`

Any other value keeps the original order. Unfinished tasks always come
before finished ones.

## Example

```python
from datetime import date

from taskdesk.admin_panel import AdminPanel
from taskdesk.users import Admin, User, UserRepository

password = "password"
repo = UserRepository()
admin = Admin(0, "boss", User.hash_password(password), "Anna", "Nowak",
              "anna@example.com", repository=repo)
panel = AdminPanel(admin)

emp_id = panel.add_employee("Jan", "Kowalski", "jan@example.com", "jan",
                            password, "employee")
panel.save_task("Report", "Quarterly numbers", date(2030, 6, 30), "Wysoki", emp_id)
for row in panel.search_tasks("report", "Deadline ↑"):
    print(row.title, row.employee, row.deadline, row.ready)
```

## What it does not do

- There is no graphical interface, no login screen and no command-line
  program. The panels are plain objects to build an interface on.
- `UserRepository` lives only in memory. It cannot load or save users,
  their tasks or their availability. Only `TaskManager` writes to a file,
  and `Schedule.from_file` only reads one.
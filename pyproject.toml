[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskdesk"
version = "0.1.0"
description = "Task assignment and employee availability scheduling for small teams"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "scheduling", "availability", "employees", "assignment"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["taskdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

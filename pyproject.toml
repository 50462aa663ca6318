[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "taskdemos"
version = "0.1.0"
description = "Small demonstrations of a sorted list of people, an ordered step list, and plain, locked and blocking task queues"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "queue", "threading", "producer-consumer", "sorting", "examples"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taskdemos-people = "taskdemos.people:main"
taskdemos-task-manager = "taskdemos.task_manager:main"
taskdemos-simple-queue = "taskdemos.simple_queue:main"
taskdemos-locked-queue = "taskdemos.locked_queue:main"
taskdemos-blocking-queue = "taskdemos.blocking_queue:main"

[tool.setuptools.packages.find]
include = ["taskdemos*"]

[tool.pytest.ini_options]
addopts = "-ra"

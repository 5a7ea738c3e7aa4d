[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tasksservice"
version = "0.1.0"
description = "Task management service core: task storage, owner checks and request handling"
requires-python = ">=3.10"
keywords = ["tasks", "todo", "service", "sqlalchemy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "sqlalchemy>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["tasksservice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

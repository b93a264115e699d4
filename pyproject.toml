[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crudsched"
version = "0.1.0"
description = "Simulated FIFO and round-robin scheduling of SQLite CRUD tasks with deadline tracking"
requires-python = ">=3.10"
keywords = ["scheduling", "round-robin", "fifo", "deadline", "sqlite", "threads", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
crudsched = "crudsched.cli:main"
crudsched-demo = "crudsched.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["crudsched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

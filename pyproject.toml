[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "civoapi"
version = "0.1.0"
description = "Client library for the Civo cloud API: SSH keys, teams, users, volumes and webhooks"
requires-python = ">=3.10"
dependencies = []
keywords = ["civo", "cloud", "api", "client", "volumes", "webhooks", "ssh", "teams"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["civoapi"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

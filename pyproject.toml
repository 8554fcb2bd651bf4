[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "firststeps"
version = "0.1.0"
description = "Small building blocks: sums, greetings, a dictionary, a wallet, shapes, a counter, concurrent checks, URL racing and a string walker."
requires-python = ">=3.10"
dependencies = []
keywords = ["examples", "learning", "tdd", "concurrency", "http"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
firststeps-hello = "firststeps.hello:main"
firststeps-greeting = "firststeps.greeting:main"

[tool.hatch.build.targets.wheel]
packages = ["firststeps"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

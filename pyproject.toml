[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cookbook"
version = "0.1.0"
description = "Work queues, containers, string and text utilities, and small system tools"
requires-python = ">=3.10"
keywords = [
    "work-queue",
    "pipeline",
    "bimap",
    "multi-index",
    "flat-set",
    "linked-list",
    "string-algorithms",
    "formatting",
    "coroutine",
    "image",
]
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
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cookbook-listing = "cookbook.listing:main"
cookbook-greet = "cookbook.greeters:main"
cookbook-trading = "cookbook.trading:main"
cookbook-file-reading = "cookbook.file_reading:main"
cookbook-negate = "cookbook.negate:main"

[tool.hatch.build.targets.wheel]
packages = ["cookbook"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "buttplug_patterns"
version = "0.1.0"
description = "A composable library for generating intensity patterns for buttplug devices."
requires-python = ">=3.10"
dependencies = []
keywords = ["buttplug", "patterns", "waveforms", "haptics", "intensity", "composable"]
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
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["buttplug_patterns"]

[tool.hatch.build.targets.sdist]
include = ["buttplug_patterns", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

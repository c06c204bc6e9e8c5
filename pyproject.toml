[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sckit"
version = "2.0.0"
description = "Small utilities: string helpers, URI parsing, clocks, a timer wheel and a thread wrapper"
requires-python = ">=3.10"
dependencies = []
keywords = ["uri", "timer", "timer-wheel", "strings", "clock", "thread", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sckit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

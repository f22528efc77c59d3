[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fexplorer"
version = "0.1.0"
description = "A terminal file explorer with a directory tree, a file preview pane and a shell command prompt"
requires-python = ">=3.10"
keywords = ["file manager", "terminal", "tui", "explorer", "shell"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
    "Topic :: Utilities",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fexplorer = "fexplorer.manager:main"

[tool.hatch.build.targets.wheel]
packages = ["fexplorer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

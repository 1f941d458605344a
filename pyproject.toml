[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patterndemos"
version = "0.1.0"
description = "Small, runnable demonstrations of the Factory Method and Singleton design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = ["design patterns", "factory method", "singleton", "education", "examples"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patterndemos = "patterndemos.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["patterndemos"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridbot"
version = "0.1.0"
description = "Occupancy grid mapping, frontier exploration, PID control and wheel odometry for small differential-drive robots"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "occupancy-grid", "exploration", "bfs", "pid", "odometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gridbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"

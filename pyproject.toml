[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cognitheon"
version = "0.1.0"
description = "Mind-map canvas model: nodes, edges, selection, pan/zoom transforms, input state handling and JSON documents."
requires-python = ">=3.10"
dependencies = []
keywords = ["mind-map", "graph", "canvas", "diagram", "notes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cognitheon"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

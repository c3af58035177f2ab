[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logicgraph"
version = "0.8.0"
description = "Reactive logical entities and behaviours: gates, operations, toggles, triggers and conditionals over observable properties"
requires-python = ">=3.11"
dependencies = []
keywords = ["reactive", "logic", "gates", "behaviour", "entity", "graph"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logicgraph-deploy = "logicgraph.deploy:main"

[tool.hatch.build.targets.wheel]
packages = ["logicgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true

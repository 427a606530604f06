[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fluxor"
version = "0.1.0"
description = "Workflow and task models, placeholder expansion and expression evaluation for task-graph engines"
requires-python = ">=3.10"
dependencies = []
keywords = ["workflow", "pipeline", "task-graph", "expressions", "templating"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fluxor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

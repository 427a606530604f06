# fluxor

Building blocks for a workflow engine: workflow and task models, a small
expression language for `$var` and `${...}` placeholders, and task
executions with their states.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `fluxor.workflow`: `Workflow`, `Import`, `Imports` and `Source`. A
  workflow holds a `pipeline` task tree plus named `dependencies`.
  `Workflow.from_dict` builds one from an already decoded YAML or JSON
  mapping. `Workflow.all_tasks()` indexes every task by id and by name, and
  `Workflow.clone()` returns a deep copy of its structure. `Imports` offers
  `index_by_package()`, `is_unique()`, `pkg_path()` and `has_pkg_path()`.
- `fluxor.graph`: `Task`, `Action`, `Template` and `Transition`. `Task` has
  `from_dict()`, `clone()`, `is_async()` and `is_auto_pause()`.
- `fluxor.parameters`: `Parameter` and `Parameters`, the named values a
  workflow or task declares under `init` and `post`. `Parameters` has
  `add()`, `get()`, `to_dict()` and `from_dict()`.
- `fluxor.paths`: `resolve_path()` walks paths such as `user.name` or
  `data.users[1].email` through mappings, lists, tuples and object
  attributes; also `get_property()`, `get_array_element()`,
  `contains_expression_operators()` and `stringify()`.
- `fluxor.evaluator`: `evaluate()` for arithmetic, comparisons and
  parentheses, and `ExpressionEvaluator`, which adds `${len(x)}`,
  `${is nil(x)}` and regex matching `${~/value pattern/}`. A malformed
  expression evaluates to `None`.
- `fluxor.expander`: `expand()` walks dicts, lists, tuples and strings and
  replaces `$name`, `${path.to[0].value}` and `${a + b}` with values from a
  variable mapping; `expand_text()` does the same for one string.
- `fluxor.execution`: `Execution`, the `TaskState` enum and
  `new_execution()`, which creates a pending execution of a task with its
  subtasks and dependencies marked pending.

## Expanding values

```python
from fluxor.expander import expand

variables = {"user": {"name": "John", "age": 30}, "i": 5}

expand("Hello, ${user.name}!", variables)       # 'Hello, John!'
expand("${i + 1}", variables)                   # 6
expand({"next": "${user.age + 5}"}, variables)  # {'next': 35}
```

A string that is a single reference as a whole yields the value itself, of
whatever type. An unresolved `$name` inside text is left as it is; an
unresolved `${...}` inside text becomes an empty string.

## Evaluating expressions

```python
from fluxor.evaluator import ExpressionEvaluator, evaluate

evaluate("(x + y) * 2", {"x": 5, "y": 3})             # 16
evaluate("x / 4", {"x": 10})                          # 2.5

ev = ExpressionEvaluator()
ev.evaluate("{x < 10}", {"x": 5})                     # True
ev.evaluate("${len(users)}", {"users": ["a", "b"]})   # 2
ev.evaluate("${~/name [a-z]+/}", {"name": "john"})    # True
```

Division always gives a float; division by zero gives `inf`.

## Workflows and executions

```python
from fluxor.workflow import Workflow
from fluxor.execution import TaskState, new_execution

workflow = Workflow.from_dict({
    "name": "demo",
    "pipeline": {
        "id": "root",
        "name": "root",
        "tasks": [{"id": "a", "name": "first"}],
    },
})
sorted(workflow.all_tasks())       # ['a', 'first', 'root']

root = workflow.pipeline
execution = new_execution("p1", None, root)
execution.state                    # TaskState.PENDING
execution.dependencies             # {'a': TaskState.PENDING}
execution.start()
execution.complete()
execution.state                    # TaskState.COMPLETED
```

## What this package does not do

It models workflows and evaluates expressions, but it does not run them.
There is no scheduler, process runtime, session store or worker pool, no
registry of action services and no built-in actions, and no loading of
workflow files from disk: `Workflow.from_dict` takes a mapping you have
already decoded. There is no command-line program.
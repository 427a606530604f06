"""Task executions and the states a task passes through."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union

from .graph import Task


class TaskState(str, Enum):
    """The state of a single task execution."""

    PENDING = "pending"
    SCHEDULED = "scheduled"
    RUNNING = "running"
    WAIT_FOR_DEPENDENCIES = "waitForDependencies"
    WAIT_FOR_SUB_TASKS = "waitForSubTasks"
    COMPLETED = "completed"
    FAILED = "failed"
    PAUSED = "paused"
    SKIPPED = "skipped"

    def __str__(self) -> str:
        return self.value


@dataclass
class Execution:
    """One run of a task within a process."""

    id: str = ""
    process_id: str = ""
    parent_task_id: str = ""
    group_id: str = ""
    task_id: str = ""
    state: Optional[TaskState] = None
    data: dict[str, Any] = field(default_factory=dict)
    input: Any = None
    output: Any = None
    error: str = ""
    scheduled_at: datetime = field(default_factory=datetime.now)
    started_at: Optional[datetime] = None
    paused_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    goto_task: str = ""
    meta: dict[str, Any] = field(default_factory=dict)
    depends_on: list[str] = field(default_factory=list)
    dependencies: dict[str, TaskState] = field(default_factory=dict)

    def start(self) -> None:
        """Mark the execution as running."""
        self.started_at = datetime.now()
        self.state = TaskState.RUNNING

    def complete(self) -> None:
        """Mark the execution as completed."""
        self.completed_at = datetime.now()
        self.state = TaskState.COMPLETED

    def pause(self) -> None:
        """Mark the execution as paused."""
        self.paused_at = datetime.now()
        self.state = TaskState.PAUSED

    def fail(self, error: Union[BaseException, str, None]) -> None:
        """Mark the execution as failed, recording the error message if any."""
        self.completed_at = datetime.now()
        if error:
            self.error = str(error)
        self.state = TaskState.FAILED

    def schedule(self) -> None:
        """Stamp the execution with the current scheduling time."""
        self.scheduled_at = datetime.now()

    def merge(self, other: Optional["Execution"]) -> None:
        """Take over every field that ``other`` sets; merge its maps into ours."""
        if other is None:
            return
        if other.output is not None:
            self.output = other.output
        if other.goto_task:
            self.goto_task = other.goto_task
        if other.state:
            self.state = other.state
        if other.error:
            self.error = other.error
        if other.started_at is not None:
            self.started_at = other.started_at
        if other.completed_at is not None:
            self.completed_at = other.completed_at
        if other.paused_at is not None:
            self.paused_at = other.paused_at
        self.dependencies.update(other.dependencies)
        self.meta.update(other.meta)

    def skip(self) -> None:
        """Mark the execution as skipped."""
        self.state = TaskState.SKIPPED


def _execution_id(process_id: str, task_id: str) -> str:
    return f"{process_id}-{task_id}-{time.time_ns()}"


def new_execution(process_id: str, parent: Optional[Task], task: Task) -> Execution:
    """Create a pending execution of ``task`` tracking its subtasks and dependencies."""
    dependencies = {sub.id: TaskState.PENDING for sub in task.tasks}
    dependencies.update((dep, TaskState.PENDING) for dep in task.depends_on)
    execution = Execution(
        id=_execution_id(process_id, task.id),
        process_id=process_id,
        task_id=task.id,
        state=TaskState.PENDING,
        depends_on=task.depends_on,
        dependencies=dependencies,
    )
    if parent is not None:
        execution.parent_task_id = parent.id
        if parent.async_:
            execution.group_id = parent.id
    return execution
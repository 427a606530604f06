"""Task graph: tasks, their actions, templates and transitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .parameters import Parameter, Parameters


def _parse_parameters(data: Any) -> Parameters:
    if not data:
        return Parameters()
    if isinstance(data, Mapping):
        return Parameters.from_dict(data)
    return Parameters(
        Parameter(
            name=item["name"],
            value=item.get("value"),
            data_type=item.get("dataType", ""),
            location=item.get("location"),
            default=item.get("default"),
        )
        for item in data
    )


@dataclass
class Action:
    """A call of a service method with an input."""

    service: str = ""
    method: str = ""
    input: Any = None


@dataclass
class Transition:
    """Jump to ``task`` when the ``when`` condition holds."""

    when: str = ""
    task: str = ""


@dataclass
class Template:
    """A task to repeat for items picked by a selector."""

    task: Optional["Task"] = None
    selector: Optional[Parameters] = None


@dataclass
class Task:
    """A node of the workflow graph."""

    id: str = ""
    type_name: str = ""
    name: str = ""
    namespace: str = ""
    init: Parameters = field(default_factory=Parameters)
    when: str = ""
    action: Optional[Action] = None
    depends_on: list[str] = field(default_factory=list)
    tasks: list["Task"] = field(default_factory=list)
    post: Parameters = field(default_factory=Parameters)
    template: Optional[Template] = None
    goto: list[Transition] = field(default_factory=list)
    async_: bool = False
    auto_pause: Optional[bool] = None

    def is_async(self) -> bool:
        """Whether the subtasks of this task run concurrently."""
        return self.async_

    def is_auto_pause(self) -> bool:
        """Whether execution pauses automatically at this task."""
        return bool(self.auto_pause)

    def clone(self) -> "Task":
        """Return a deep copy of the task structure."""
        template = None
        if self.template is not None:
            template = Template(
                task=self.template.task.clone() if self.template.task else None,
                selector=self.template.selector,
            )
        action = None
        if self.action is not None:
            action = Action(
                service=self.action.service,
                method=self.action.method,
                input=self.action.input,
            )
        return Task(
            id=self.id,
            name=self.name,
            namespace=self.namespace,
            when=self.when,
            async_=self.async_,
            depends_on=list(self.depends_on),
            init=Parameters(self.init),
            action=action,
            tasks=[sub.clone() for sub in self.tasks],
            post=Parameters(self.post),
            template=template,
            goto=[Transition(when=t.when, task=t.task) for t in self.goto],
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Task":
        """Build a task from its JSON/YAML mapping form."""
        action_data = data.get("action")
        action = None
        if action_data is not None:
            action = Action(
                service=action_data.get("service", ""),
                method=action_data.get("method", ""),
                input=action_data.get("input"),
            )
        template_data = data.get("template")
        template = None
        if template_data is not None:
            task_data = template_data.get("task")
            selector = template_data.get("selector")
            template = Template(
                task=cls.from_dict(task_data) if task_data is not None else None,
                selector=_parse_parameters(selector) if selector is not None else None,
            )
        return cls(
            id=data.get("id", ""),
            type_name=data.get("typeName", ""),
            name=data.get("name", ""),
            namespace=data.get("namespace", ""),
            init=_parse_parameters(data.get("init")),
            when=data.get("when", ""),
            action=action,
            depends_on=list(data.get("dependsOn") or []),
            tasks=[cls.from_dict(sub) for sub in data.get("tasks") or []],
            post=_parse_parameters(data.get("post")),
            template=template,
            goto=[
                Transition(when=t.get("when", ""), task=t.get("task", ""))
                for t in data.get("goto") or []
            ],
            async_=bool(data.get("async", False)),
            auto_pause=data.get("autoPause"),
        )
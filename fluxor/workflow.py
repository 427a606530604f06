"""Workflow definitions and package imports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .graph import Task, _parse_parameters
from .parameters import Parameters


@dataclass
class Import:
    """A package import: short package name and full package path."""

    package: str = ""
    pkg_path: str = ""


class Imports(list):
    """An ordered collection of imports."""

    def index_by_package(self) -> dict[str, Import]:
        """Map package names to imports; later duplicates win."""
        return {item.package: item for item in self}

    def is_unique(self) -> bool:
        """Whether no two imports share a package name."""
        return len({item.package for item in self}) == len(self)

    def pkg_path(self, pkg: str) -> str:
        """Return the path of the first import named ``pkg``, or ''."""
        return next((item.pkg_path for item in self if item.package == pkg), "")

    def has_pkg_path(self, pkg_path: str) -> bool:
        """Whether some import has exactly this package path."""
        return any(item.pkg_path == pkg_path for item in self)


@dataclass
class Source:
    """Where a workflow was loaded from."""

    url: str = ""


@dataclass
class Workflow:
    """A workflow: a pipeline of tasks with shared parameters."""

    name: str = ""
    source: Optional[Source] = None
    description: str = ""
    type_name: str = ""
    imports: Imports = field(default_factory=Imports)
    version: str = ""
    init: Parameters = field(default_factory=Parameters)
    pipeline: Optional[Task] = None
    dependencies: dict[str, Optional[Task]] = field(default_factory=dict)
    post: Parameters = field(default_factory=Parameters)
    config: dict[str, Any] = field(default_factory=dict)
    auto_pause: Optional[bool] = None

    def all_tasks(self) -> dict[str, Task]:
        """Index every task of the pipeline and dependencies by id and by name."""
        tasks: dict[str, Task] = {}

        def traverse(task: Optional[Task]) -> None:
            if task is None or task.id in tasks:
                return
            tasks[task.id] = task
            tasks[task.name] = task
            for sub in task.tasks:
                traverse(sub)

        traverse(self.pipeline)
        for task in self.dependencies.values():
            traverse(task)
        return tasks

    def clone(self) -> "Workflow":
        """Return a deep copy of the workflow's structure."""
        return Workflow(
            name=self.name,
            description=self.description,
            version=self.version,
            init=Parameters(self.init),
            pipeline=self.pipeline.clone() if self.pipeline else None,
            dependencies={
                key: task.clone() if task else None
                for key, task in self.dependencies.items()
            },
            post=Parameters(self.post),
            config=dict(self.config),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Workflow":
        """Build a workflow from its JSON/YAML mapping form."""
        source = data.get("source")
        pipeline = data.get("pipeline")
        return cls(
            name=data.get("name", ""),
            source=Source(url=source.get("url", "")) if source is not None else None,
            description=data.get("description", ""),
            type_name=data.get("typeName", ""),
            imports=Imports(
                Import(package=item.get("package", ""), pkg_path=item.get("pkgPath", ""))
                for item in data.get("imports") or []
            ),
            version=data.get("version", ""),
            init=_parse_parameters(data.get("init")),
            pipeline=Task.from_dict(pipeline) if pipeline is not None else None,
            dependencies={
                key: Task.from_dict(value) if value is not None else None
                for key, value in (data.get("dependencies") or {}).items()
            },
            post=_parse_parameters(data.get("post")),
            config=dict(data.get("config") or {}),
            auto_pause=data.get("autoPause"),
        )
"""Workflow and task models, placeholder expansion, expression evaluation and task executions."""

__version__ = "0.1.0"
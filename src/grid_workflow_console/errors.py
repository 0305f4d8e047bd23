"""Error taxonomy for the console core."""

from __future__ import annotations


class ConsoleError(Exception):
    """Base class for errors raised by console operations."""


class InvalidSelection(ConsoleError):
    """An operation that needs an active workflow was attempted without one."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"No workflow selected; cannot {operation}")
        self.operation = operation


class UnknownParameter(ConsoleError, KeyError):
    """A parameter name that the active workflow does not declare."""

    def __init__(self, workflow: str, name: str) -> None:
        super().__init__(f"Workflow {workflow!r} has no parameter {name!r}")
        self.workflow = workflow
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class ExecutionFailed(ConsoleError):
    """Raised by an executor when a run cannot produce a result.

    The mock executor never raises this; a real backend integration does, and
    the execution controller turns it into a ``Failed`` state.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class IllegalTransitionError(ValueError):
    pass

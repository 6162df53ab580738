"""Optimistic state updates with revert on failure."""

from .commands import (
    AddRecordCommand,
    RemoveRecordCommand,
    UpdateRecordCommand,
    VoteCommand,
    VoteView,
)
from .coordinator import (
    CommandOutcome,
    FailurePolicy,
    OptimisticCommand,
    OptimisticUpdateCoordinator,
)

__all__ = [
    "AddRecordCommand",
    "CommandOutcome",
    "FailurePolicy",
    "OptimisticCommand",
    "OptimisticUpdateCoordinator",
    "RemoveRecordCommand",
    "UpdateRecordCommand",
    "VoteCommand",
    "VoteView",
]

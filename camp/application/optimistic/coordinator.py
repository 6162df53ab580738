"""Optimistic update coordinator.

Client-visible state is changed before the backend confirms it. Every
change is a command object that knows how to predict the new state, how to
commit it and how to undo the prediction. The coordinator owns the state,
serializes commands per key and restores the snapshot when a commit fails.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Generic, Hashable, Mapping, Optional, TypeVar

import logfire
from pydantic import BaseModel, ConfigDict

from camp.util.locks import KeyedLocks

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class FailurePolicy(str, Enum):
    """What a failed commit does after the state is reverted."""

    SILENT = "silent"  # log and report through CommandOutcome
    SURFACE = "surface"  # re-raise to the caller


class CommandOutcome(BaseModel):
    """Result of applying one command."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    committed: bool
    result: Any = None
    error: Optional[Exception] = None


class OptimisticCommand(ABC, Generic[K, V]):
    """One optimistic change to the value stored under ``key``."""

    policy: ClassVar[FailurePolicy] = FailurePolicy.SURFACE

    @property
    @abstractmethod
    def key(self) -> K:
        pass

    @abstractmethod
    def predict(self, current: Optional[V]) -> Optional[V]:
        """Value to show while the commit is in flight.

        Must not perform I/O.
        """
        pass

    @abstractmethod
    async def commit(self) -> Any:
        """Persist the change. Raises on failure."""
        pass

    def rollback(self, snapshot: Optional[V]) -> Optional[V]:
        """Value to restore after a failed commit."""
        return snapshot


class OptimisticUpdateCoordinator(Generic[K, V]):
    """Holds optimistic state and applies commands to it.

    Commands for the same key queue behind each other in arrival order.
    Commands for different keys run concurrently.
    """

    def __init__(self, initial: Optional[Mapping[K, V]] = None) -> None:
        self._state: dict[K, V] = dict(initial or {})
        self._locks: KeyedLocks[K] = KeyedLocks()

    def get(self, key: K) -> Optional[V]:
        """Currently displayed value of a key."""
        return self._state.get(key)

    def set(self, key: K, value: Optional[V]) -> None:
        """Replace a key's value with confirmed data, e.g. after a refresh."""
        self._write(key, value)

    def snapshot(self) -> dict[K, V]:
        return dict(self._state)

    async def apply(self, command: OptimisticCommand[K, V]) -> CommandOutcome:
        """Predict, commit and revert on failure.

        Returns:
            Outcome of the commit. Only SILENT commands report failures
            this way.

        Raises:
            Exception: Whatever a SURFACE command's commit raised, after the
                state was reverted
        """
        key = command.key
        async with self._locks.hold(key):
            snapshot = self._state.get(key)
            self._write(key, command.predict(snapshot))

            try:
                result = await command.commit()
            except Exception as e:
                self._write(key, command.rollback(snapshot))
                logfire.warn(
                    "Optimistic update reverted",
                    command=type(command).__name__,
                    key=str(key),
                    policy=command.policy.value,
                    error=str(e),
                )
                if command.policy == FailurePolicy.SURFACE:
                    raise
                return CommandOutcome(committed=False, error=e)

            return CommandOutcome(committed=True, result=result)

    def _write(self, key: K, value: Optional[V]) -> None:
        if value is None:
            self._state.pop(key, None)
        else:
            self._state[key] = value

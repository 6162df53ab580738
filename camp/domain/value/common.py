"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, hashable, compared by value.

    Hashability lets value objects such as ``ResourceKey`` key dicts.
    """

    model_config = ConfigDict(frozen=True)

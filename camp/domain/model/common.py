"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain entity.

    State changes produce a new instance via ``model_copy(update=...)``, so
    a snapshot taken before a write can always be restored.
    """

    model_config = ConfigDict(frozen=True)

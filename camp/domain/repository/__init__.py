"""Store interfaces for the engagement domain.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from camp.domain.repository.local import LocalStore
from camp.domain.repository.remote import RemoteStore, RemoteTransaction
from camp.domain.repository.resource import ResourceStore

__all__ = [
    "LocalStore",
    "RemoteStore",
    "RemoteTransaction",
    "ResourceStore",
]

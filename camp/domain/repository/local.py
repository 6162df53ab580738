"""Local store interface."""

from camp.domain.repository.resource import ResourceStore


class LocalStore(ResourceStore):
    """Single-device fallback store.

    Holds list data only (packing items, meals). It keeps no per-user vote
    history and has no transaction primitive; implementations serialize
    operations on the same address themselves.
    """

    pass

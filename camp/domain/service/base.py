"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold store and settings references only; all request state
    lives in arguments, so one instance may serve concurrent calls.
    """

    pass

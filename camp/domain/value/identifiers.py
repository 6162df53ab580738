"""Strongly typed identifiers for engagement entities.

Backend document ids and user ids are opaque strings, so every identifier
wraps ``str``. NewType keeps them from being mixed up.
"""

from typing import NewType

UserId = NewType("UserId", str)
ContentId = NewType("ContentId", str)
CommentId = NewType("CommentId", str)
TripId = NewType("TripId", str)
RecordId = NewType("RecordId", str)

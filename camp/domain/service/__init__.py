"""Domain services."""

from .base import Service
from .content_service import ContentService
from .gateway import (
    FailureClass,
    PersistenceGateway,
    ResourceGateway,
    classify_failure,
)
from .ranking import hot_rank, sort_feed
from .retry import retry_on_conflict
from .trip_service import MealService, PackingService, TripResourceService
from .vote_service import VoteService

__all__ = [
    "ContentService",
    "FailureClass",
    "MealService",
    "PackingService",
    "PersistenceGateway",
    "ResourceGateway",
    "Service",
    "TripResourceService",
    "VoteService",
    "classify_failure",
    "hot_rank",
    "retry_on_conflict",
    "sort_feed",
]

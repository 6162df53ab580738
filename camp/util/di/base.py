"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests may swap for an in-memory double
Component = Literal["persistence", "local_storage"]


class ProviderBase(Provider):
    """Dishka provider carrying mock-selection metadata.

    ``__mock_component__`` names the component a base provider stands for
    (None for concrete providers); ``__is_mock__`` marks the test variant.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

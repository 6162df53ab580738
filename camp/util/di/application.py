"""Application layer DI providers."""

from dishka import Scope, provide

from camp.application.usecase.content import (
    AddCommentUseCase,
    CreateContentUseCase,
    DeleteContentUseCase,
    ListCommentsUseCase,
    ListFeedUseCase,
)
from camp.application.usecase.trip import (
    AddMealUseCase,
    AddPackingItemUseCase,
    GetMealStatsUseCase,
    ListMealsUseCase,
    ListPackingItemsUseCase,
    RemoveMealUseCase,
    RemovePackingItemUseCase,
    UpdateMealUseCase,
    UpdatePackingItemUseCase,
)
from camp.application.usecase.vote import CastVoteUseCase, GetVoteUseCase
from camp.domain.service import ContentService, MealService, PackingService, VoteService
from camp.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Vote use cases
    @provide
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide
    def get_get_vote_use_case(
        self, content_service: ContentService, vote_service: VoteService
    ) -> GetVoteUseCase:
        """Provide get vote use case."""
        return GetVoteUseCase(
            content_service=content_service, vote_service=vote_service
        )

    # Content use cases
    @provide
    def get_create_content_use_case(
        self, content_service: ContentService
    ) -> CreateContentUseCase:
        """Provide create content use case."""
        return CreateContentUseCase(content_service=content_service)

    @provide
    def get_list_feed_use_case(
        self, content_service: ContentService, vote_service: VoteService
    ) -> ListFeedUseCase:
        """Provide list feed use case."""
        return ListFeedUseCase(
            content_service=content_service, vote_service=vote_service
        )

    @provide
    def get_delete_content_use_case(
        self, content_service: ContentService
    ) -> DeleteContentUseCase:
        """Provide delete content use case."""
        return DeleteContentUseCase(content_service=content_service)

    @provide
    def get_add_comment_use_case(
        self, content_service: ContentService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(content_service=content_service)

    @provide
    def get_list_comments_use_case(
        self, content_service: ContentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(content_service=content_service)

    # Packing list use cases
    @provide
    def get_list_packing_items_use_case(
        self, packing_service: PackingService
    ) -> ListPackingItemsUseCase:
        return ListPackingItemsUseCase(packing_service=packing_service)

    @provide
    def get_add_packing_item_use_case(
        self, packing_service: PackingService
    ) -> AddPackingItemUseCase:
        return AddPackingItemUseCase(packing_service=packing_service)

    @provide
    def get_update_packing_item_use_case(
        self, packing_service: PackingService
    ) -> UpdatePackingItemUseCase:
        return UpdatePackingItemUseCase(packing_service=packing_service)

    @provide
    def get_remove_packing_item_use_case(
        self, packing_service: PackingService
    ) -> RemovePackingItemUseCase:
        return RemovePackingItemUseCase(packing_service=packing_service)

    # Meal plan use cases
    @provide
    def get_list_meals_use_case(self, meal_service: MealService) -> ListMealsUseCase:
        return ListMealsUseCase(meal_service=meal_service)

    @provide
    def get_add_meal_use_case(self, meal_service: MealService) -> AddMealUseCase:
        return AddMealUseCase(meal_service=meal_service)

    @provide
    def get_update_meal_use_case(self, meal_service: MealService) -> UpdateMealUseCase:
        return UpdateMealUseCase(meal_service=meal_service)

    @provide
    def get_remove_meal_use_case(self, meal_service: MealService) -> RemoveMealUseCase:
        return RemoveMealUseCase(meal_service=meal_service)

    @provide
    def get_meal_stats_use_case(
        self, meal_service: MealService
    ) -> GetMealStatsUseCase:
        return GetMealStatsUseCase(meal_service=meal_service)

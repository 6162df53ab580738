"""Unit tests for content and vote use cases."""

import pytest

from camp.application.usecase.content import (
    AddCommentRequest,
    AddCommentUseCase,
    CreateContentRequest,
    CreateContentUseCase,
    DeleteContentRequest,
    DeleteContentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    ListFeedRequest,
    ListFeedUseCase,
)
from camp.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVoteRequest,
    GetVoteUseCase,
)
from camp.domain.error import NotAuthorizedError, NotFoundError, UnauthenticatedError
from camp.domain.value import ContentType, FeedSort, VoteState, VoteType
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _post(env, author="author", text="Hang food 4m up"):
    use_case = await env.get(CreateContentUseCase)
    return await use_case.execute(
        CreateContentRequest(content_type=ContentType.TIP, author_id=author, text=text)
    )


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_returns_counters_and_user_vote(self, unit_env):
        created = await _post(unit_env)
        use_case = await unit_env.get(CastVoteUseCase)

        response = await use_case.execute(
            CastVoteRequest(
                content_type=ContentType.TIP,
                content_id=created.content_id,
                user_id="alice",
                vote_type=VoteType.UP,
            )
        )

        assert response.user_vote == VoteState.UP
        assert (response.upvote_count, response.downvote_count, response.score) == (1, 0, 1)

    @pytest.mark.asyncio
    async def test_repeat_vote_toggles_off(self, unit_env):
        created = await _post(unit_env)
        use_case = await unit_env.get(CastVoteUseCase)
        request = CastVoteRequest(
            content_type=ContentType.TIP,
            content_id=created.content_id,
            user_id="alice",
            vote_type=VoteType.DOWN,
        )

        await use_case.execute(request)
        response = await use_case.execute(request)

        assert response.user_vote == VoteState.NONE
        assert response.score == 0

    @pytest.mark.asyncio
    async def test_anonymous_vote_rejected(self, unit_env):
        created = await _post(unit_env)
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(
                CastVoteRequest(
                    content_type=ContentType.TIP,
                    content_id=created.content_id,
                    user_id=None,
                    vote_type=VoteType.UP,
                )
            )

    @pytest.mark.asyncio
    async def test_vote_on_missing_item(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(
                    content_type=ContentType.TIP,
                    content_id="missing",
                    user_id="alice",
                    vote_type=VoteType.UP,
                )
            )


class TestGetVoteUseCase:
    """Tests for GetVoteUseCase."""

    @pytest.mark.asyncio
    async def test_anonymous_viewer_sees_none(self, unit_env):
        created = await _post(unit_env)
        cast = await unit_env.get(CastVoteUseCase)
        await cast.execute(
            CastVoteRequest(
                content_type=ContentType.TIP,
                content_id=created.content_id,
                user_id="alice",
                vote_type=VoteType.UP,
            )
        )
        use_case = await unit_env.get(GetVoteUseCase)

        response = await use_case.execute(
            GetVoteRequest(content_type=ContentType.TIP, content_id=created.content_id)
        )

        assert response.user_vote == VoteState.NONE
        assert response.upvote_count == 1


class TestListFeedUseCase:
    """Tests for ListFeedUseCase."""

    @pytest.mark.asyncio
    async def test_feed_annotates_viewer_votes(self, unit_env):
        liked = await _post(unit_env, text="Liked")
        other = await _post(unit_env, text="Other")
        cast = await unit_env.get(CastVoteUseCase)
        await cast.execute(
            CastVoteRequest(
                content_type=ContentType.TIP,
                content_id=liked.content_id,
                user_id="alice",
                vote_type=VoteType.UP,
            )
        )
        use_case = await unit_env.get(ListFeedUseCase)

        response = await use_case.execute(
            ListFeedRequest(
                content_type=ContentType.TIP, sort=FeedSort.SCORE, user_id="alice"
            )
        )

        assert [i.content_id for i in response.items] == [
            liked.content_id,
            other.content_id,
        ]
        assert [i.user_vote for i in response.items] == [VoteState.UP, VoteState.NONE]
        assert response.sort == FeedSort.SCORE

    @pytest.mark.asyncio
    async def test_feed_of_other_type_is_empty(self, unit_env):
        await _post(unit_env)
        use_case = await unit_env.get(ListFeedUseCase)

        response = await use_case.execute(
            ListFeedRequest(content_type=ContentType.QUESTION)
        )

        assert response.items == []


class TestCommentsAndDeletion:
    """Tests for comment and delete use cases."""

    @pytest.mark.asyncio
    async def test_comment_then_list(self, unit_env):
        created = await _post(unit_env)
        add = await unit_env.get(AddCommentUseCase)
        listing = await unit_env.get(ListCommentsUseCase)

        comment = await add.execute(
            AddCommentRequest(
                content_type=ContentType.TIP,
                content_id=created.content_id,
                author_id="bob",
                text="Works for bears too",
            )
        )
        response = await listing.execute(
            ListCommentsRequest(
                content_type=ContentType.TIP, content_id=created.content_id
            )
        )

        assert [c.comment_id for c in response.comments] == [comment.comment_id]

    @pytest.mark.asyncio
    async def test_only_author_deletes(self, unit_env):
        created = await _post(unit_env, author="author")
        use_case = await unit_env.get(DeleteContentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteContentRequest(
                    content_type=ContentType.TIP,
                    content_id=created.content_id,
                    user_id="mallory",
                )
            )

        await use_case.execute(
            DeleteContentRequest(
                content_type=ContentType.TIP,
                content_id=created.content_id,
                user_id="author",
            )
        )
        listing = await unit_env.get(ListCommentsUseCase)
        with pytest.raises(NotFoundError):
            await listing.execute(
                ListCommentsRequest(
                    content_type=ContentType.TIP, content_id=created.content_id
                )
            )

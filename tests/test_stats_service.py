import pytest

from prompthub.exceptions import NotFound
from prompthub.schemas.commons_schemas import Principal
from prompthub.services.like_service import like_service
from prompthub.services.stats_service import stats_service

pytestmark = pytest.mark.anyio


async def test_owner_without_prompts_or_likes(sign_in):
    _, email = await sign_in()

    stats = await stats_service.compute_owner_stats(Principal(email=email))

    assert stats["promptsCount"] == 0
    assert stats["likesCount"] == 0
    assert stats["joinedAt"]


async def test_likes_count_is_likes_given_not_received(sign_in, make_prompt):
    _, author = await sign_in()
    _, fan = await sign_in()
    first = await make_prompt(author_email=author)
    second = await make_prompt(author_email=author)
    await make_prompt(author_email=fan)

    await like_service.toggle_like(Principal(email=fan), first)
    await like_service.toggle_like(Principal(email=fan), second)

    author_stats = await stats_service.compute_owner_stats(Principal(email=author))
    fan_stats = await stats_service.compute_owner_stats(Principal(email=fan))

    assert author_stats["promptsCount"] == 2
    assert author_stats["likesCount"] == 0
    assert fan_stats["promptsCount"] == 1
    assert fan_stats["likesCount"] == 2


async def test_missing_owner_is_not_found(sign_in):
    _, email = await sign_in(create_user=False)

    with pytest.raises(NotFound):
        await stats_service.compute_owner_stats(Principal(email=email))


async def test_platform_stats_counts(sign_in, make_prompt):
    _, author = await sign_in()
    _, fan = await sign_in()
    await sign_in()  # idle user
    liked = await make_prompt(author_email=author)
    await make_prompt(author_email=author, is_public=False)

    await like_service.toggle_like(Principal(email=fan), liked)

    stats = await stats_service.compute_platform_stats()

    assert stats["totalPrompts"] == 2
    assert stats["publicPrompts"] == 1
    assert stats["totalUsers"] == 3
    assert stats["activeUsers"] == 2
    assert stats["totalLikes"] == 1
    assert stats["recentPrompts"] == 2
    assert stats["lastUpdated"]

import asyncio

import pytest

from prompthub.exceptions import NotFound
from prompthub.services.counter_service import counter_service

pytestmark = pytest.mark.anyio


async def test_new_prompt_starts_at_zero_views(make_prompt):
    prompt_id = await make_prompt()

    assert await counter_service.get_view(prompt_id) == 0
    assert await counter_service.increment_view(prompt_id) == 1
    assert await counter_service.get_view(prompt_id) == 1


async def test_increment_returns_post_increment_count(make_prompt):
    prompt_id = await make_prompt(views=41)

    assert await counter_service.increment_view(prompt_id) == 42
    assert await counter_service.increment_view(prompt_id, amount=3) == 45


async def test_unknown_prompt_is_not_found_not_zero(db):
    with pytest.raises(NotFound):
        await counter_service.get_view("missing")
    with pytest.raises(NotFound):
        await counter_service.increment_view("missing")


async def test_non_positive_amount_rejected(make_prompt):
    prompt_id = await make_prompt()

    with pytest.raises(ValueError):
        await counter_service.increment_view(prompt_id, amount=0)
    assert await counter_service.get_view(prompt_id) == 0


@pytest.mark.parametrize("initial, callers", [(0, 20), (7, 25)])
async def test_concurrent_increments_are_never_lost(make_prompt, initial, callers):
    prompt_id = await make_prompt(views=initial)

    results = await asyncio.gather(*(
        counter_service.increment_view(prompt_id) for _ in range(callers)
    ))

    assert await counter_service.get_view(prompt_id) == initial + callers
    # Each caller observed its own increment
    assert sorted(results) == list(range(initial + 1, initial + callers + 1))

# nosec B101


import random
from unittest.mock import AsyncMock

import pytest

from application.services.quote_service import QuoteService
from domain.models.mock_data import MOCK_QUOTES
from domain.models.quote import Quote
from domain.models.upstream import FetchResult, FetchStatus


def _provider(result):
    provider = AsyncMock()
    provider.fetch_quote.return_value = result
    return provider


@pytest.mark.asyncio
async def test_get_quote_returns_upstream_quote():
    upstream = Quote(text='Stay hungry, stay foolish.', author='Stewart Brand')
    provider = _provider(FetchResult.success('quotable', upstream, http_status_code=200, response_time_ms=12))

    service = QuoteService(provider)

    assert await service.get_quote() == upstream
    provider.fetch_quote.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    'status',
    [FetchStatus.NETWORK_ERROR, FetchStatus.HTTP_ERROR, FetchStatus.PARSING_ERROR, FetchStatus.NOT_FOUND],
)
async def test_get_quote_falls_back_on_every_failure(status):
    provider = _provider(FetchResult.failure('quotable', status, 'boom'))

    service = QuoteService(provider, rng=random.Random(7))

    assert await service.get_quote() in MOCK_QUOTES


@pytest.mark.asyncio
async def test_fallback_reaches_every_builtin_quote():
    provider = _provider(FetchResult.failure('quotable', FetchStatus.NETWORK_ERROR, 'down'))
    service = QuoteService(provider, rng=random.Random(42))

    seen = {await service.get_quote() for _ in range(200)}

    assert seen == set(MOCK_QUOTES)
    assert provider.fetch_quote.await_count == 200


def test_builtin_quotes_are_the_five_known_pairs():
    assert len(MOCK_QUOTES) == 5
    assert [q.author for q in MOCK_QUOTES] == [
        'Steve Jobs',
        'Winston Churchill',
        'Theodore Roosevelt',
        'Eleanor Roosevelt',
        'Confucius',
    ]

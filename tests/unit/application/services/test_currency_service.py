# nosec B101


import re
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from application.services.currency_service import CurrencyService, convert_inr, parse_amount
from domain.exceptions.infohub import InvalidAmountError
from domain.models.currency import INRRates
from domain.models.mock_data import MOCK_RATES
from domain.models.upstream import FetchResult, FetchStatus

LIVE_RATES = INRRates(usd=Decimal('0.01203'), eur=Decimal('0.01105'), source='exchangerate-api')


def _provider(result):
    provider = AsyncMock()
    provider.fetch_inr_rates.return_value = result
    return provider


@pytest.mark.parametrize('raw, expected', [
    ('100', Decimal('100')),
    ('12.345', Decimal('12.345')),
    (' 50 ', Decimal('50')),
    ('1e3', Decimal('1000')),
])
def test_parse_amount_accepts_positive_numbers(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize('raw', [None, '', '0', '-5', 'abc', 'inf', 'Infinity', 'nan', '1e400', '12abc', '1_000'])
def test_parse_amount_rejects_invalid(raw):
    with pytest.raises(InvalidAmountError) as exc_info:
        parse_amount(raw)

    assert str(exc_info.value) == 'Valid amount is required'


def test_convert_inr_quantizes_amounts_and_rates():
    conversion = convert_inr(Decimal('1000'), LIVE_RATES)

    assert conversion.usd == Decimal('12.03')
    assert conversion.eur == Decimal('11.05')
    assert format(conversion.inr_to_usd, 'f') == '0.012030'
    assert format(conversion.inr_to_eur, 'f') == '0.011050'


def test_convert_inr_rounds_half_up():
    rates = INRRates(usd=Decimal('0.01'), eur=Decimal('0.011'), source='test')

    conversion = convert_inr(Decimal('0.5'), rates)

    assert conversion.usd == Decimal('0.01')  # 0.005 rounds up
    assert conversion.eur == Decimal('0.01')  # 0.0055 rounds up


def test_convert_inr_handles_large_amounts():
    conversion = convert_inr(Decimal('1e30'), MOCK_RATES)

    assert re.fullmatch(r'\d+\.\d{2}', format(conversion.usd, 'f'))
    assert conversion.usd == Decimal('1.2e28')


@pytest.mark.asyncio
async def test_convert_uses_live_rates():
    provider = _provider(FetchResult.success('exchangerate-api', LIVE_RATES, http_status_code=200, response_time_ms=20))

    conversion = await CurrencyService(provider).convert(Decimal('1000'))

    assert conversion.source == 'exchangerate-api'
    assert conversion.usd == Decimal('12.03')
    provider.fetch_inr_rates.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize('status', [FetchStatus.NETWORK_ERROR, FetchStatus.HTTP_ERROR, FetchStatus.PARSING_ERROR])
async def test_convert_falls_back_to_mock_rates(status):
    provider = _provider(FetchResult.failure('exchangerate-api', status, 'boom'))

    conversion = await CurrencyService(provider).convert(Decimal('100'))

    assert conversion.source == 'mock'
    assert conversion.usd == Decimal('1.20')
    assert conversion.eur == Decimal('1.10')
    assert format(conversion.inr_to_usd, 'f') == '0.012000'
    assert format(conversion.inr_to_eur, 'f') == '0.011000'


def test_convert_inr_handles_large_rates():
    rates = INRRates(usd=Decimal('1e300'), eur=Decimal('0.011'), source='exchangerate-api')

    conversion = convert_inr(Decimal('1000'), rates)

    assert conversion.usd == Decimal('1e303')
    assert re.fullmatch(r'\d+\.\d{2}', format(conversion.usd, 'f'))
    assert re.fullmatch(r'\d+\.\d{6}', format(conversion.inr_to_usd, 'f'))
    assert conversion.eur == Decimal('11.00')

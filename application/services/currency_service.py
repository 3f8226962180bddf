import logging
import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from domain.exceptions.infohub import InvalidAmountError
from domain.models.currency import CurrencyConversion, INRRates
from domain.models.mock_data import MOCK_RATES
from infrastructure.providers.exchangerate import ExchangeRateAPIProvider

logger = logging.getLogger(__name__)

CURRENCY_ERROR_MESSAGE = 'Could not fetch currency rates'
INVALID_AMOUNT_MESSAGE = 'Valid amount is required'

TWO_PLACES = Decimal('0.01')
SIX_PLACES = Decimal('0.000001')


def parse_amount(raw: str | None) -> Decimal:
	"""Parse the ``amount`` query value; it must be a positive, finite number."""
	if raw is None or '_' in raw:
		raise InvalidAmountError(INVALID_AMOUNT_MESSAGE)
	try:
		amount = Decimal(raw.strip())
	except InvalidOperation as e:
		raise InvalidAmountError(INVALID_AMOUNT_MESSAGE) from e

	# float() turns overflowing values like 1e400 into inf
	if not amount.is_finite() or not math.isfinite(float(amount)) or amount <= 0:
		raise InvalidAmountError(INVALID_AMOUNT_MESSAGE)
	return amount


def convert_inr(amount: Decimal, rates: INRRates) -> CurrencyConversion:
	with localcontext() as ctx:
		# digits needed for the product and for the rates themselves at 6 places
		largest_rate = max(rates.usd.adjusted(), rates.eur.adjusted(), 0)
		ctx.prec = max(ctx.prec, amount.adjusted() + largest_rate + 16)
		return CurrencyConversion(
			inr=amount,
			usd=(amount * rates.usd).quantize(TWO_PLACES, rounding=ROUND_HALF_UP),
			eur=(amount * rates.eur).quantize(TWO_PLACES, rounding=ROUND_HALF_UP),
			inr_to_usd=rates.usd.quantize(SIX_PLACES, rounding=ROUND_HALF_UP),
			inr_to_eur=rates.eur.quantize(SIX_PLACES, rounding=ROUND_HALF_UP),
			source=rates.source,
		)


class CurrencyService:
	def __init__(self, provider: ExchangeRateAPIProvider):
		self.provider = provider

	async def convert(self, amount: Decimal) -> CurrencyConversion:
		result = await self.provider.fetch_inr_rates()
		if result.is_successful:
			rates = result.data
		else:
			logger.info(f'Rate provider unavailable ({result.status.value}), using mock rates')
			rates = MOCK_RATES

		conversion = convert_inr(amount, rates)
		logger.debug(f'Converted {amount} INR using {conversion.source} rates')
		return conversion

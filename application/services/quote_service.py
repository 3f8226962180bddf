import logging
import random

from domain.models.mock_data import MOCK_QUOTES
from domain.models.quote import Quote
from infrastructure.providers.quotable import QuotableProvider

logger = logging.getLogger(__name__)

QUOTE_ERROR_MESSAGE = 'Could not fetch quote'


class QuoteService:
	def __init__(self, provider: QuotableProvider, rng: random.Random | None = None):
		self.provider = provider
		self._rng = rng or random.Random()

	async def get_quote(self) -> Quote:
		result = await self.provider.fetch_quote()
		if result.is_successful:
			return result.data

		# every failure reason falls back for quotes
		logger.info(f'Quote provider unavailable ({result.status.value}), using mock data')
		return self._rng.choice(MOCK_QUOTES)

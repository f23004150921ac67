import logging
from datetime import date

from domain.models.currency import ExchangeRate
from infrastructure.providers.rate_fetcher import RateFetcher

logger = logging.getLogger(__name__)


class RateService:
	def __init__(self, fetcher: RateFetcher, base_currency: str = 'EUR'):
		self.fetcher = fetcher
		self.base_currency = base_currency

	def get_rate(self, currency: str, on: date) -> ExchangeRate:
		rate = self.fetcher.fetch_rate(currency, on.year, on.month, on.day)
		logger.info(f'{self.base_currency} -> {currency} on {on.isoformat()}: {rate}')

		return ExchangeRate(
			from_currency=self.base_currency,
			to_currency=currency,
			rate=rate,
			on=on,
			source=self.fetcher.name,
		)

	def get_cross_rate(self, from_currency: str, to_currency: str, on: date) -> ExchangeRate:
		rate = self.fetcher.cross_rate(from_currency, to_currency, on.year, on.month, on.day)
		logger.info(f'{from_currency} -> {to_currency} on {on.isoformat()}: {rate}')

		return ExchangeRate(
			from_currency=from_currency,
			to_currency=to_currency,
			rate=rate,
			on=on,
			source=self.fetcher.name,
		)

import logging
import math
import urllib.parse
from typing import Any

import httpx

from domain.exceptions.currency import FieldNotFoundError, NetworkError, ParseError
from domain.models.currency import RateQuery, RateSource

logger = logging.getLogger(__name__)


class RateFetcher:
	"""Reads daily exchange rates from a dated JSON endpoint.

	Every rate is expressed against the provider's base currency (the Euro in
	the usual deployment). A request for 25 June 2010 against a base URL of
	``http://api.exchangeratesapi.io/v1/`` goes to
	``http://api.exchangeratesapi.io/v1/2010-06-25?access_key=...``.
	"""

	def __init__(self, base_url: str, access_key: str = '', client: httpx.Client | None = None):
		self.source = RateSource(base_url=base_url, access_key=access_key)
		self._client = client

	@property
	def name(self) -> str:
		return 'exchangerates'

	def build_url(self, query: RateQuery) -> str:
		params = urllib.parse.urlencode({'access_key': self.source.access_key})
		return f'{self.source.base_url}{query.date_path}?{params}'

	def _get(self, url: str) -> httpx.Response:
		if self._client is not None:
			return self._client.get(url)
		with httpx.Client() as client:
			return client.get(url)

	def _request(self, query: RateQuery) -> dict[str, Any]:
		url = self.build_url(query)
		logger.debug(f'GET {self.source.base_url}{query.date_path}')

		try:
			response = self._get(url)
			response.raise_for_status()
		except httpx.HTTPStatusError as e:
			logger.warning(f'Rate request for {query.date_path} returned HTTP {e.response.status_code}')
			raise NetworkError(
				f'HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			logger.warning(f'Rate request for {query.date_path} failed: {e.__class__.__name__}')
			raise NetworkError(f'Request failed: {e.__class__.__name__}') from e
		except httpx.InvalidURL as e:
			logger.warning(f'Rate request for {query.date_path} has an invalid URL: {e}')
			raise NetworkError(f'Invalid URL: {e}') from e

		try:
			data = response.json()
		except ValueError as e:
			logger.warning(f'Response for {query.date_path} is not valid JSON')
			raise ParseError(f'Response for {query.date_path} is not valid JSON') from e

		if not isinstance(data, dict):
			logger.warning(f'Response for {query.date_path} is not a JSON object')
			raise ParseError(f'Response for {query.date_path} is not a JSON object')

		return data

	def _parse_rate(self, currency_code: str, value: Any) -> float:
		# bool is an int subclass but true/false is not a rate
		if isinstance(value, bool) or not isinstance(value, (int, float)):
			logger.warning(f'Rate for {currency_code} is not a number: {value!r}')
			raise ParseError(f'Rate for {currency_code} is not a number: {value!r}')

		try:
			rate = float(value)
		except OverflowError as e:
			logger.warning(f'Rate for {currency_code} is out of range')
			raise ParseError(f'Rate for {currency_code} is out of range') from e

		# json accepts NaN, Infinity and overflowing literals such as 1e400
		if not math.isfinite(rate) or rate <= 0:
			logger.warning(f'Rate for {currency_code} is not a positive finite number: {rate!r}')
			raise ParseError(f'Rate for {currency_code} is not a positive finite number: {rate!r}')

		return rate

	def fetch_rate(self, currency_code: str, year: int, month: int, day: int) -> float:
		"""Get the rate of ``currency_code`` against the base currency on the given date.

		The returned value is always positive and finite.
		"""
		query = RateQuery(currency_code=currency_code, year=year, month=month, day=day)
		data = self._request(query)

		rates = data.get('rates')
		if not isinstance(rates, dict):
			logger.warning(f'No rates in response for {query.date_path}')
			raise FieldNotFoundError(f'No rates in response for {query.date_path}')

		try:
			value = rates[currency_code]
		except KeyError as e:
			logger.warning(f'Missing rate for {currency_code} on {query.date_path}')
			raise FieldNotFoundError(f'Missing rate for {currency_code}') from e

		return self._parse_rate(currency_code, value)

	def cross_rate(
		self, from_currency: str, to_currency: str, year: int, month: int, day: int
	) -> float:
		"""Get the rate of ``from_currency`` against ``to_currency`` on the given date."""
		from_rate = self.fetch_rate(from_currency, year, month, day)
		to_rate = self.fetch_rate(to_currency, year, month, day)

		return from_rate / to_rate

	def close(self) -> None:
		"""Close the injected client, if any. The fetcher owns a client passed to it."""
		if self._client is not None:
			self._client.close()

	def __enter__(self) -> 'RateFetcher':
		return self

	def __exit__(self, *exc_info) -> None:
		self.close()

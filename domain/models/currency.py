from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class RateSource:
	base_url: str
	access_key: str = ''


@dataclass(frozen=True)
class RateQuery:
	currency_code: str
	year: int
	month: int
	day: int

	@property
	def date_path(self) -> str:
		return f'{self.year}-{self.month:02d}-{self.day:02d}'

	@classmethod
	def from_date(cls, currency_code: str, on: date) -> 'RateQuery':
		return cls(currency_code=currency_code, year=on.year, month=on.month, day=on.day)


@dataclass(frozen=True)
class ExchangeRate:
	from_currency: str
	to_currency: str
	rate: float  # Units of to_currency per one unit of from_currency
	on: date
	source: str

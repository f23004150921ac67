from .responses import ExchangeRateResponse, HealthResponse

__all__ = [
	'ExchangeRateResponse',
	'HealthResponse',
]

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class ExchangeRateResponse(BaseModel):
	from_currency: str = Field(..., description='Currency the rate is quoted against')
	to_currency: str = Field(..., description='Currency the rate is expressed in')
	rate: float = Field(..., description='Units of to_currency per one unit of from_currency')
	rate_date: date = Field(..., description='Day the rate applies to')
	source: str = Field(..., description='Provider of the rate')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'EUR',
				'to_currency': 'USD',
				'rate': 1.2291,
				'rate_date': '2010-06-25',
				'source': 'exchangerates',
			}
		}
	)


class HealthResponse(BaseModel):
	status: str = Field(..., description='Service status')

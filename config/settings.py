from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	RATES_BASE_URL: str = 'http://api.exchangeratesapi.io/v1/'
	RATES_ACCESS_KEY: str = ''
	BASE_CURRENCY: str = 'EUR'

	# Application
	APP_NAME: str = 'Exchange Rate Reader API'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()

import logging
from typing import Annotated

from fastapi import Depends

from application.services import RateService
from config.settings import get_settings
from infrastructure.providers import RateFetcher

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	fetcher: RateFetcher | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.fetcher = RateFetcher(base_url=settings.RATES_BASE_URL, access_key=settings.RATES_ACCESS_KEY)
	logger.info('Dependencies initialized')


def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.fetcher:
		deps.fetcher.close()
		deps.fetcher = None

	logger.info('Cleanup complete')


def get_fetcher() -> RateFetcher:
	if deps.fetcher is None:
		raise RuntimeError('Rate fetcher not initialized')
	return deps.fetcher


def get_rate_service(fetcher: Annotated[RateFetcher, Depends(get_fetcher)]) -> RateService:
	return RateService(fetcher=fetcher, base_currency=get_settings().BASE_CURRENCY)

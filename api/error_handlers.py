import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import FieldNotFoundError, NetworkError, ParseError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(FieldNotFoundError)
	async def field_not_found_handler(request: Request, exc: FieldNotFoundError):
		return JSONResponse(status_code=404, content={'detail': str(exc)})

	@app.exception_handler(ParseError)
	async def parse_error_handler(request: Request, exc: ParseError):
		logger.error(f'Unreadable provider response: {exc}')
		return JSONResponse(
			status_code=502, content={'detail': 'Exchange rate service returned an invalid response'}
		)

	@app.exception_handler(NetworkError)
	async def network_error_handler(request: Request, exc: NetworkError):
		logger.error(f'Provider error: {exc}')
		return JSONResponse(
			status_code=503, content={'detail': 'Exchange rate service unavailable'}
		)

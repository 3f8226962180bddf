import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.infohub import (
	CityNotFoundError,
	InfoHubException,
	InvalidAmountError,
	UpstreamServiceError,
)

logger = logging.getLogger(__name__)


@contextmanager
def upstream_errors(message: str) -> Iterator[None]:
	"""Turn unexpected exceptions into ``UpstreamServiceError(message)``.

	Domain exceptions pass through untouched so their own handlers apply.
	"""
	try:
		yield
	except InfoHubException:
		raise
	except Exception as exc:
		logger.error(f'{message}: {exc}', exc_info=True)
		raise UpstreamServiceError(message) from exc


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(InvalidAmountError)
	async def invalid_amount_handler(request: Request, exc: InvalidAmountError):
		return JSONResponse(status_code=400, content={'error': str(exc)})

	@app.exception_handler(CityNotFoundError)
	async def city_not_found_handler(request: Request, exc: CityNotFoundError):
		return JSONResponse(status_code=404, content={'error': str(exc)})

	@app.exception_handler(UpstreamServiceError)
	async def upstream_error_handler(request: Request, exc: UpstreamServiceError):
		logger.error(f'Upstream error on {request.url.path}: {exc.__cause__ or exc}')
		return JSONResponse(status_code=500, content={'error': str(exc)})

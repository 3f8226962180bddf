import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.dependencies import cleanup_dependencies, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import currency, health, quote, weather
from config.settings import get_settings
from monitoring.logger import setup_logging

settings = get_settings()

setup_logging(level=settings.LOG_LEVEL, log_directory=settings.LOG_DIRECTORY or None)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	logger.info('Starting InfoHub API...')

	init_dependencies(settings)

	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	await cleanup_dependencies()


app = FastAPI(
	title=settings.APP_NAME,
	description='Quotes, weather and INR conversion behind one API, with mock fallbacks',
	version='1.0.0',
	debug=settings.DEBUG,
	lifespan=lifespan,
)

app.add_middleware(
	CORSMiddleware,
	allow_origins=settings.CORS_ORIGINS,
	allow_credentials=True,
	allow_methods=['GET', 'POST', 'PUT', 'DELETE'],
	allow_headers=['*'],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
	logger.error(f'Unhandled exception: {exc}', exc_info=True)
	return JSONResponse(status_code=500, content={'error': 'Internal server error'})


app.include_router(health.router)
app.include_router(quote.router)
app.include_router(weather.router)
app.include_router(currency.router)
register_exception_handlers(app)


if __name__ == '__main__':
	import uvicorn

	logger.info(f'Starting server on {settings.HOST}:{settings.PORT}')

	uvicorn.run(
		'api.main:app',
		host=settings.HOST,
		port=settings.PORT,
		reload=settings.DEBUG,
		log_level=settings.LOG_LEVEL.lower(),
	)

from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_quote_service
from api.error_handlers import upstream_errors
from api.schemas import ErrorResponse, QuoteResponse
from application.services import QuoteService
from application.services.quote_service import QUOTE_ERROR_MESSAGE

router = APIRouter(prefix='/api', tags=['quote'])


@router.get(
	'/quote',
	response_model=QuoteResponse,
	status_code=status.HTTP_200_OK,
	summary='Get a random quote',
	responses={500: {'model': ErrorResponse}},
)
async def get_quote(
	service: Annotated[QuoteService, Depends(get_quote_service)],
) -> QuoteResponse:
	with upstream_errors(QUOTE_ERROR_MESSAGE):
		quote = await service.get_quote()
		return QuoteResponse.from_domain(quote)

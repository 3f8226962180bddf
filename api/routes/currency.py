from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_currency_service
from api.error_handlers import upstream_errors
from api.schemas import CurrencyResponse, ErrorResponse
from application.services import CurrencyService
from application.services.currency_service import CURRENCY_ERROR_MESSAGE, parse_amount

router = APIRouter(prefix='/api', tags=['currency'])


@router.get(
	'/currency',
	response_model=CurrencyResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert an INR amount to USD and EUR',
	responses={400: {'model': ErrorResponse}, 500: {'model': ErrorResponse}},
)
async def convert_currency(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
	amount: Annotated[str | None, Query(description='Positive amount in INR')] = None,
) -> CurrencyResponse:
	# validated here so a bad amount never reaches the provider
	inr_amount = parse_amount(amount)

	with upstream_errors(CURRENCY_ERROR_MESSAGE):
		conversion = await service.convert(inr_amount)
		return CurrencyResponse.from_domain(conversion)

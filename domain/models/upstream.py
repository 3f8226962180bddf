from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar('T')


class FetchStatus(Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    HTTP_ERROR = "http_error"
    NETWORK_ERROR = "network_error"
    PARSING_ERROR = "parsing_error"


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a single upstream call.

    Providers return one of these instead of raising, so callers decide
    between fallback and propagation by looking at ``status``.
    """
    provider_name: str
    status: FetchStatus
    data: T | None = None
    error_message: str | None = None
    http_status_code: int | None = None
    response_time_ms: int | None = None

    @property
    def is_successful(self) -> bool:
        return self.status == FetchStatus.SUCCESS and self.data is not None

    @classmethod
    def success(cls, provider_name: str, data: T, http_status_code: int,
                response_time_ms: int) -> 'FetchResult[T]':
        return cls(
            provider_name=provider_name,
            status=FetchStatus.SUCCESS,
            data=data,
            http_status_code=http_status_code,
            response_time_ms=response_time_ms,
        )

    @classmethod
    def failure(cls, provider_name: str, status: FetchStatus, error_message: str,
                http_status_code: int | None = None,
                response_time_ms: int | None = None) -> 'FetchResult[T]':
        return cls(
            provider_name=provider_name,
            status=status,
            error_message=error_message,
            http_status_code=http_status_code,
            response_time_ms=response_time_ms,
        )

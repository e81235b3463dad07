from pydantic import ValidationError

from hotel_booking.booking.handlers.response_models import ErrorResponse
from hotel_booking.shared.domain import (
    BusinessRuleViolationException,
    InvalidRequestException,
    ResourceNotFoundException,
)
from hotel_booking.shared.domain.exception import RateUnavailableException

_ERROR_TYPES: tuple[tuple[type[Exception], str], ...] = (
    (ValidationError, "INVALID_REQUEST"),
    (InvalidRequestException, "INVALID_REQUEST"),
    (ResourceNotFoundException, "NOT_FOUND"),
    (RateUnavailableException, "RATE_UNAVAILABLE"),
    (BusinessRuleViolationException, "BUSINESS_ERROR"),
)

HANDLED_ERRORS = tuple(error for error, _ in _ERROR_TYPES)


def to_error_response(error: Exception) -> dict:
    """業務例外をエラーレスポンスに変換する"""
    for error_class, error_type in _ERROR_TYPES:
        if isinstance(error, error_class):
            return ErrorResponse(error_type=error_type, message=str(error)).model_dump()
    raise error

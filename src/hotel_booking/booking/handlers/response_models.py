from pydantic import BaseModel


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    price: float
    price_in_reference_currency: float


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData | None = None
    message: str | None = None


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_type: str
    message: str

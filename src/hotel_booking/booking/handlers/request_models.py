from datetime import date

from pydantic import BaseModel, Field, model_validator


class MakeBookingRequest(BaseModel):
    """予約作成リクエストモデル"""

    room_id: str | None = Field(default=None, description="希望する部屋ID")
    date_from: date = Field(
        ...,
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2024-01-01"],
    )
    date_to: date = Field(
        ...,
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2024-01-05"],
    )
    guest_count: int = Field(..., ge=1, description="宿泊人数")
    prepaid: bool = Field(default=False, description="事前決済の有無")

    @model_validator(mode="after")
    def check_dates(self) -> "MakeBookingRequest":
        if self.date_to <= self.date_from:
            raise ValueError("Check-out date must be after check-in date")
        return self


class CancelBookingRequest(BaseModel):
    """予約キャンセルリクエストモデル"""

    booking_id: str = Field(..., min_length=1)

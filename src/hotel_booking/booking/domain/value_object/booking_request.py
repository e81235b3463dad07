from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date


@dataclass(frozen=True)
class BookingRequest:
    """予約リクエスト（部屋・宿泊期間・人数・事前決済の有無）"""

    room_id: str | None
    date_from: date
    date_to: date
    guest_count: int
    prepaid: bool = False

    def nights(self) -> int:
        """宿泊数を計算する"""
        return (self.date_to - self.date_from).days

    def with_room(self, room_id: str) -> BookingRequest:
        """部屋を割り当てたリクエストを新しく生成する（元のリクエストは変更しない）"""
        return replace(self, room_id=room_id)

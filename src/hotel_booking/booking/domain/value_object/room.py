from dataclasses import dataclass


@dataclass(frozen=True)
class Room:
    """客室（名称と定員）"""

    name: str
    capacity: int

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("Room capacity must be positive")

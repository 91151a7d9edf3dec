# models/room.py
from __future__ import annotations
from dataclasses import dataclass

from utils.money import format_price

@dataclass(eq=False)
class Room:
    room_number: int
    room_type: str
    # per-night price; booking totals are nights * price
    price: float
    is_available: bool = True

    def set_available(self, available: bool) -> None:
        self.is_available = available

    def __str__(self) -> str:
        status = "Available" if self.is_available else "Booked"
        return f"Room {self.room_number} | Type: {self.room_type} | Price: {format_price(self.price)} | {status}"

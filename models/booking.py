# models/booking.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date

from models.guest import Guest
from models.room import Room
from utils.money import format_price, nights_between

@dataclass(eq=False)
class Booking:
    """
    A guest's stay in one room between two dates.
    The room is shared with the hotel's inventory, never copied.
    """
    guest: Guest
    room: Room
    check_in: date
    check_out: date
    total_price: float = field(init=False)

    def __post_init__(self) -> None:
        self.total_price = self.calculate_total()

    @property
    def nights(self) -> int:
        # signed: a check-out before check-in gives a negative count
        return nights_between(self.check_in, self.check_out)

    def calculate_total(self) -> float:
        return self.nights * self.room.price

    def contains(self, day: date) -> bool:
        """Both ends are occupied, so a check-out day is not free for a new guest."""
        return self.check_in <= day <= self.check_out

    def __str__(self) -> str:
        lines = [
            str(self.guest),
            str(self.room),
            f"Dates: {self.check_in} to {self.check_out}",
            f"Total: {format_price(self.total_price)}",
        ]
        return "\n".join(lines)

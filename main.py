# main.py
from __future__ import annotations
import sys

from services.booking_desk import BookingDesk, report, seed_default_rooms
from services.hotel_system import HotelSystem
from utils.config import load_settings


def main() -> int:
    settings = load_settings()
    system = HotelSystem()

    report(system.load_from_file(settings.data_file))
    seed_default_rooms(system)

    desk = BookingDesk(system, settings.data_file)
    return desk.run()


if __name__ == "__main__":
    sys.exit(main())

# services/booking_desk.py
from __future__ import annotations

import sys
from datetime import date
from typing import Callable, Optional

from models.guest import Guest
from models.room import Room
from models.store_result import StoreResult
from services.hotel_system import HotelSystem
from utils.date_parser import parse_date

MENU = """
=== HOTEL BOOKING SYSTEM ===
1. View Rooms
2. Book a Room
3. View Bookings
4. Save & Exit"""

DEFAULT_ROOMS = [
    (101, "Single", 100.0),
    (102, "Double", 150.0),
    (103, "Suite", 250.0),
]


def seed_default_rooms(system: HotelSystem, today: Optional[date] = None) -> bool:
    """
    Adds the three default rooms when nothing is free today.
    Returns True if rooms were added.
    """
    today = today or date.today()
    if system.get_available_rooms(today):
        return False
    for number, room_type, price in DEFAULT_ROOMS:
        system.add_room(Room(number, room_type, price, True))
    return True


def report(result: StoreResult) -> None:
    if result.ok:
        print(f"✅ {result.message}")
    else:
        print(f"❌ {result.message}", file=sys.stderr)


class BookingDesk:
    """
    Interactive menu loop in front of a HotelSystem.
    Reads operator input through input_func so the loop can be driven from tests.
    """

    def __init__(self, system: HotelSystem, data_file: str, input_func: Optional[Callable[[str], str]] = None):
        self.system = system
        self.data_file = data_file
        self.input = input_func or input

    def run(self) -> int:
        while True:
            print(MENU)
            try:
                choice = self.input("Choose an option: ").strip()
            except EOFError:
                # end of input behaves like Save & Exit
                print()
                choice = "4"

            if choice == "1":
                self.system.list_rooms()
            elif choice == "2":
                try:
                    self.book()
                except EOFError:
                    print("\n⚠️ Booking cancelled.")
            elif choice == "3":
                self.system.list_bookings()
            elif choice == "4":
                report(self.system.save_to_file(self.data_file))
                print("Exiting...")
                return 0
            else:
                print("Invalid choice!")

    def book(self) -> None:
        name = self.input("Enter Guest Name: ")
        contact = self.input("Enter Contact Info: ")
        id_proof = self.input("Enter ID Proof: ")

        check_in = self._ask_date("Enter Check-In Date (YYYY-MM-DD): ")
        check_out = self._ask_date("Enter Check-Out Date (YYYY-MM-DD): ")

        available = self.system.get_available_rooms(check_in)
        if not available:
            print("No rooms available for selected dates.")
            return

        print("\nAvailable Rooms:")
        for room in available:
            print(room)

        raw_number = self.input("Enter Room Number to Book: ").strip()
        try:
            room_number = int(raw_number)
        except ValueError:
            print("Invalid room selection!")
            return

        selected = self.system.find_room(room_number, available)
        if selected is None:
            print("Invalid room selection!")
            return

        guest = Guest(name, contact, id_proof)
        booking = self.system.book_room(guest, selected, check_in, check_out)
        print(f"\nBooking Successful!\n{booking}")

    def _ask_date(self, prompt: str) -> date:
        while True:
            parsed = parse_date(self.input(prompt))
            if parsed is not None:
                return parsed
            print("⚠️ Could not read that date. Please use YYYY-MM-DD.")

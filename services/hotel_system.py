# services/hotel_system.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from models.booking import Booking
from models.guest import Guest
from models.room import Room
from models.store_result import StoreErrorKind, StoreResult
from storage.json_store import JsonStore, StoreFormatError


class HotelSystem:
    """
    Owns the room inventory and the booking ledger.
    One instance is built at startup and handed to the booking desk.
    """

    def __init__(self):
        self.rooms: List[Room] = []
        self.bookings: List[Booking] = []

    # ---------- inventory ----------
    def add_room(self, room: Room) -> None:
        self.rooms.append(room)

    def find_room(self, room_number: int, rooms: Optional[List[Room]] = None) -> Optional[Room]:
        candidates = self.rooms if rooms is None else rooms
        return next((r for r in candidates if r.room_number == room_number), None)

    # ---------- availability ----------
    def get_available_rooms(self, day: date) -> List[Room]:
        return [room for room in self.rooms if self.is_room_available(room, day)]

    def is_room_available(self, room: Room, day: date) -> bool:
        """
        Derived from the bookings only; room.is_available is not consulted.
        """
        for booking in self.bookings:
            if booking.room.room_number == room.room_number and booking.contains(day):
                return False
        return True

    # ---------- bookings ----------
    def book_room(self, guest: Guest, room: Room, check_in: date, check_out: date) -> Booking:
        # Callers pick the room from get_available_rooms(); overlaps are not re-checked here.
        room.set_available(False)
        booking = Booking(guest=guest, room=room, check_in=check_in, check_out=check_out)
        self.bookings.append(booking)
        return booking

    def list_rooms(self) -> None:
        if not self.rooms:
            print("No rooms available.")
            return
        print("\n--- ROOMS ---")
        for room in self.rooms:
            print(room)

    def list_bookings(self) -> None:
        if not self.bookings:
            print("No bookings yet.")
            return
        print("\n--- BOOKINGS ---")
        for booking in self.bookings:
            print(booking)
            print()

    # ---------- persistence ----------
    def save_to_file(self, path: str) -> StoreResult:
        try:
            JsonStore(path).write(self.rooms, self.bookings)
        except OSError as e:
            return StoreResult.failure(StoreErrorKind.IO, f"Error saving data: {e}")
        return StoreResult.success("Data saved successfully.")

    def load_from_file(self, path: str) -> StoreResult:
        try:
            rooms, bookings = JsonStore(path).read()
        except FileNotFoundError as e:
            return StoreResult.failure(StoreErrorKind.NOT_FOUND, f"Error loading data: {e}")
        except (StoreFormatError, UnicodeDecodeError) as e:
            return StoreResult.failure(StoreErrorKind.FORMAT, f"Error loading data: {e}")
        except OSError as e:
            return StoreResult.failure(StoreErrorKind.IO, f"Error loading data: {e}")

        # both records decoded; only now replace the in-memory state
        self.rooms = rooms
        self.bookings = bookings
        return StoreResult.success("Data loaded successfully.")

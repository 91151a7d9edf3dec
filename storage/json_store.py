# storage/json_store.py
from __future__ import annotations
import json
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from models.booking import Booking
from models.guest import Guest
from models.room import Room


class StoreFormatError(ValueError):
    """Raised when a data file does not hold a rooms record followed by a bookings record."""


class JsonStore:
    """
    Reads and writes the hotel state as two JSON lines:
    the rooms record first, then the bookings record.
    Bookings point at rooms by their position in the rooms record,
    so a loaded booking shares the very Room object found in the room list.
    """

    ROOMS_RECORD = "rooms"
    BOOKINGS_RECORD = "bookings"

    def __init__(self, path: str):
        self.path = path

    # ---------- writing ----------
    def write(self, rooms: List[Room], bookings: List[Booking]) -> None:
        # a Room listed twice is referenced through its first slot;
        # the second slot reloads as a separate copy
        index_by_id: Dict[int, int] = {}
        for i, room in enumerate(rooms):
            index_by_id.setdefault(id(room), i)
        rooms_record = {
            "record": self.ROOMS_RECORD,
            "items": [self._room_to_dict(r) for r in rooms],
        }
        bookings_record = {
            "record": self.BOOKINGS_RECORD,
            "items": [self._booking_to_dict(b, index_by_id) for b in bookings],
        }
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(json.dumps(rooms_record) + "\n")
            f.write(json.dumps(bookings_record) + "\n")

    def _room_to_dict(self, room: Room) -> Dict[str, Any]:
        return {
            "room_number": room.room_number,
            "room_type": room.room_type,
            "price": room.price,
            "is_available": room.is_available,
        }

    def _booking_to_dict(self, booking: Booking, index_by_id: Dict[int, int]) -> Dict[str, Any]:
        room_index = index_by_id.get(id(booking.room))
        return {
            "guest": {
                "name": booking.guest.name,
                "contact_info": booking.guest.contact_info,
                "id_proof": booking.guest.id_proof,
            },
            "room_index": room_index,
            # rooms outside the inventory list are embedded instead
            "room": self._room_to_dict(booking.room) if room_index is None else None,
            "check_in": booking.check_in.isoformat(),
            "check_out": booking.check_out.isoformat(),
            "total_price": booking.total_price,
        }

    # ---------- reading ----------
    def read(self) -> Tuple[List[Room], List[Booking]]:
        with open(self.path, "r", encoding="utf-8") as f:
            lines = [line for line in f.read().splitlines() if line.strip()]

        if len(lines) != 2:
            raise StoreFormatError(f"expected 2 records, found {len(lines)}")

        rooms_items = self._record_items(lines[0], self.ROOMS_RECORD)
        bookings_items = self._record_items(lines[1], self.BOOKINGS_RECORD)

        try:
            rooms = [self._room_from_dict(d) for d in rooms_items]
            bookings = [self._booking_from_dict(d, rooms) for d in bookings_items]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise StoreFormatError(f"bad entry: {e}") from e
        return rooms, bookings

    def _record_items(self, line: str, expected: str) -> List[Dict[str, Any]]:
        try:
            record = json.loads(line)
        except (json.JSONDecodeError, RecursionError) as e:
            raise StoreFormatError(f"{expected} record is not valid JSON") from e

        if not isinstance(record, dict) or record.get("record") != expected:
            raise StoreFormatError(f"expected a {expected} record")
        items = record.get("items")
        if not isinstance(items, list):
            raise StoreFormatError(f"{expected} record has no item list")
        return items

    def _field(self, d: Dict[str, Any], key: str, kind: Any) -> Any:
        value = d[key]
        # bool is an int subclass; never accept it where a number is expected
        if isinstance(value, bool) and kind is not bool:
            raise StoreFormatError(f"{key} must not be a boolean")
        if not isinstance(value, kind):
            raise StoreFormatError(f"{key} has the wrong type: {value!r}")
        return value

    def _room_from_dict(self, d: Dict[str, Any]) -> Room:
        return Room(
            room_number=self._field(d, "room_number", int),
            room_type=self._field(d, "room_type", str),
            price=float(self._field(d, "price", (int, float))),
            is_available=self._field(d, "is_available", bool),
        )

    def _booking_from_dict(self, d: Dict[str, Any], rooms: List[Room]) -> Booking:
        g = d["guest"]
        guest = Guest(
            name=self._field(g, "name", str),
            contact_info=self._field(g, "contact_info", str),
            id_proof=self._field(g, "id_proof", str),
        )

        room_index: Optional[int] = d.get("room_index")
        if room_index is not None:
            room_index = self._field(d, "room_index", int)
            if not 0 <= room_index < len(rooms):
                raise StoreFormatError(f"room_index {room_index!r} is out of range")
            room = rooms[room_index]
        else:
            room = self._room_from_dict(d["room"])

        # total_price is derived again from dates and the room's price
        return Booking(
            guest=guest,
            room=room,
            check_in=date.fromisoformat(self._field(d, "check_in", str)),
            check_out=date.fromisoformat(self._field(d, "check_out", str)),
        )

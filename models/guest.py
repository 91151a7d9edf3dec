# models/guest.py
from __future__ import annotations
from dataclasses import dataclass

@dataclass
class Guest:
    name: str
    contact_info: str
    id_proof: str

    def __str__(self) -> str:
        return f"Guest: {self.name} | Contact: {self.contact_info} | ID: {self.id_proof}"

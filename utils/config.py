# utils/config.py
from __future__ import annotations
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DATA_FILE = "hotel.dat"

@dataclass
class Settings:
    data_file: str = DEFAULT_DATA_FILE


def load_settings() -> Settings:
    """Reads HOTEL_DATA_FILE from the environment or a .env file."""
    load_dotenv()
    data_file = os.getenv("HOTEL_DATA_FILE") or DEFAULT_DATA_FILE
    return Settings(data_file=data_file.strip() or DEFAULT_DATA_FILE)

# models/store_result.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

class StoreErrorKind(Enum):
    NOT_FOUND = "not_found"
    IO = "io"
    FORMAT = "format"

@dataclass
class StoreResult:
    ok: bool
    message: str = ""
    error_kind: Optional[StoreErrorKind] = None

    @classmethod
    def success(cls, message: str) -> "StoreResult":
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, kind: StoreErrorKind, message: str) -> "StoreResult":
        return cls(ok=False, message=message, error_kind=kind)

    def __bool__(self) -> bool:
        return self.ok

# utils/money.py
from __future__ import annotations
from datetime import date

def format_price(amount: float) -> str:
    return f"${amount:.2f}"

def nights_between(check_in: date, check_out: date) -> int:
    return (check_out - check_in).days

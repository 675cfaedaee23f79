"""
Domain: fixed classification tags.

Values match the integer codes stored in the database. Display labels are a
presentation concern and live in `api/labels.py`.
"""

from __future__ import annotations

from enum import IntEnum


class Brand(IntEnum):
    TOTEM = 1
    CERAMICS = 2
    CANDLES = 3


class PaymentMethod(IntEnum):
    CASH = 1
    CARD = 2
    REVOLUT_LIDIA = 3
    REVOLUT_IVAYLO = 4

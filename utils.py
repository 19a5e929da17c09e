"""
utils.py
Table export and sample data.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable

import pandas as pd

from models import DISPLAY_COLUMNS, Kind, Plan, Status, Subscription


def subscriptions_to_dataframe(rows: Iterable[Subscription]) -> pd.DataFrame:
    return pd.DataFrame([s.to_row() for s in rows], columns=DISPLAY_COLUMNS)


def subscriptions_to_csv_bytes(rows: Iterable[Subscription]) -> bytes:
    df = subscriptions_to_dataframe(rows)
    return df.to_csv(index=False).encode("utf-8")


def sample_subscriptions() -> list[Subscription]:
    """
    The two records every fresh session starts with.
    """
    return [
        Subscription("S0001", "Sophie Tness", "99119911", date(2025, 9, 25), Decimal("35.00"),
                     Plan.MONTHLY, Status.IN_PROGRESS, Kind.PRODUCT),
        Subscription("S0002", "Dan Durance", "99112233", date(2025, 9, 25), Decimal("35.00"),
                     Plan.MONTHLY, Status.IN_PROGRESS, Kind.SERVICE),
    ]

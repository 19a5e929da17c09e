"""
validation.py
Field checks run against raw form values before any store mutation.

Every validate_* function returns a Failure on the first problem found,
or None when the value is acceptable.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum

from models import (
    CURRENCY_SYMBOL,
    DATE_FORMAT,
    Failure,
    FailureKind,
    Kind,
    Plan,
    Status,
    SubscriptionFields,
)

SERIAL_RE = re.compile(r"S[0-9]{4}")
PHONE_RE = re.compile(r"[0-9]{8}")
DATE_RE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")
AMOUNT_RE = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

SERIAL_MESSAGE = "Serial number must be in format S0001 (4 digits after S)."
CUSTOMER_MESSAGE = "Customer name cannot be empty."
PHONE_MESSAGE = "Phone number must be exactly 8 digits."
NEGATIVE_AMOUNT_MESSAGE = "Recurring price cannot be negative."
AMOUNT_MESSAGE = f"Recurring must be a valid number like {CURRENCY_SYMBOL}35.00"
DATE_MESSAGE = "Date must be in format MM/dd/yyyy (e.g., 09/25/2025)."


def _invalid(message: str) -> Failure:
    return Failure(FailureKind.VALIDATION, message)


# ---------- Parsers ----------

def parse_amount(raw) -> Decimal:
    """
    "$35.00", " $ 35 ", "35.00" -> Decimal("35.00") style values.
    Raises ValueError for unparsable or negative input.
    """
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, (int, float)) and not isinstance(raw, bool):
        value = Decimal(str(raw))
    else:
        text = str(raw).strip()
        if text.startswith(CURRENCY_SYMBOL):
            text = text[len(CURRENCY_SYMBOL):].strip()
        # plain decimals only; Decimal() alone would take "1_000" or "1e3"
        if not AMOUNT_RE.fullmatch(text):
            raise ValueError(AMOUNT_MESSAGE)
        try:
            value = Decimal(text)
        except InvalidOperation as exc:
            raise ValueError(AMOUNT_MESSAGE) from exc

    if not value.is_finite():
        raise ValueError(AMOUNT_MESSAGE)
    if value < 0:
        raise ValueError(NEGATIVE_AMOUNT_MESSAGE)
    if value == 0:
        # "-0.00" must not render as "$-0.00"
        value = value.copy_abs()
    return value


def parse_next_date(raw) -> date:
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw

    text = str(raw).strip()
    # strptime alone would accept "9/5/2025"
    if not DATE_RE.fullmatch(text):
        raise ValueError(DATE_MESSAGE)
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as exc:
        raise ValueError(DATE_MESSAGE) from exc


def parse_choice(raw, enum_cls: type[Enum]):
    if isinstance(raw, enum_cls):
        return raw
    wanted = str(raw).strip().lower()
    for member in enum_cls:
        if member.value.lower() == wanted:
            return member
    raise ValueError(raw)


# ---------- Field checks ----------

def validate_serial(serial: str) -> Failure | None:
    if not isinstance(serial, str) or not SERIAL_RE.fullmatch(serial):
        return _invalid(SERIAL_MESSAGE)
    return None


def validate_customer(customer: str) -> Failure | None:
    if customer is None or not str(customer).strip():
        return _invalid(CUSTOMER_MESSAGE)
    return None


def validate_phone(phone: str) -> Failure | None:
    if not isinstance(phone, str) or not PHONE_RE.fullmatch(phone):
        return _invalid(PHONE_MESSAGE)
    return None


def validate_amount(raw) -> Failure | None:
    try:
        parse_amount(raw)
    except ValueError as exc:
        return _invalid(str(exc))
    return None


def validate_next_date(raw) -> Failure | None:
    try:
        parse_next_date(raw)
    except ValueError as exc:
        return _invalid(str(exc))
    return None


def validate_choice(raw, enum_cls: type[Enum], label: str) -> Failure | None:
    try:
        parse_choice(raw, enum_cls)
    except ValueError:
        options = ", ".join(m.value for m in enum_cls)
        return _invalid(f"{label} must be one of {options}.")
    return None


def validate_fields(
    customer: str,
    phone: str,
    next_date,
    recurring_amount,
    plan,
    status,
    kind,
) -> SubscriptionFields | Failure:
    """
    Run every field check in form order and stop at the first failure.
    On success returns the normalized values ready to be stored.
    """
    checks = (
        lambda: validate_customer(customer),
        lambda: validate_phone(phone),
        lambda: validate_amount(recurring_amount),
        lambda: validate_next_date(next_date),
        lambda: validate_choice(plan, Plan, "Plan"),
        lambda: validate_choice(status, Status, "Status"),
        lambda: validate_choice(kind, Kind, "Type"),
    )
    for check in checks:
        failure = check()
        if failure is not None:
            return failure

    return SubscriptionFields(
        customer=str(customer).strip(),
        phone=phone,
        next_date=parse_next_date(next_date),
        recurring_amount=parse_amount(recurring_amount),
        plan=parse_choice(plan, Plan),
        status=parse_choice(status, Status),
        kind=parse_choice(kind, Kind),
    )

"""
models.py
Subscription record, enumerated choices, failure values and display helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

CURRENCY_SYMBOL = "$"
DATE_FORMAT = "%m/%d/%Y"  # MM/dd/yyyy

DISPLAY_COLUMNS = ["ID", "Customer", "Phone", "Next Date", "Recurring", "Plan", "Status", "Type"]


class Plan(str, Enum):
    MONTHLY = "Monthly"
    YEARLY = "Yearly"


class Status(str, Enum):
    IN_PROGRESS = "In Progress"
    QUOTATION = "Quotation"
    CLOSED = "Closed"


class Kind(str, Enum):
    PRODUCT = "Product"
    SERVICE = "Service"


class FailureKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Failure:
    """
    Outcome of a rejected store operation.
    `message` is meant to be shown to the user as-is.
    """

    kind: FailureKind
    message: str

    @property
    def is_validation(self) -> bool:
        return self.kind is FailureKind.VALIDATION

    @property
    def is_not_found(self) -> bool:
        return self.kind is FailureKind.NOT_FOUND


def format_amount(amount: Decimal) -> str:
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


@dataclass(frozen=True)
class SubscriptionFields:
    """Validated values for every field of a subscription except its id."""

    customer: str
    phone: str
    next_date: date
    recurring_amount: Decimal
    plan: Plan
    status: Status
    kind: Kind


@dataclass(frozen=True)
class Subscription:
    id: str
    customer: str
    phone: str
    next_date: date
    recurring_amount: Decimal
    plan: Plan
    status: Status
    kind: Kind  # Product or Service

    @classmethod
    def from_fields(cls, sub_id: str, fields: SubscriptionFields) -> Subscription:
        return cls(
            id=sub_id,
            customer=fields.customer,
            phone=fields.phone,
            next_date=fields.next_date,
            recurring_amount=fields.recurring_amount,
            plan=fields.plan,
            status=fields.status,
            kind=fields.kind,
        )

    @property
    def type(self) -> str:
        return self.kind.value

    def to_row(self) -> list[str]:
        """Display strings in DISPLAY_COLUMNS order."""
        return [
            self.id,
            self.customer,
            self.phone,
            format_date(self.next_date),
            format_amount(self.recurring_amount),
            self.plan.value,
            self.status.value,
            self.type,
        ]

"""
store.py
In-memory subscription store: the only place records are created, changed or removed.
"""

from __future__ import annotations

import functools
import logging
from typing import Iterable

import validation
from models import Failure, FailureKind, Subscription

logger = logging.getLogger(__name__)

UNEXPECTED_MESSAGE = "An unexpected error occurred. Please try again."


def _guarded(method):
    """Turn any unanticipated exception into an UNEXPECTED failure."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except Exception:
            logger.exception("Unexpected error in SubscriptionStore.%s", method.__name__)
            return Failure(FailureKind.UNEXPECTED, UNEXPECTED_MESSAGE)

    return wrapper


def _serial_number(serial: str) -> int:
    return int(serial[1:])


class SubscriptionStore:
    """
    Ordered collection of subscriptions (insertion order is display order).

    Serial ids come from a counter that only moves forward, so an id freed
    by remove() is never handed out again.
    """

    def __init__(self, initial: Iterable[Subscription] = ()):
        self._records: list[Subscription] = []
        self._last_serial = 0
        for sub in initial:
            self._seed(sub)
        logger.info("Subscription store ready with %d record(s)", len(self._records))

    def _seed(self, sub: Subscription) -> None:
        failure = validation.validate_serial(sub.id)
        if failure is not None:
            raise ValueError(f"{sub.id!r}: {failure.message}")
        if self._index_of(sub.id) is not None:
            raise ValueError(f"Duplicate subscription id {sub.id!r}")

        fields = validation.validate_fields(
            sub.customer, sub.phone, sub.next_date, sub.recurring_amount, sub.plan, sub.status, sub.kind
        )
        if isinstance(fields, Failure):
            raise ValueError(f"{sub.id!r}: {fields.message}")

        self._records.append(Subscription.from_fields(sub.id, fields))
        self._last_serial = max(self._last_serial, _serial_number(sub.id))

    def _index_of(self, sub_id: str) -> int | None:
        for i, sub in enumerate(self._records):
            if sub.id == sub_id:
                return i
        return None

    def __len__(self) -> int:
        return len(self._records)

    def next_id(self) -> str:
        return f"S{self._last_serial + 1:04d}"

    # ---------- Reads ----------

    def list(self) -> list[Subscription]:
        return list(self._records)

    def filter(self, keyword: str) -> list[Subscription]:
        needle = (keyword or "").strip().lower()
        if not needle:
            return self.list()
        matches = [
            sub for sub in self._records
            if any(needle in cell.lower() for cell in sub.to_row())
        ]
        logger.debug("Filter %r matched %d of %d", keyword, len(matches), len(self._records))
        return matches

    def find_by_id(self, sub_id: str) -> Subscription | Failure:
        idx = self._index_of(sub_id)
        if idx is None:
            return Failure(FailureKind.NOT_FOUND, f"Subscription {sub_id} was not found.")
        return self._records[idx]

    # ---------- Writes ----------

    @_guarded
    def create(self, customer, phone, next_date, recurring_amount, plan, status, kind) -> Subscription | Failure:
        sub_id = self.next_id()
        failure = validation.validate_serial(sub_id)
        if failure is not None:
            logger.warning("Create rejected: serial numbers exhausted (%s)", sub_id)
            return failure

        fields = validation.validate_fields(customer, phone, next_date, recurring_amount, plan, status, kind)
        if isinstance(fields, Failure):
            logger.warning("Create rejected: %s", fields.message)
            return fields

        sub = Subscription.from_fields(sub_id, fields)
        self._records.append(sub)
        self._last_serial += 1
        logger.info("New subscription %s added for customer: %s", sub.id, sub.customer)
        return sub

    @_guarded
    def update(self, sub_id, customer, phone, next_date, recurring_amount, plan, status, kind) -> Subscription | Failure:
        idx = self._index_of(sub_id)
        if idx is None:
            logger.warning("Update rejected: %s not found", sub_id)
            return Failure(FailureKind.NOT_FOUND, f"Subscription {sub_id} was not found.")

        fields = validation.validate_fields(customer, phone, next_date, recurring_amount, plan, status, kind)
        if isinstance(fields, Failure):
            logger.warning("Update of %s rejected: %s", sub_id, fields.message)
            return fields

        # records are frozen; the edited copy takes the old one's slot
        sub = Subscription.from_fields(sub_id, fields)
        self._records[idx] = sub
        logger.info("Subscription with ID %s edited.", sub_id)
        return sub

    @_guarded
    def remove(self, sub_id: str) -> Subscription | Failure:
        idx = self._index_of(sub_id)
        if idx is None:
            logger.warning("Remove rejected: %s not found", sub_id)
            return Failure(FailureKind.NOT_FOUND, f"Subscription {sub_id} was not found.")
        sub = self._records.pop(idx)
        logger.info("Removed subscription with ID: %s", sub_id)
        return sub

from datetime import date
from decimal import Decimal

import pytest

import validation
from models import Failure, FailureKind, Kind, Plan, Status, SubscriptionFields


@pytest.mark.parametrize("serial", ["S0001", "S9999", "S0420"])
def test_serial_accepts_s_plus_four_digits(serial):
    assert validation.validate_serial(serial) is None


@pytest.mark.parametrize("serial", ["S001", "S00001", "s0001", "X0001", "S00a1", "", None])
def test_serial_rejects_malformed(serial):
    failure = validation.validate_serial(serial)
    assert failure.kind is FailureKind.VALIDATION
    assert failure.message == validation.SERIAL_MESSAGE


@pytest.mark.parametrize("customer", ["", "   ", "\t"])
def test_customer_must_not_be_blank(customer):
    assert validation.validate_customer(customer).message == validation.CUSTOMER_MESSAGE


@pytest.mark.parametrize("phone", ["123", "123456789", "1234567a", "1234 5678", " 12345678", ""])
def test_phone_rejects_anything_but_eight_digits(phone):
    assert validation.validate_phone(phone).message == validation.PHONE_MESSAGE


def test_phone_accepts_eight_digits():
    assert validation.validate_phone("12345678") is None


@pytest.mark.parametrize("raw", ["$35.00", "35.00", " $ 35.00 ", "35"])
def test_parse_amount_with_or_without_symbol(raw):
    assert validation.parse_amount(raw) == 35.0


def test_parse_amount_keeps_zero():
    assert validation.parse_amount("$0.00") == Decimal("0")


def test_amount_unparsable():
    failure = validation.validate_amount("abc")
    assert failure.message == validation.AMOUNT_MESSAGE


@pytest.mark.parametrize("raw", ["-5.00", "$-5.00"])
def test_amount_negative(raw):
    assert validation.validate_amount(raw).message == validation.NEGATIVE_AMOUNT_MESSAGE


@pytest.mark.parametrize("raw", ["NaN", "Infinity", "$", ""])
def test_amount_non_numbers(raw):
    assert validation.validate_amount(raw).message == validation.AMOUNT_MESSAGE


def test_parse_next_date():
    assert validation.parse_next_date("09/25/2025") == date(2025, 9, 25)
    assert validation.parse_next_date(date(2025, 1, 2)) == date(2025, 1, 2)


@pytest.mark.parametrize("raw", ["13/01/2025", "02/30/2025", "13/40/2025", "9/25/2025", "2025-09-25", "tomorrow"])
def test_next_date_rejects_bad_dates(raw):
    assert validation.validate_next_date(raw).message == validation.DATE_MESSAGE


def test_leap_day():
    assert validation.validate_next_date("02/29/2024") is None
    assert validation.validate_next_date("02/29/2025") is not None


def test_choice_accepts_label_or_member():
    assert validation.parse_choice("in progress", Status) is Status.IN_PROGRESS
    assert validation.parse_choice(Plan.YEARLY, Plan) is Plan.YEARLY


def test_choice_rejects_unknown():
    failure = validation.validate_choice("Weekly", Plan, "Plan")
    assert failure.message == "Plan must be one of Monthly, Yearly."


def test_validate_fields_normalizes(jane):
    fields = validation.validate_fields(**{**jane, "customer": "  Jane Doe "})
    assert fields == SubscriptionFields(
        customer="Jane Doe",
        phone="12345678",
        next_date=date(2025, 9, 25),
        recurring_amount=Decimal("35.00"),
        plan=Plan.MONTHLY,
        status=Status.IN_PROGRESS,
        kind=Kind.PRODUCT,
    )


def test_validate_fields_stops_at_first_failure(jane):
    result = validation.validate_fields(**{**jane, "phone": "123", "recurring_amount": "abc"})
    assert isinstance(result, Failure)
    assert result.message == validation.PHONE_MESSAGE


@pytest.mark.parametrize("raw", ["1_000", "1e3", "+5", "35.00.00", "3 5"])
def test_amount_rejects_non_plain_decimals(raw):
    assert validation.validate_amount(raw).message == validation.AMOUNT_MESSAGE


@pytest.mark.parametrize("raw", ["-0.00", "$-0", "-0"])
def test_negative_zero_becomes_zero(raw):
    value = validation.parse_amount(raw)
    assert value == 0
    assert not value.is_signed()

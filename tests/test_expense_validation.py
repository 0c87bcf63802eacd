import pytest
from pydantic import ValidationError

from expense_api.models import ExpenseIn
from expense_api.services.expense_validation import (
    AMOUNT_MESSAGE,
    CATEGORY_MESSAGE,
    DATE_MESSAGE,
    DESCRIPTION_MESSAGE,
    build_expense_in,
    parse_amount,
    validate_expense_payload,
)

VALID = {
    "amount": 10,
    "description": "Book",
    "category": "Education",
    "date": "2025-09-01",
}


@pytest.mark.parametrize(
    "value, expected",
    [
        (50, 50.0),
        (-3.5, -3.5),
        ("12.5", 12.5),
        ("12.5abc", 12.5),
        ("  7", 7.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("0", 0.0),
    ],
)
def test_parse_amount_accepts(value, expected):
    assert parse_amount(value) == expected


@pytest.mark.parametrize(
    "value", [None, 0, 0.0, "", "abc", True, False, [5], {"n": 1}, "1e999"]
)
def test_parse_amount_rejects(value):
    assert parse_amount(value) is None


def test_valid_payload_has_no_issues():
    assert validate_expense_payload(VALID) == []


def test_all_fields_missing():
    issues = validate_expense_payload({})
    assert [i.field for i in issues] == ["amount", "description", "category", "date"]
    assert [i.message for i in issues] == [
        AMOUNT_MESSAGE,
        DESCRIPTION_MESSAGE,
        CATEGORY_MESSAGE,
        DATE_MESSAGE,
    ]


@pytest.mark.parametrize("payload", [None, [], "text", 42])
def test_non_mapping_treated_as_empty(payload):
    assert len(validate_expense_payload(payload)) == 4


@pytest.mark.parametrize("field", ["description", "category"])
@pytest.mark.parametrize("value", ["", "   ", 12, None, ["x"]])
def test_text_fields_rejected(field, value):
    issues = validate_expense_payload({**VALID, field: value})
    assert [i.code for i in issues] == [f"invalid_{field}"]


@pytest.mark.parametrize(
    "value",
    ["2025-9-01", "25-09-01", "2025/09/01", "2025-09-01\n", " 2025-09-01", 20250901, None],
)
def test_date_shape_rejected(value):
    issues = validate_expense_payload({**VALID, "date": value})
    assert [i.code for i in issues] == ["invalid_date"]


@pytest.mark.parametrize("value", ["2025-02-30", "2025-13-40", "0000-00-00"])
def test_date_calendar_not_checked(value):
    assert validate_expense_payload({**VALID, "date": value}) == []


def test_non_ascii_digits_rejected():
    issues = validate_expense_payload({**VALID, "date": "２０２５-09-01"})
    assert [i.code for i in issues] == ["invalid_date"]


def test_build_expense_in_trims_and_coerces():
    expense_in = build_expense_in(
        {"amount": "9.99 USD", "description": " Pen ", "category": " Office", "date": "2025-01-02"}
    )
    assert expense_in == ExpenseIn(
        amount=9.99, description="Pen", category="Office", date="2025-01-02"
    )


def test_build_expense_in_refuses_unvalidated_amount():
    with pytest.raises(ValueError):
        build_expense_in({**VALID, "amount": "abc"})


def test_expense_in_guards_direct_construction():
    with pytest.raises(ValidationError):
        ExpenseIn(amount=1.0, description="   ", category="Food", date="2025-01-01")
    with pytest.raises(ValidationError):
        ExpenseIn(amount=1.0, description="x", category="Food", date="01-01-2025")

"""Tests for journal entry recording and listing."""

from datetime import date
from decimal import Decimal

import pytest

from ledgerbook.domain.errors import NotFoundError, ValidationError
from ledgerbook.domain.journal import coerce_line_amount
from ledgerbook.domain.transaction import transaction_reference


def test_record_entry(journal_service, sample_business, sample_chart):
    entry_id = journal_service.record_entry(
        date=date(2024, 3, 1),
        business_id=sample_business.id,
        description="Owner contribution",
        lines=[("1010", Decimal("1000"), Decimal("0")), ("3100", Decimal("0"), Decimal("1000"))],
    )

    (listing,) = journal_service.list_entries(business_id=sample_business.id)
    assert listing.entry.id == entry_id
    assert listing.entry.description == "Owner contribution"
    assert [line.account_code for line in listing.lines] == ["1010", "3100"]
    assert listing.total_debit == Decimal("1000")
    assert listing.total_credit == Decimal("1000")
    assert listing.balanced is True


def test_unbalanced_entry_is_stored_and_flagged(journal_service, sample_business, sample_chart):
    journal_service.record_entry(
        date=date(2024, 3, 1),
        business_id=sample_business.id,
        description="Typo",
        lines=[("1010", Decimal("150"), Decimal("0")), ("4100", Decimal("0"), Decimal("100"))],
    )

    (listing,) = journal_service.list_entries()
    assert listing.balanced is False


def test_record_entry_keeps_transaction_id(journal_service, temp_db, sample_business, sample_chart):
    entry_id = journal_service.record_entry(
        date=date(2024, 3, 1),
        business_id=sample_business.id,
        description="Imported",
        lines=[("1010", Decimal("5"), Decimal("0")), ("4900", Decimal("0"), Decimal("5"))],
        transaction_id="bank:42",
    )

    found = temp_db.find_entry_by_transaction("bank:42")
    assert found.id == entry_id
    assert found.transaction_id == "bank:42"


def test_record_entry_unknown_business(journal_service, sample_chart):
    with pytest.raises(NotFoundError, match="Business 99 not found"):
        journal_service.record_entry(
            date=date(2024, 3, 1),
            business_id=99,
            description="Ghost",
            lines=[("1010", Decimal("1"), Decimal("0"))],
        )


def test_record_entry_unknown_account(journal_service, sample_business, sample_chart):
    with pytest.raises(NotFoundError, match="Account '7777' not found"):
        journal_service.record_entry(
            date=date(2024, 3, 1),
            business_id=sample_business.id,
            description="Bad account",
            lines=[("7777", Decimal("1"), Decimal("0"))],
        )


def test_record_entry_requires_lines(journal_service, sample_business):
    with pytest.raises(ValidationError, match="at least one line"):
        journal_service.record_entry(
            date=date(2024, 3, 1),
            business_id=sample_business.id,
            description="Empty",
            lines=[],
        )


@pytest.mark.parametrize(
    "debit, credit",
    [
        (Decimal("-1"), Decimal("0")),
        (Decimal("0"), Decimal("-5")),
        (Decimal("0"), Decimal("0")),
        (None, None),
    ],
)
def test_record_entry_rejects_bad_amounts(journal_service, sample_business, sample_chart, debit, credit):
    with pytest.raises(ValidationError):
        journal_service.record_entry(
            date=date(2024, 3, 1),
            business_id=sample_business.id,
            description="Bad amounts",
            lines=[("1010", debit, credit)],
        )


def test_list_entries_newest_first(journal_service, march_entries):
    listings = journal_service.list_entries()

    assert [l.entry.id for l in listings] == [march_entries["rent"], march_entries["sale"]]


def test_list_entries_date_range(journal_service, march_entries):
    listings = journal_service.list_entries(
        start_date=date(2024, 3, 16), end_date=date(2024, 3, 31)
    )

    assert [l.entry.id for l in listings] == [march_entries["rent"]]


def test_list_entries_business_filter(journal_service, other_business, march_entries):
    assert journal_service.list_entries(business_id=other_business.id) == []


def test_list_entries_empty(journal_service):
    assert journal_service.list_entries() == []


def test_float_amounts_keep_their_printed_value(journal_service, temp_db, sample_business, sample_chart):
    entry_id = journal_service.record_entry(
        date=date(2024, 3, 1),
        business_id=sample_business.id,
        description="Petty cash",
        lines=[("6300", 0.1, 0), ("1010", 0, 0.1)],
    )

    lines = temp_db.fetch_lines([entry_id])
    assert [line.debit for line in lines] == [Decimal("0.10"), Decimal("0.00")]
    assert [line.credit for line in lines] == [Decimal("0.00"), Decimal("0.10")]


@pytest.mark.parametrize(
    "debit",
    [Decimal("NaN"), Decimal("Infinity"), float("inf"), float("nan"), "abc"],
)
def test_record_entry_rejects_non_numeric_amounts(journal_service, sample_business, sample_chart, debit):
    with pytest.raises(ValidationError, match="account '1010'"):
        journal_service.record_entry(
            date=date(2024, 3, 1),
            business_id=sample_business.id,
            description="Bad amount",
            lines=[("1010", debit, Decimal("0"))],
        )

    assert journal_service.list_entries() == []


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, Decimal("0")),
        ("", Decimal("0")),
        (5, Decimal("5")),
        (19.99, Decimal("19.99")),
        (" 12.50 ", Decimal("12.50")),
        (Decimal("7.25"), Decimal("7.25")),
    ],
)
def test_coerce_line_amount(value, expected):
    assert coerce_line_amount("1010", value) == expected


def test_entry_links_to_recorded_transaction(journal_service, transaction_service, sample_business, sample_chart):
    transaction_id = transaction_service.record_transaction(
        business_id=sample_business.id, date=date(2024, 3, 4), amount=Decimal("80")
    )

    entry_id = journal_service.record_entry(
        date=date(2024, 3, 4),
        business_id=sample_business.id,
        description="Supplies",
        lines=[("6300", Decimal("80"), Decimal("0")), ("1010", Decimal("0"), Decimal("80"))],
        transaction_id=transaction_reference(transaction_id),
    )

    assert transaction_service.find_journal_entry(transaction_id).id == entry_id


def test_entry_rejects_missing_transaction(journal_service, sample_business, sample_chart):
    with pytest.raises(NotFoundError, match="Transaction 12 not found"):
        journal_service.record_entry(
            date=date(2024, 3, 4),
            business_id=sample_business.id,
            description="Supplies",
            lines=[("6300", Decimal("80"), Decimal("0"))],
            transaction_id="transaction:12",
        )


def test_entry_rejects_other_business_transaction(
    journal_service, transaction_service, sample_business, other_business, sample_chart
):
    transaction_id = transaction_service.record_transaction(
        business_id=other_business.id, date=date(2024, 3, 4), amount=Decimal("80")
    )

    with pytest.raises(ValidationError, match="another business"):
        journal_service.record_entry(
            date=date(2024, 3, 4),
            business_id=sample_business.id,
            description="Supplies",
            lines=[("6300", Decimal("80"), Decimal("0"))],
            transaction_id=transaction_reference(transaction_id),
        )

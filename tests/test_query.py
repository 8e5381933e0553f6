from datetime import datetime, timezone

import pytest

from finance_tracker.core.exceptions import ValidationError
from finance_tracker.db import ExpenseTransaction
from finance_tracker.services.query import (MAX_PAGE_SIZE, DateRange, Page,
                                            month_window, parse_id_list,
                                            parse_sort)


def test_month_window_covers_leap_february():
    start, end = month_window(2, 2024)

    assert start == datetime(2024, 2, 1)
    assert end == datetime(2024, 2, 29, 23, 59, 59, 999000)
    assert start <= datetime(2024, 2, 29, 23, 59, 59, 999000) <= end
    assert not datetime(2024, 3, 1) <= end


def test_month_window_regular_february_and_december():
    assert month_window(2, 2023)[1].day == 28
    assert month_window(12, 2023)[1] == datetime(2023, 12, 31, 23, 59, 59, 999000)


def test_month_window_rejects_bad_month():
    with pytest.raises(ValidationError):
        month_window(13, 2024)


def test_month_and_year_beat_explicit_range():
    dates = DateRange.resolve(datetime(2020, 1, 1), datetime(2020, 12, 31), month=4, year=2024)

    assert dates == DateRange(datetime(2024, 4, 1), datetime(2024, 4, 30, 23, 59, 59, 999000))


@pytest.mark.parametrize("month, year", [(4, None), (None, 2024)])
def test_month_and_year_must_come_together(month, year):
    with pytest.raises(ValidationError):
        DateRange.resolve(month=month, year=year)


def test_explicit_range_is_normalized_to_naive_utc():
    dates = DateRange.resolve(start_date=datetime(2024, 1, 1, 5, tzinfo=timezone.utc))

    assert dates.start == datetime(2024, 1, 1, 5)
    assert dates.end is None


def test_empty_range_adds_no_clauses():
    assert DateRange().clauses(ExpenseTransaction.expense_date) == []
    assert len(DateRange(datetime(2024, 1, 1)).clauses(ExpenseTransaction.expense_date)) == 1


@pytest.mark.parametrize(
    "total, size, pages",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 7, 4)],
)
def test_total_pages_is_ceiling(total, size, pages):
    info = Page(1, size).info(total)

    assert info.total_pages == pages
    assert info.total_items == total
    assert info.items_per_page == size


def test_page_offset():
    assert Page(3, 20).offset == 40


@pytest.mark.parametrize("number, size", [(0, 10), (1, 0), (1, MAX_PAGE_SIZE + 1), (-1, 10)])
def test_page_bounds(number, size):
    with pytest.raises(ValidationError):
        Page(number, size)


def test_parse_sort_direction_and_tiebreaker():
    columns = {"amount": ExpenseTransaction.amount}

    descending = parse_sort("-amount", columns, "amount", ExpenseTransaction.id)
    ascending = parse_sort(None, columns, "amount", ExpenseTransaction.id)

    assert len(descending) == 2
    assert "DESC" in str(descending[0]).upper()
    assert "DESC" not in str(ascending[0]).upper()


def test_parse_sort_rejects_unknown_field():
    with pytest.raises(ValidationError) as excinfo:
        parse_sort("password", {"amount": ExpenseTransaction.amount}, "amount", ExpenseTransaction.id)

    assert "password" in excinfo.value.errors[0]


def test_parse_id_list():
    assert parse_id_list("3, 7,9", "categories") == [3, 7, 9]
    assert parse_id_list("  ", "categories") is None
    assert parse_id_list(None, "categories") is None
    with pytest.raises(ValidationError):
        parse_id_list("3,abc", "categories")

import pytest

from lendinglib.models import (
    Book,
    Borrower,
    Date,
    Loan,
    compare_dates,
    format_date,
    parse_date,
)


@pytest.mark.parametrize(
    "date",
    [Date(2024, 1, 1), Date(2024, 1, 31), Date(2023, 2, 28), Date(2024, 12, 31)],
)
def test_valid_dates(date):
    assert date.is_valid() is True


@pytest.mark.parametrize(
    "date",
    [
        Date(2024, 0, 10),
        Date(2024, 13, 10),
        Date(2024, 5, 0),
        Date(2024, 4, 31),
        Date(2024, 2, 29),  # leap years are not considered
        Date(2024, 1, 32),
    ],
)
def test_invalid_dates(date):
    assert date.is_valid() is False


def test_add_zero_days_is_identity():
    date = Date(2024, 6, 15)
    assert date.add_days(0) == date


def test_add_days_within_month_keeps_month():
    date = Date(2024, 6, 1)
    result = date.add_days(14)
    assert result.month == date.month
    assert result.year == date.year
    assert result.day == date.day + 14


def test_add_thirty_days_moves_one_month():
    date = Date(2024, 6, 15)
    result = date.add_days(30)
    assert result.day == date.day
    assert result.month == date.month + 1
    assert result.year == date.year


def test_add_days_rolls_over_year():
    date = Date(2024, 12, 10)
    result = date.add_days(30)
    assert result.month == 1
    assert result.year == date.year + 1
    assert result.day == date.day


def test_add_days_does_not_mutate():
    date = Date(2024, 3, 20)
    date.add_days(14)
    assert date == Date(2024, 3, 20)


def test_add_days_result_is_later():
    date = Date(2024, 3, 25)
    assert compare_dates(date.add_days(14), date) == 1


def test_compare_dates_values():
    earlier = Date(2024, 3, 5)
    later = Date(2024, 3, 6)
    assert compare_dates(earlier, later) == -1
    assert compare_dates(later, earlier) == 1
    assert compare_dates(earlier, Date(2024, 3, 5)) == 0


def test_compare_dates_year_dominates():
    assert compare_dates(Date(2023, 12, 31), Date(2024, 1, 1)) == -1
    assert compare_dates(Date(2025, 1, 1), Date(2024, 12, 31)) == 1


def test_compare_dates_month_before_day():
    assert compare_dates(Date(2024, 2, 1), Date(2024, 1, 31)) == 1


def test_dates_sort_chronologically():
    dates = [Date(2024, 5, 1), Date(2023, 12, 31), Date(2024, 1, 15)]
    ordered = sorted(dates)
    assert ordered == [Date(2023, 12, 31), Date(2024, 1, 15), Date(2024, 5, 1)]


def test_format_date_is_day_month_year_unpadded():
    assert format_date(Date(2024, 3, 5)) == "5/3/2024"
    assert str(Date(2024, 3, 5)) == "5/3/2024"


def test_parse_date_round_trip():
    assert parse_date("2024-03-05") == Date(2024, 3, 5)


def test_parse_date_does_not_validate():
    date = parse_date("2024-02-30")
    assert date == Date(2024, 2, 30)
    assert date.is_valid() is False


@pytest.mark.parametrize("text", ["2024/03/05", "abc", "", "2024-03"])
def test_parse_date_rejects_bad_format(text):
    with pytest.raises(ValueError):
        parse_date(text)


def test_overdue_same_day_is_not_overdue():
    due = Date(2024, 5, 10)
    assert due.is_overdue_on(Date(2024, 5, 10)) is False


def test_overdue_day_after():
    due = Date(2024, 5, 10)
    assert due.is_overdue_on(Date(2024, 5, 11)) is True


def test_overdue_previous_year():
    due = Date(2023, 12, 31)
    assert due.is_overdue_on(Date(2024, 1, 1)) is True


def test_overdue_checks_month_regardless_of_year():
    due = Date(2025, 1, 20)
    assert due.is_overdue_on(Date(2024, 6, 1)) is True


def test_not_overdue_before_due():
    due = Date(2024, 5, 10)
    assert due.is_overdue_on(Date(2024, 5, 1)) is False


def test_book_availability():
    book = Book(1, "Dune", "Herbert", 2)
    assert book.is_available() is True
    book.copies = 0
    assert book.is_available() is False


def test_book_negative_copies_unavailable():
    assert Book(2, "Emma", "Austen", -1).is_available() is False


def test_loan_defaults_and_identity():
    borrower = Borrower(7, "Alice")
    book = Book(1, "Dune", "Herbert", 1)
    first = Loan(borrower, book, 3, Date(2024, 1, 1), Date(2024, 1, 15))
    second = Loan(borrower, book, 3, Date(2024, 1, 1), Date(2024, 1, 15))
    assert first.overdue is False
    assert first != second
    assert first in [first]
    assert second not in [first]


def test_loan_fields_are_mutable():
    loan = Loan(Borrower(7, "Alice"), Book(1, "Dune", "Herbert", 1), 2,
                Date(2024, 1, 1), Date(2024, 1, 15))
    loan.borrow_date = Date(2024, 2, 1)
    loan.overdue = True
    assert loan.borrow_date == Date(2024, 2, 1)
    assert loan.overdue is True
"""Core records of the lending library: dates, books, borrowers and loans."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace

# Fixed month lengths; leap years are deliberately not considered.
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Every month counts as 30 days when a loan period is added to a date.
_MONTH_LENGTH_FOR_ARITHMETIC = 30

_DATE_PATTERN = re.compile(r"\s*([+-]?\d+)-\s*([+-]?\d+)-\s*([+-]?\d+)")


@dataclass(frozen=True, order=True)
class Date:
    """A calendar date, ordered by year, then month, then day."""

    year: int
    month: int
    day: int

    def is_valid(self) -> bool:
        """Return True if the month is 1-12 and the day fits that month."""
        if not 1 <= self.month <= 12:
            return False
        return 1 <= self.day <= _DAYS_IN_MONTH[self.month - 1]

    def add_days(self, days: int) -> Date:
        """Return the date ``days`` later, treating every month as 30 days."""
        year, month, day = self.year, self.month, self.day + days
        while day > _MONTH_LENGTH_FOR_ARITHMETIC:
            day -= _MONTH_LENGTH_FOR_ARITHMETIC
            month += 1
            if month > 12:
                month = 1
                year += 1
        return replace(self, year=year, month=month, day=day)

    def is_overdue_on(self, today: Date) -> bool:
        """Return True if this due date counts as overdue on ``today``.

        The year, month and day are checked one after another; any of them
        being smaller than today's marks the date as overdue.
        """
        if self.year < today.year:
            return True
        if self.month < today.month:
            return True
        return self.day < today.day

    def __str__(self) -> str:
        return format_date(self)


def parse_date(text: str) -> Date:
    """Parse ``YYYY-MM-DD`` into a Date without checking that it is valid.

    Raises ValueError when the text is not in that format.
    """
    match = _DATE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"invalid date format {text!r}, expected YYYY-MM-DD")
    year, month, day = (int(part) for part in match.groups())
    return Date(year, month, day)


def compare_dates(first: Date, second: Date) -> int:
    """Return -1, 0 or 1 as ``first`` is before, equal to or after ``second``."""
    if first < second:
        return -1
    if first > second:
        return 1
    return 0


def format_date(date: Date) -> str:
    """Format a date as ``day/month/year`` without zero padding."""
    return f"{date.day}/{date.month}/{date.year}"


@dataclass
class Book:
    """A catalogued title with a count of copies on the shelf."""

    id: int
    title: str
    author: str
    copies: int

    def is_available(self) -> bool:
        """Return True if at least one copy can be lent."""
        return self.copies > 0


@dataclass
class Borrower:
    """A registered library member."""

    id: int
    name: str


@dataclass(eq=False)
class Loan:
    """A request or loan of one book by one borrower."""

    borrower: Borrower
    book: Book
    priority: int
    borrow_date: Date
    return_date: Date
    overdue: bool = field(default=False)
"""The library's catalogue, members and loan queues, with borrowing and returns."""

from __future__ import annotations

import datetime
import enum
from bisect import bisect_right
from dataclasses import dataclass

from lendinglib.models import Book, Borrower, Date, Loan

LOAN_PERIOD_DAYS = 14

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class LibraryError(Exception):
    """Base class for errors raised by the library."""


class DuplicateIdError(LibraryError):
    """A book or borrower with the same identifier is already registered."""


class NotFoundError(LibraryError, LookupError):
    """A book, borrower or active loan could not be found."""


class RequestStatus(enum.IntEnum):
    """Outcome of checking whether a loan request can be served at once."""

    VALID = 1
    INVALID = 0
    UNAVAILABLE = -1
    ALREADY_BORROWED = -2

    @property
    def reason(self) -> str:
        """Human-readable explanation of why a request was queued."""
        return _REASONS[self]


_REASONS = {
    RequestStatus.VALID: "Loan granted",
    RequestStatus.INVALID: "Invalid book or borrower",
    RequestStatus.UNAVAILABLE: "No copies available",
    RequestStatus.ALREADY_BORROWED: "Book already borrowed",
}


@dataclass(frozen=True)
class BorrowResult:
    """What happened to a borrow request."""

    loan: Loan
    status: RequestStatus

    @property
    def pending(self) -> bool:
        """True if the request was queued instead of granted."""
        return self.status is not RequestStatus.VALID


@dataclass(frozen=True)
class ReturnResult:
    """What happened when a book came back."""

    returned: Loan
    promoted: Loan | None
    copies: int | None


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


class Library:
    """Books and borrowers kept in id order, and three loan queues.

    Active, pending and returned loans are kept ordered by ascending priority,
    later entries of equal priority after earlier ones; a pending request that
    is granted on a return goes to the front of the active loans.
    """

    def __init__(self) -> None:
        self.books: list[Book] = []
        self.borrowers: list[Borrower] = []
        self.active: list[Loan] = []
        self.pending: list[Loan] = []
        self.returned: list[Loan] = []

    # ------------------------------------------------------------ registry
    def add_book(self, book_id: int, title: str, author: str, copies: int) -> Book:
        """Register a book; raise DuplicateIdError if the id is taken."""
        if self.find_book(book_id) is not None:
            raise DuplicateIdError(f"Book with ID {book_id} already exists.")
        book = Book(book_id, title, author, copies)
        index = bisect_right([b.id for b in self.books], book_id)
        self.books.insert(index, book)
        return book

    def add_borrower(self, borrower_id: int, name: str) -> Borrower:
        """Register a borrower; raise DuplicateIdError if the id is taken."""
        if self.find_borrower(borrower_id) is not None:
            raise DuplicateIdError(f"Borrower with ID {borrower_id} already exists.")
        borrower = Borrower(borrower_id, name)
        index = bisect_right([b.id for b in self.borrowers], borrower_id)
        self.borrowers.insert(index, borrower)
        return borrower

    def find_book(self, book_id: int) -> Book | None:
        """Return the book with this id, or None."""
        return next((b for b in self.books if b.id == book_id), None)

    def find_borrower(self, borrower_id: int) -> Borrower | None:
        """Return the borrower with this id, or None."""
        return next((b for b in self.borrowers if b.id == borrower_id), None)

    def find_active_loan(self, book_id: int, borrower_id: int) -> Loan | None:
        """Return the active loan of this book to this borrower, or None."""
        return next(
            (
                loan
                for loan in self.active
                if loan.book.id == book_id and loan.borrower.id == borrower_id
            ),
            None,
        )

    def validate_loan_request(
        self, book: Book | None, borrower: Borrower | None
    ) -> RequestStatus:
        """Decide whether a loan of ``book`` to ``borrower`` can be granted now."""
        if book is None or borrower is None:
            return RequestStatus.INVALID
        if not book.is_available():
            return RequestStatus.UNAVAILABLE
        if self.find_active_loan(book.id, borrower.id) is not None:
            return RequestStatus.ALREADY_BORROWED
        return RequestStatus.VALID

    # ------------------------------------------------------------ lending
    @staticmethod
    def _insert_by_priority(queue: list[Loan], loan: Loan) -> None:
        index = bisect_right([item.priority for item in queue], loan.priority)
        queue.insert(index, loan)

    def borrow(
        self, book_id: int, borrower_id: int, date: Date, priority: int
    ) -> BorrowResult:
        """Lend a book, or queue the request when it cannot be served now.

        Raises NotFoundError if the borrower or the book is unknown.
        """
        borrower = self.find_borrower(borrower_id)
        book = self.find_book(book_id)
        if borrower is None or book is None:
            problems = []
            if borrower is None:
                problems.append(f"Borrower ID {borrower_id} not found.")
            if book is None:
                problems.append(f"Book ID {book_id} not found.")
            raise NotFoundError(" ".join(problems))

        status = self.validate_loan_request(book, borrower)
        loan = Loan(
            borrower=borrower,
            book=book,
            priority=priority,
            borrow_date=date,
            return_date=date.add_days(LOAN_PERIOD_DAYS),
        )
        if status is RequestStatus.VALID:
            self._insert_by_priority(self.active, loan)
            book.copies -= 1
        else:
            self._insert_by_priority(self.pending, loan)
        return BorrowResult(loan, status)

    def _next_pending_for(self, book_id: int) -> Loan | None:
        best: Loan | None = None
        highest = -1
        for loan in self.pending:
            if loan.book.id != book_id:
                continue
            if loan.priority > highest or (
                best is not None
                and loan.priority == highest
                and loan.borrow_date < best.borrow_date
            ):
                highest = loan.priority
                best = loan
        return best

    def return_book(self, book_id: int, borrower_id: int, date: Date) -> ReturnResult:
        """Take a book back on ``date`` and hand it to the best waiting request.

        The waiting request with the highest priority wins, the oldest one on
        a tie; it starts a fresh loan period on ``date``. With nobody waiting
        the book's copy count goes up by one. Raises NotFoundError if there is
        no such active loan.
        """
        loan = self.find_active_loan(book_id, borrower_id)
        if loan is None:
            raise NotFoundError(
                f"No active loan found for Book ID {book_id} "
                f"and Borrower ID {borrower_id}"
            )
        book = self.find_book(book_id)
        returned = Loan(
            borrower=loan.borrower,
            book=loan.book,
            priority=loan.priority,
            borrow_date=loan.borrow_date,
            return_date=date,
            overdue=date > loan.return_date,
        )
        self._insert_by_priority(self.returned, returned)
        self.active.remove(loan)

        promoted = self._next_pending_for(book_id)
        copies: int | None = None
        if promoted is not None:
            self.pending.remove(promoted)
            promoted.borrow_date = date
            promoted.return_date = date.add_days(LOAN_PERIOD_DAYS)
            self.active.insert(0, promoted)
        elif book is not None:
            book.copies += 1
            copies = book.copies
        return ReturnResult(returned, promoted, copies)

    # ------------------------------------------------------------ queries
    def overdue_loans(self, today: Date | None = None) -> list[Loan]:
        """Return the active loans whose due date counts as past on ``today``.

        ``today`` defaults to the local system date.
        """
        if today is None:
            now = datetime.date.today()
            today = Date(now.year, now.month, now.day)
        return [loan for loan in self.active if loan.return_date.is_overdue_on(today)]

    def search_books(self, term: str) -> list[Book]:
        """Return books whose title contains ``term``, ignoring ASCII case."""
        needle = _ascii_lower(term)
        return [book for book in self.books if needle in _ascii_lower(book.title)]
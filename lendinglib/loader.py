"""Loading books, borrowers and loan transactions from text files.

Book files hold lines of the form ``ADD_BOOK <id> "<title>" "<author>" <copies>``.
Library data files hold ``ADD_BORROWER``, ``BORROW_BOOK`` and ``RETURN_BOOK``
commands, one per line; lines starting with ``#`` are comments.
"""

from __future__ import annotations

import enum
import os
import re

from lendinglib.library import DuplicateIdError, Library, NotFoundError
from lendinglib.models import Date

# An integer as read by a scanf-style %d: optional sign, digits, never split.
_INT = r"\s*([+-]?\d+)(?!\d)"

_BOOK_PATTERN = re.compile(r'ADD_BOOK' + _INT + r'\s*"([^"]+)"\s*"([^"]+)"' + _INT)
_BORROWER_PATTERN = re.compile(r"ADD_BORROWER" + _INT + r"\s*(\S+)")
_BORROW_PATTERN = re.compile(
    r"BORROW_BOOK" + _INT + _INT + _INT + r"-" + _INT + r"-" + _INT + _INT
)
_RETURN_PATTERN = re.compile(r"RETURN_BOOK" + _INT + _INT + _INT + r"-" + _INT + r"-" + _INT)


class LoadMode(enum.Enum):
    """Which commands of a library data file are carried out."""

    BORROWERS = 1
    BORROWS = 2
    RETURNS = 3
    ALL = 4


def parse_book_line(line: str) -> tuple[int, str, str, int]:
    """Parse an ``ADD_BOOK`` line into ``(id, title, author, copies)``.

    Raises ValueError when the line is not in that format.
    """
    match = _BOOK_PATTERN.match(line)
    if match is None:
        raise ValueError(f"not an ADD_BOOK line: {line!r}")
    book_id, title, author, copies = match.groups()
    return int(book_id), title, author, int(copies)


def load_books(library: Library, path: str | os.PathLike[str]) -> list[str]:
    """Add every book listed in the file at ``path`` and return the messages.

    Lines that are not ``ADD_BOOK`` commands are ignored. Raises OSError when
    the file cannot be opened.
    """
    messages: list[str] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            try:
                book_id, title, author, copies = parse_book_line(line)
            except ValueError:
                continue
            try:
                library.add_book(book_id, title, author, copies)
            except DuplicateIdError as exc:
                messages.append(str(exc))
            else:
                messages.append(f"Added book ID {book_id}: {title} by {author}")
    return messages


def _add_borrower(library: Library, line: str) -> list[str]:
    match = _BORROWER_PATTERN.match(line)
    if match is None:
        return []
    borrower_id, name = int(match.group(1)), match.group(2)
    try:
        library.add_borrower(borrower_id, name)
    except DuplicateIdError as exc:
        return [str(exc)]
    return [f"Added borrower ID {borrower_id}: {name}"]


def _borrow(library: Library, line: str) -> list[str]:
    match = _BORROW_PATTERN.match(line)
    if match is None:
        return [f"Error: Invalid input format: {line}"]
    book_id, borrower_id, year, month, day, priority = (int(g) for g in match.groups())
    date = Date(year, month, day)
    if not date.is_valid():
        return [f"Error parsing line {line}: invalid date"]
    try:
        result = library.borrow(book_id, borrower_id, date, priority)
    except NotFoundError as exc:
        return [f"Error: {exc}"]
    if result.pending:
        return [
            f"Added to pending requests: Book ID {book_id}, Borrower ID {borrower_id}",
            f"Reason: {result.status.reason}",
        ]
    due = result.loan.return_date
    return [
        f"Successfully borrowed Book ID {book_id} by Borrower ID {borrower_id}",
        f"Due Date: {due.year}-{due.month:02d}-{due.day:02d}",
    ]


def _return(library: Library, line: str) -> list[str]:
    match = _RETURN_PATTERN.match(line)
    if match is None:
        return [f"Error: The loan was not found or invalid input: {line}"]
    book_id, borrower_id, year, month, day = (int(g) for g in match.groups())
    date = Date(year, month, day)
    if not date.is_valid():
        return [f"Error parsing line {line}: invalid date"]
    try:
        result = library.return_book(book_id, borrower_id, date)
    except NotFoundError as exc:
        return [f"Error: {exc}"]
    messages = [f"Returned book ID {book_id} by borrower ID {borrower_id}"]
    if result.promoted is not None:
        messages.append(
            "Book loaned to next pending borrower "
            f"(Priority: {result.promoted.priority})!"
        )
    elif result.copies is not None:
        messages.append(f"Book returned, copies increased to {result.copies}!")
    return messages


def process_line(library: Library, line: str, mode: LoadMode) -> list[str]:
    """Carry out one data-file command allowed by ``mode``; return the messages."""
    mode = LoadMode(mode)
    line = line.split("\n", 1)[0] if line.strip("\n") else line
    wants_borrowers = mode in (LoadMode.BORROWERS, LoadMode.ALL)
    wants_borrows = mode in (LoadMode.BORROWS, LoadMode.ALL)
    wants_returns = mode in (LoadMode.RETURNS, LoadMode.ALL)

    if mode is LoadMode.ALL:
        if "ADD_BORROWER" in line:
            return _add_borrower(library, line)
        if "BORROW_BOOK" in line:
            return _borrow(library, line)
        if "RETURN_BOOK" in line:
            return _return(library, line)
        return []
    if wants_borrowers and "ADD_BORROWER" in line:
        return _add_borrower(library, line)
    if wants_borrows and "BORROW_BOOK" in line:
        return _borrow(library, line)
    if wants_returns and "RETURN_BOOK" in line:
        return _return(library, line)
    return []


def load_library_data(
    library: Library, path: str | os.PathLike[str], mode: LoadMode = LoadMode.ALL
) -> list[str]:
    """Carry out the commands in the file at ``path`` allowed by ``mode``.

    Comment lines starting with ``#`` are skipped. Returns every message in
    order. Raises OSError when the file cannot be opened.
    """
    mode = LoadMode(mode)
    messages: list[str] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if line.startswith("#"):
                continue
            messages.extend(process_line(library, line, mode))
    return messages
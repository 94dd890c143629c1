"""Plain-text tables and reports for books, borrowers and loans."""

from __future__ import annotations

from collections.abc import Iterable

from lendinglib.models import Book, Borrower, Loan, format_date

_RULE_WIDTH = 103

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

_BOOK_HEADER = f"| {'Book Id':<8} | {'Book Name':<50} | {'Author':<24} | {'Copies':<8} |"
_BORROWER_HEADER = f"| {'Borrower Id':<30} | {'Borrower Name':<66} |"
_LOAN_HEADER = (
    f"| {'Borrower Name':<20} | {'Book Name':<37} | {'Borrow Date':<11} "
    f"| {'Return Date':<11} | {'Priority':<8} |"
)
_RETURNED_HEADER = (
    f"| {'Borrower Name':<20} | {'Book Name':<37} | {'Borrow Date':<11} "
    f"| {'Return Date':<11} | {'Overdue':<8} |"
)

_EXPLANATION = """
=== BOOK RETURN SYSTEM EXPLANATION ===
1. RETURN PROCESS:
   - The default borrow period is 14 days , which is setted by the system when borrowing a book
   - Enter Book ID and Borrower ID
   - Enter the return date (YYYY-MM-DD)
   - System verifies the active loan exists
   - Records the return and checks for overdue status

2. AFTER RETURN:
   a) If pending requests exist:
      * Processes highest priority request automatically
      * The borrow date of the pending request is set to the return date of the returned book
      * New loan starts immediately (14-day due date)
      * Book stays checked out

   b) If no pending requests:
      * Available copies increase by 1
      * Book becomes available for new loans

3. OVERDUE MANAGEMENT:
   - Overdue status is determined at return time
   - All active loans can be checked for overdue status
     from the main menu option:
     * 'Check Overdue Loans'
     * Shows all loans past their due date
     * Updated daily based on system date

4. RECORD KEEPING:
   - Returned books move to loan history
   - Overdue returns remain in system records
===============================

"""

_BANNER = """\
\t\t\t ____________________________________________________________
\t\t\t|                                                            |
\t\t\t|              Library Management System (LMS)               |
\t\t\t|                                                            |
\t\t\t|   Books, borrowers, loans, pending requests and returns    |
\t\t\t|____________________________________________________________|


\t\t\t _____________________________________________________________
\t\t\t| Note!! Press the 'ENTER' key to access the Menu             |
\t\t\t|_____________________________________________________________|
"""


def rule() -> str:
    """Return the horizontal line that separates table rows."""
    return "-" * _RULE_WIDTH


def _book_row(book: Book) -> str:
    return f"| {book.id:<8} | {book.title:<50} | {book.author:<24} | {book.copies:<8} |"


def _borrower_row(borrower: Borrower) -> str:
    return f"| {borrower.id:<30} | {borrower.name:<66} |"


def _loan_row(loan: Loan) -> str:
    return (
        f"| {loan.borrower.name:<20} | {loan.book.title:<37} | "
        f"{format_date(loan.borrow_date):<11} | "
        f"{format_date(loan.return_date):<11} | {loan.priority:<8} |"
    )


def _returned_row(loan: Loan) -> str:
    flag = "YES" if loan.overdue else "NO"
    return (
        f"| {loan.borrower.name:<20} | {loan.book.title:<37} | "
        f"{format_date(loan.borrow_date):<11} | "
        f"{format_date(loan.return_date):<11} | {flag:<8} |"
    )


def _table(header: str, rows: Iterable[str]) -> str:
    lines = [rule(), header, rule()]
    for row in rows:
        lines.extend((row, rule()))
    return "\n".join(lines) + "\n"


def book_table(books: Iterable[Book]) -> str:
    """Render the books as a table, or a notice when there are none."""
    books = list(books)
    if not books:
        return "\nNo books available.\n"
    return _table(_BOOK_HEADER, (_book_row(b) for b in books))


def borrower_table(borrowers: Iterable[Borrower]) -> str:
    """Render the borrowers as a table, or a notice when there are none."""
    borrowers = list(borrowers)
    if not borrowers:
        return "\nNo borrowers available.\n"
    return _table(_BORROWER_HEADER, (_borrower_row(b) for b in borrowers))


def loan_table(loans: Iterable[Loan]) -> str:
    """Render loans with their priority, or a notice when there are none."""
    loans = list(loans)
    if not loans:
        return "\nNo Loans available.\n"
    return _table(_LOAN_HEADER, (_loan_row(loan) for loan in loans))


def returned_loan_table(loans: Iterable[Loan]) -> str:
    """Render returned loans with their overdue flag, or a notice when empty."""
    loans = list(loans)
    if not loans:
        return "\nNo returned loans available.\n"
    return _table(_RETURNED_HEADER, (_returned_row(loan) for loan in loans))


def all_loans_report(
    active: Iterable[Loan], pending: Iterable[Loan], returned: Iterable[Loan]
) -> str:
    """Render the active, pending and returned loans one section after another."""
    active, pending, returned = list(active), list(pending), list(returned)
    parts = ["\n========== ALL LOANS ==========\n"]
    if active:
        parts.append("\n--- ACTIVE LOANS ---\n")
        parts.append(_table(_LOAN_HEADER, (_loan_row(loan) for loan in active)))
    else:
        parts.append("\nNo active loans available.\n")
    if pending:
        parts.append("\n--- PENDING LOANS ---\n")
        parts.append(_table(_LOAN_HEADER, (_loan_row(loan) for loan in pending)))
    else:
        parts.append("\nNo pending loans available.\n")
    if returned:
        parts.append("\n--- RETURNED LOANS ---\n")
        parts.append(_table(_RETURNED_HEADER, (_returned_row(loan) for loan in returned)))
    else:
        parts.append("\nNo returned loans available.\n")
    return "".join(parts)


def search_table(books: Iterable[Book], term: str) -> str:
    """Render the books whose title contains ``term``, ignoring ASCII case."""
    books = list(books)
    if not books:
        return "\nNo books available.\n"
    needle = term.translate(_ASCII_LOWER)
    matches = [b for b in books if needle in b.title.translate(_ASCII_LOWER)]
    text = _table(_BOOK_HEADER, (_book_row(b) for b in matches))
    if not matches:
        text += f"|No books found matching {term:<69}|\n{rule()}\n"
    return text


def overdue_report(loans: Iterable[Loan]) -> str:
    """Render one warning per overdue loan; empty when there are none."""
    return "".join(
        f"\nLoan is Overdued !!! - Borrower: {loan.borrower.name}, "
        f"Book: {loan.book.title}\n"
        for loan in loans
    )


def return_system_explanation() -> str:
    """Return the description of how returns and pending requests work."""
    return _EXPLANATION


def banner() -> str:
    """Return the welcome screen shown when the program starts."""
    return _BANNER
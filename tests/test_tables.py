import pytest

from lendinglib.models import Book, Borrower, Date, Loan
from lendinglib.tables import (
    all_loans_report,
    banner,
    book_table,
    borrower_table,
    loan_table,
    overdue_report,
    return_system_explanation,
    returned_loan_table,
    rule,
    search_table,
)


@pytest.fixture
def books():
    return [
        Book(1, "Dune", "Frank Herbert", 3),
        Book(2, "The Hobbit", "J. R. R. Tolkien", 0),
        Book(5, "Hyperion", "Dan Simmons", 2),
    ]


@pytest.fixture
def loans(books):
    alice = Borrower(10, "Alice")
    bob = Borrower(11, "Bob")
    return [
        Loan(alice, books[0], 2, Date(2024, 3, 5), Date(2024, 3, 19)),
        Loan(bob, books[1], 4, Date(2024, 1, 2), Date(2024, 1, 16), overdue=True),
    ]


def _lines(text):
    return [line for line in text.splitlines() if line]


def test_rule_is_only_dashes():
    line = rule()
    assert set(line) == {"-"}
    assert len(line) == 103


def test_book_table_rows_match_rule_width(books):
    text = book_table(books)
    lines = _lines(text)
    assert all(len(line) == len(rule()) for line in lines)
    assert lines[0] == rule()
    assert "Book Name" in lines[1]
    # header + one row per book, each framed by rules
    assert len(lines) == 3 + 2 * len(books)


def test_book_table_lists_books_in_given_order(books):
    text = book_table(books)
    positions = [text.index(b.title) for b in books]
    assert positions == sorted(positions)
    assert "Frank Herbert" in text


def test_book_table_empty():
    assert book_table([]) == "\nNo books available.\n"


def test_borrower_table(loans):
    borrowers = [loan.borrower for loan in loans]
    lines = _lines(borrower_table(borrowers))
    assert all(len(line) == len(rule()) for line in lines)
    assert "Borrower Name" in lines[1]
    assert lines[3].startswith("| 10 ")
    assert "Alice" in lines[3]


def test_borrower_table_empty():
    assert borrower_table([]) == "\nNo borrowers available.\n"


def test_loan_table_shows_dates_and_priority(loans):
    lines = _lines(loan_table(loans))
    assert all(len(line) == len(rule()) for line in lines)
    assert "Priority" in lines[1]
    row = lines[3]
    assert "5/3/2024" in row
    assert "19/3/2024" in row
    cells = [cell.strip() for cell in row.strip("|").split("|")]
    assert cells == ["Alice", "Dune", "5/3/2024", "19/3/2024", "2"]


def test_loan_table_empty():
    assert loan_table([]) == "\nNo Loans available.\n"


def test_returned_loan_table_overdue_flag(loans):
    lines = _lines(returned_loan_table(loans))
    assert "Overdue" in lines[1]
    first = [c.strip() for c in lines[3].strip("|").split("|")]
    second = [c.strip() for c in lines[5].strip("|").split("|")]
    assert first[-1] == "NO"
    assert second[-1] == "YES"


def test_all_loans_report_sections_in_order(loans):
    text = all_loans_report(loans[:1], loans[1:], loans)
    assert text.startswith("\n========== ALL LOANS ==========\n")
    active = text.index("--- ACTIVE LOANS ---")
    pending = text.index("--- PENDING LOANS ---")
    returned = text.index("--- RETURNED LOANS ---")
    assert active < pending < returned
    assert "YES" in text[returned:]


def test_all_loans_report_empty_sections():
    text = all_loans_report([], [], [])
    assert "No active loans available." in text
    assert "No pending loans available." in text
    assert "No returned loans available." in text
    assert "---" not in text


def test_search_table_is_case_insensitive(books):
    text = search_table(books, "HOB")
    assert "The Hobbit" in text
    assert "Dune" not in text
    assert "No books found" not in text


def test_search_table_substring_matches_several(books):
    text = search_table(books, "e")
    for book in books:
        assert book.title in text


def test_search_table_no_match_mentions_term(books):
    text = search_table(books, "Zzz")
    assert "|No books found matching Zzz" in text
    assert text.endswith(rule() + "\n")


def test_search_table_empty_catalogue():
    assert search_table([], "anything") == "\nNo books available.\n"


def test_overdue_report(loans):
    text = overdue_report(loans)
    assert text.count("Loan is Overdued !!!") == len(loans)
    assert "Borrower: Alice, Book: Dune" in text
    assert overdue_report([]) == ""


def test_return_system_explanation_mentions_loan_period():
    text = return_system_explanation()
    assert "=== BOOK RETURN SYSTEM EXPLANATION ===" in text
    assert "14 days" in text
    assert "Available copies increase by 1" in text


def test_banner_mentions_menu_prompt():
    text = banner()
    assert "Library Management System (LMS)" in text
    assert "Press the 'ENTER' key to access the Menu" in text
"""Interactive menu-driven front end for the lending library."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from collections.abc import Callable
from typing import TextIO

from lendinglib.library import DuplicateIdError, Library, NotFoundError
from lendinglib.loader import LoadMode, load_books, load_library_data
from lendinglib.models import Date, parse_date
from lendinglib.tables import (
    all_loans_report,
    banner,
    book_table,
    borrower_table,
    overdue_report,
    return_system_explanation,
    search_table,
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INVALID_CHOICE = "Invalid choice. Please choose a valid option."

_MAIN_MENU = """
========== LIBRARY MANAGEMENT SYSTEM ===========
|    1. Book Management                        |
|    2. Loans Management                       |
|    3. Files Management                       |
|    4. Borrower Management                    |
|    5. Library Statistics                     |
|    6. Check Overdue                          |
|    7. Exit System                            |
================================================"""

_BOOK_MENU = """
========== BOOK MANAGEMENT ====================
|    1. List Books                             |
|    2. Add a Book                             |
|    3. Search a Book                          |
|    4. Return to Main Menu                    |
================================================"""

_LOANS_MENU = """
========== LOANS MANAGEMENT ====================
|    1. List Loans                              |
|    2. Add a Loan                              |
|    3. Return a Loan                           |
|    4. Explanation about the Return System     |
|    5. Return to Main Menu                     |
================================================="""

_FILES_MENU = """
========== FILES MANAGEMENT ====================
|   1. Load Books From File                     |
|   2. Load Borrowers Data From File            |
|   3. Load Borrowing Books From File           |
|   4. Load Returning Books From File           |
|   5. Load All the library Data                |
|   6. Return to Main Menu                      |
================================================="""

_STATISTICS_MENU = """
========== STATISTICS ========================
|   1. Display Total Number of Books          |
|   2. Display Total Number of Borrowers      |
|   3. Display Total Number of Active Loans   |
|   4. Display Total Number of Pending Loans  |
|   5. Display Total Number of Returned Loans |
|   6. Return to Main Menu                    |
==============================================="""

_BORROWERS_MENU = """
========== BORROWERS ==========================
|   1. Add a new borrower                      |
|   2. List borrowers                          |
|   3. Return to Main Menu                     |
================================================"""

_FILE_MODES = {
    2: LoadMode.BORROWERS,
    3: LoadMode.BORROWS,
    4: LoadMode.RETURNS,
    5: LoadMode.ALL,
}


def _clear_terminal() -> None:
    if os.name == "nt":
        subprocess.run("cls", shell=True, check=False)
    else:
        subprocess.run(["clear"], check=False)


class Session:
    """One interactive session over a library, reading and writing text streams."""

    def __init__(
        self,
        library: Library | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear: Callable[[], None] | None = None,
    ) -> None:
        self.library = library if library is not None else Library()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._clear = clear if clear is not None else (lambda: None)

    # ------------------------------------------------------------ input
    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _say(self, text: str = "") -> None:
        self._write(text + "\n")

    def _readline(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError("end of input")
        return line

    def read_int(self, prompt: str) -> int:
        """Prompt until a line starting with an integer is entered.

        Raises EOFError when the input runs out.
        """
        while True:
            self._write(prompt)
            line = self._readline()
            while not line.strip():
                line = self._readline()
            match = _LEADING_INT.match(line)
            if match is not None:
                return int(match.group(1))
            self._say("Invalid input. Please enter an integer.")

    def read_text(self, prompt: str) -> str:
        """Prompt for one line of text and return it without the newline."""
        self._write(prompt)
        return self._readline().split("\n", 1)[0]

    def read_date(self, prompt: str) -> Date:
        """Prompt until a valid ``YYYY-MM-DD`` date is entered."""
        while True:
            self._write(prompt)
            line = self._readline()
            try:
                date = parse_date(line)
            except ValueError:
                self._say("Invalid format. Please enter in YYYY-MM-DD format.")
                continue
            if date.is_valid():
                return date
            self._say("Invalid date. Please enter a correct date.")

    def pause(self) -> None:
        """Wait for the Enter key; returns quietly at the end of input."""
        self._write("\nPress Enter to continue...")
        self._in.readline()

    def _choose(self, menu: str) -> int:
        self._clear()
        self._say(menu)
        return self.read_int("Enter your choice: ")

    # ------------------------------------------------------------ menus
    def run(self) -> None:
        """Show the main menu until the user exits or the input runs out."""
        actions = {
            1: self.book_menu,
            2: self.loans_menu,
            3: self.files_menu,
            4: self.borrowers_menu,
            5: self.statistics_menu,
            6: self.check_overdue,
        }
        try:
            while True:
                choice = self._choose(_MAIN_MENU)
                if choice == 7:
                    self._say("Exiting system...")
                    return
                action = actions.get(choice)
                if action is None:
                    self._say(_INVALID_CHOICE)
                else:
                    action()
        except EOFError:
            return

    def book_menu(self) -> None:
        """List, add and search books."""
        while True:
            choice = self._choose(_BOOK_MENU)
            if choice == 1:
                self._write(book_table(self.library.books))
                self.pause()
            elif choice == 2:
                self._add_book()
            elif choice == 3:
                term = self.read_text("Enter book title to search: ")
                self._write(search_table(self.library.books, term))
                self.pause()
            elif choice == 4:
                return
            else:
                self._say(_INVALID_CHOICE)

    def _add_book(self) -> None:
        book_id = self.read_int("Enter Book ID: ")
        if self.library.find_book(book_id) is not None:
            self._say(f"Book with ID {book_id} already exists.")
            self.pause()
            return
        title = self.read_text("Enter Title: ")
        author = self.read_text("Enter Author: ")
        copies = self.read_int("Enter Copies: ")
        self.library.add_book(book_id, title, author, copies)
        self._say("Book added successfully!")
        self.pause()

    def loans_menu(self) -> None:
        """List loans, borrow, return, and explain the return rules."""
        while True:
            choice = self._choose(_LOANS_MENU)
            if choice == 1:
                lib = self.library
                self._write(all_loans_report(lib.active, lib.pending, lib.returned))
                self.pause()
            elif choice == 2:
                self._add_loan()
                self.pause()
            elif choice == 3:
                self._add_return()
                self.pause()
            elif choice == 4:
                self._write(return_system_explanation())
                self.pause()
            elif choice == 5:
                return
            else:
                self._say(_INVALID_CHOICE)

    def _add_loan(self) -> None:
        self._say("\n--- Process Book Borrow ---")
        book_id = self.read_int("Enter Book ID: ")
        borrower_id = self.read_int("Enter Borrower ID: ")
        date = self.read_date("Enter Borrow Date (YYYY-MM-DD): ")
        priority = self.read_int("Enter Priority: ")
        try:
            result = self.library.borrow(book_id, borrower_id, date, priority)
        except NotFoundError as exc:
            self._say(f"Error: {exc}")
            return
        if result.pending:
            self._say(
                f"Added to pending requests: Book ID {book_id}, Borrower ID {borrower_id}"
            )
            self._say(f"Reason: {result.status.reason}")
            return
        due = result.loan.return_date
        self._say(f"Successfully borrowed Book ID {book_id} by Borrower ID {borrower_id}")
        self._say(f"Due Date: {due.year}-{due.month:02d}-{due.day:02d}")

    def _add_return(self) -> None:
        book_id = self.read_int("Enter Book ID: ")
        borrower_id = self.read_int("Enter Borrower ID: ")
        date = self.read_date("Enter Return Date (YYYY-MM-DD): ")
        try:
            result = self.library.return_book(book_id, borrower_id, date)
        except NotFoundError as exc:
            self._say(f"\nError: {exc}")
            return
        self._say(f"\nReturned book ID {book_id} by borrower ID {borrower_id}")
        if result.promoted is not None:
            self._say(
                "Book loaned to next pending borrower "
                f"(Priority: {result.promoted.priority})!"
            )
        elif result.copies is not None:
            self._say(f"Book returned, copies increased to {result.copies}!")

    def files_menu(self) -> None:
        """Load books and library data from files."""
        while True:
            choice = self._choose(_FILES_MENU)
            if choice == 1:
                filename = self.read_text("Enter the file name: ")
                try:
                    messages = load_books(self.library, filename)
                except OSError:
                    self._say(f"Error opening file: {filename}")
                    continue
                for message in messages:
                    self._say(message)
                self.pause()
            elif choice in _FILE_MODES:
                filename = self.read_text("Enter the file name: ")
                try:
                    messages = load_library_data(
                        self.library, filename, _FILE_MODES[choice]
                    )
                except OSError:
                    self._say(f"Error opening file: {filename}")
                else:
                    for message in messages:
                        self._say(message)
                self.pause()
            elif choice == 6:
                return
            else:
                self._say(_INVALID_CHOICE)

    def borrowers_menu(self) -> None:
        """Add and list borrowers."""
        while True:
            choice = self._choose(_BORROWERS_MENU)
            if choice == 1:
                self._add_borrower()
                self.pause()
            elif choice == 2:
                self._write(borrower_table(self.library.borrowers))
                self.pause()
            elif choice == 3:
                return
            else:
                self._say(_INVALID_CHOICE)

    def _add_borrower(self) -> None:
        borrower_id = self.read_int("Enter Borrower ID: ")
        if self.library.find_borrower(borrower_id) is not None:
            self._say(f"Borrower with ID {borrower_id} already exists.")
            self.pause()
            return
        name = self.read_text("Enter Name: ")
        try:
            self.library.add_borrower(borrower_id, name)
        except DuplicateIdError as exc:
            self._say(str(exc))
        else:
            self._say("Borrower added successfully!")
        self.pause()

    def statistics_menu(self) -> None:
        """Show how many books, borrowers and loans the library holds."""
        lib = self.library
        counts = {
            1: ("books", lambda: len(lib.books)),
            2: ("borrowers", lambda: len(lib.borrowers)),
            3: ("active loans", lambda: len(lib.active)),
            4: ("pending loans", lambda: len(lib.pending)),
            5: ("returned loans", lambda: len(lib.returned)),
        }
        while True:
            choice = self._choose(_STATISTICS_MENU)
            if choice == 6:
                return
            if choice in counts:
                label, count = counts[choice]
                self._say(f"Total number of {label}: {count()}")
                self.pause()
            else:
                self._say(_INVALID_CHOICE)

    def check_overdue(self) -> None:
        """Warn about every active loan past its due date."""
        self._write(overdue_report(self.library.overdue_loans()))
        self.pause()


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session on the terminal."""
    session = Session(clear=_clear_terminal)
    _clear_terminal()
    session._write(banner())
    session.pause()
    session.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
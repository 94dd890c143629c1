# lendinglib

A small lending manager for a library: books and borrowers kept in order of
their ids, loans granted at once when a copy is free or queued as pending
requests when not, and returns that hand the book straight to the pending
request for that book with the highest priority (the oldest request wins a
tie).

## Install

```
pip install .
```

## Interactive use

```
lendinglib
```

clears the terminal, shows a welcome screen, waits for Enter and then opens
the text menu:

1. Book management: list books, add a book, search titles (case-insensitive
   for ASCII letters).
2. Loans management: list active, pending and returned loans, borrow a book,
   return a book, and a description of how returns work.
3. Files management: load books from a file, or load borrowers, borrows,
   returns or all of them from a library data file.
4. Borrower management: add and list borrowers.
5. Statistics: the number of books, borrowers, active, pending and returned
   loans.
6. Check overdue: warns about active loans whose due date has passed, judged
   against today's local date. A loan is reported when its due year, month or
   day is smaller than today's.
7. Exit.

The menu ends at option 7 or when the input runs out. `lendinglib.cli.Session`
runs the same menu over any pair of text streams, which makes it scriptable.

## Use from Python

```python
from lendinglib.library import Library
from lendinglib.models import parse_date

library = Library()
library.add_book(1, "Dune", "Frank Herbert", 1)
library.add_borrower(10, "Amina")
library.add_borrower(11, "Karim")

library.borrow(1, 10, parse_date("2025-01-05"), 2)    # granted, due 2025-01-19
library.borrow(1, 11, parse_date("2025-01-06"), 5)    # no copies: pending
result = library.return_book(1, 10, parse_date("2025-01-20"))
result.returned.overdue    # True: returned after the due date
result.promoted.borrower   # Karim's request becomes an active loan
```

- `Library.add_book` and `Library.add_borrower` raise `DuplicateIdError` when
  the id is already taken.
- `Library.borrow` raises `NotFoundError` for an unknown book or borrower. It
  returns a `BorrowResult` whose `status` is a `RequestStatus`; a request is
  queued as pending when no copy is free or the borrower already has the book.
- `Library.return_book` raises `NotFoundError` when there is no such active
  loan. It returns a `ReturnResult`; with nobody waiting, the book's copy
  count goes up by one.
- `Library.overdue_loans` and `Library.search_books` answer the overdue and
  title queries; `lendinglib.tables` renders books, borrowers and loans as
  plain-text tables.

A loan period is 14 days. Date arithmetic uses 30-day months, and a date is
valid when its month is 1 to 12 and its day fits that month (February has 28).
Dates print as `day/month/year`.

## Data files

Books are read by `lendinglib.loader.load_books` from lines such as

```
ADD_BOOK 1 "Dune" "Frank Herbert" 3
```

Other library data is read by `lendinglib.loader.load_library_data` from lines
such as

```
# comments start with a hash
ADD_BORROWER 10 Amina
BORROW_BOOK 1 10 2025-01-05 2
RETURN_BOOK 1 10 2025-01-20
```

It takes a `LoadMode` that selects borrowers only, borrows only, returns only,
or everything at once, and returns the messages produced line by line.
Borrower names in data files are a single word.

## What it does not do

Everything is kept in memory. Nothing is ever saved: the package has no
storage and no way to write the library back to a file, so the data is lost
when the session ends.

## Tests

```
pip install ".[test]"
pytest
```
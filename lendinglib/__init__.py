"""Library lending: books, borrowers, prioritised loans, data files and a text menu."""

__version__ = "1.0.0"
__all__ = ["models", "library", "loader", "tables", "cli"]
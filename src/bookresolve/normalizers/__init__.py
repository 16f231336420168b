"""Provider response normalizers, one module per provider family."""

from bookresolve.normalizers import google_books, openbd, rakuten

__all__ = [
    "google_books",
    "openbd",
    "rakuten",
]

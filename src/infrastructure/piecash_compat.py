"""Helpers for importing piecash and opening GnuCash books with it."""

from __future__ import annotations

from contextlib import contextmanager
import inspect
from pathlib import Path
from urllib.parse import urlparse
import warnings

from sqlalchemy.exc import SAWarning

_PIECASH = None


def _patch_sqlalchemy_for_piecash() -> None:
    """Drop the ``constructor`` argument piecash passes to newer SQLAlchemy."""
    from sqlalchemy.orm import decl_api

    generate_base = decl_api.registry.generate_base
    if "constructor" in inspect.signature(generate_base).parameters:
        return
    if getattr(generate_base, "_piecash_patched", False):
        return

    def _generate_base(self, *args, **kwargs):
        kwargs.pop("constructor", None)
        return generate_base(self, *args, **kwargs)

    _generate_base._piecash_patched = True  # type: ignore[attr-defined]
    decl_api.registry.generate_base = _generate_base


def load_piecash():
    """Import piecash once, with SQLAlchemy patched and warnings silenced.

    Raises:
        RuntimeError: If piecash is not installed.
    """
    global _PIECASH
    if _PIECASH is None:
        _patch_sqlalchemy_for_piecash()
        warnings.filterwarnings("ignore", category=SAWarning)
        try:
            import piecash
        except ImportError as exc:
            raise RuntimeError(
                "piecash is not installed; install it to use the piecash backend"
            ) from exc
        _PIECASH = piecash
    return _PIECASH


def open_piecash_book(piecash, book_path: Path | str):
    """Open a book read-only from a sqlite path or a database URI.

    Args:
        piecash: Imported piecash module (or a stand-in exposing open_book).
        book_path: Filesystem path, ``file:`` URI or database URI.

    Returns:
        Book opened by piecash.
    """
    sqlite_file = None
    uri_conn = None
    if isinstance(book_path, Path):
        sqlite_file = str(book_path)
    else:
        parsed = urlparse(book_path)
        if parsed.scheme and parsed.scheme != "file":
            uri_conn = book_path
        else:
            raw_path = parsed.path or book_path
            sqlite_file = str(Path(raw_path).expanduser().resolve())
    return piecash.open_book(
        sqlite_file=sqlite_file,
        uri_conn=uri_conn,
        readonly=True,
        open_if_lock=True,
        do_backup=False,
        check_exists=False,
    )


@contextmanager
def piecash_book(piecash, book_path: Path | str):
    """Yield an opened book and close it afterwards."""
    book = open_piecash_book(piecash, book_path)
    try:
        yield book
    finally:
        close = getattr(book, "close", None)
        if callable(close):
            close()


__all__ = ["load_piecash", "open_piecash_book", "piecash_book"]

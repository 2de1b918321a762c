"""Tests for datebasic package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_datebasic() -> None:
    """Import datebasic package succeeds."""
    import datebasic

    assert hasattr(datebasic, "__version__")
    assert datebasic.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import datebasic.core submodule succeeds."""
    from datebasic import core

    assert hasattr(core, "__all__")


def test_import_format_module() -> None:
    """Import datebasic.format submodule succeeds."""
    from datebasic import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import datebasic.convert submodule succeeds."""
    from datebasic import convert

    assert hasattr(convert, "__all__")


def test_import_arithmetic_module() -> None:
    """Import datebasic.arithmetic submodule succeeds."""
    from datebasic import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_internal_module() -> None:
    """Import datebasic._internal submodule succeeds."""
    from datebasic import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Import datebasic.errors succeeds with all exception classes."""
    from datebasic.errors import (
        DateBasicError,
        OverflowError,
        ParseError,
        TimezoneError,
        ValidationError,
    )

    assert issubclass(ValidationError, DateBasicError)
    assert issubclass(ParseError, DateBasicError)
    assert issubclass(OverflowError, DateBasicError)
    assert issubclass(TimezoneError, DateBasicError)
    assert issubclass(DateBasicError, Exception)


def test_public_api_names_resolve() -> None:
    """Every name in datebasic.__all__ is an attribute of the package."""
    import datebasic

    missing = [name for name in datebasic.__all__ if not hasattr(datebasic, name)]
    assert missing == []

from sqlalchemy.exc import IntegrityError, OperationalError

import pytest

from storage_api.errors import (
    ErrorKind,
    FilterInvalidError,
    InternalError,
    NotFoundError,
    NotUniqueError,
    StorageError,
    status_code_for,
)
from storage_api.storage.sql_errors import is_duplicate_key, translate_error


@pytest.mark.parametrize(
    "kind, status",
    [
        (ErrorKind.NOT_FOUND, 404),
        (ErrorKind.NOT_UNIQUE, 409),
        (ErrorKind.FILTER_INVALID, 400),
        (ErrorKind.INTERNAL, 500),
        ("NOT_FOUND", 404),
        ("SOMETHING_ELSE", 500),
    ],
)
def test_status_code_for(kind, status):
    assert status_code_for(kind) == status


def test_error_kinds_compare_by_value():
    assert NotFoundError().kind == ErrorKind.NOT_FOUND
    assert NotUniqueError().kind == "NOT_UNIQUE"
    assert FilterInvalidError().kind is ErrorKind.FILTER_INVALID
    assert isinstance(InternalError(), StorageError)


def test_str_includes_original_exception():
    err = InternalError("failed to store product", original_exception=ValueError("socket closed"))

    assert err.message == "failed to store product"
    assert "socket closed" in str(err)
    assert str(NotFoundError()) == "record not found"


class _DriverError(Exception):
    pass


class _PgError(Exception):
    pgcode = "23505"


def _integrity(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO products ...", {}, orig)


@pytest.mark.parametrize(
    "orig",
    [
        _DriverError(1062, "Duplicate entry 'code 1' for key 'code_value'"),
        _PgError("duplicate key value violates unique constraint"),
        _DriverError("UNIQUE constraint failed: products.code_value"),
    ],
)
def test_duplicate_key_detected_per_engine(orig):
    assert is_duplicate_key(_integrity(orig))


@pytest.mark.parametrize(
    "orig",
    [
        _DriverError(1452, "Cannot add or update a child row: a foreign key constraint fails"),
        _DriverError("FOREIGN KEY constraint failed"),
    ],
)
def test_other_integrity_errors_are_not_duplicates(orig):
    assert not is_duplicate_key(_integrity(orig))


def test_translate_duplicate_to_not_unique():
    err = translate_error(_integrity(_DriverError(1062, "Duplicate entry")), "store", "product")

    assert isinstance(err, NotUniqueError)
    assert err.message == "product not unique"
    assert err.original_exception is not None


def test_translate_other_failures_to_internal():
    exc = OperationalError("SELECT 1", {}, _DriverError("server has gone away"))

    err = translate_error(exc, "read", "warehouse")

    assert isinstance(err, InternalError)
    assert err.kind == ErrorKind.INTERNAL
    assert err.original_exception is exc

"""Unit tests for database error translation."""

from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError, ProgrammingError

from camp.domain.error import ConflictError, PermissionDeniedError, TransientStoreError
from camp.persistence.store import translate_db_error


class FakeDriverError(Exception):
    """Driver exception carrying a SQLSTATE like asyncpg's."""

    def __init__(self, sqlstate=None):
        super().__init__(f"driver error {sqlstate}")
        self.sqlstate = sqlstate


class TestTranslateDbError:
    """Tests for translate_db_error."""

    def test_insufficient_privilege_is_permission_denied(self):
        error = ProgrammingError("SELECT 1", {}, FakeDriverError("42501"))

        assert isinstance(translate_db_error(error), PermissionDeniedError)

    def test_serialization_failure_is_conflict(self):
        error = DBAPIError("UPDATE x", {}, FakeDriverError("40001"))

        assert isinstance(translate_db_error(error), ConflictError)

    def test_unique_violation_is_conflict(self):
        error = IntegrityError("INSERT INTO votes", {}, FakeDriverError("23505"))

        assert isinstance(translate_db_error(error), ConflictError)

    def test_operational_error_is_transient(self):
        error = OperationalError("SELECT 1", {}, FakeDriverError())

        assert isinstance(translate_db_error(error), TransientStoreError)

    def test_connection_refused_is_transient(self):
        assert isinstance(
            translate_db_error(ConnectionRefusedError("refused")), TransientStoreError
        )

    def test_unrelated_errors_pass_through(self):
        error = ValueError("bug")
        db_error = DBAPIError("SELECT 1", {}, FakeDriverError("22P02"))

        assert translate_db_error(error) is error
        assert translate_db_error(db_error) is db_error

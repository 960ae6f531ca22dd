"""
Tests for database helpers
"""

import math
import sqlite3

import pytest
from datetime import datetime, timezone

import pandas as pd

from firecore.clock import TimeZoneClock
from firecore.database import audit_log, check_write_result, qualified_table, query_database
from firecore.database.audit import resolve_username
from firecore.errors import DatabaseUnavailableError, ValidationError


@pytest.fixture
def con():
    """In-memory database with the tables the apps read and write"""
    connection = sqlite3.connect(":memory:")
    connection.executescript(
        """
        CREATE TABLE audit_log (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL,
            date_time TEXT NOT NULL,
            user_action TEXT NOT NULL
        );
        CREATE TABLE training (
            id INTEGER PRIMARY KEY,
            start_time TEXT,
            end_time TEXT,
            training_type TEXT
        );
        INSERT INTO training VALUES
            (1, '2024-01-15 10:00:00', '2024-01-15 12:00:00', 'CPR'),
            (2, '2024-01-16 14:00:00', '2024-01-16 16:00:00', 'Fire Suppression');
        """
    )
    yield connection
    connection.close()


@pytest.fixture
def alert(mocker):
    """Capture Streamlit alerts"""
    return mocker.patch("firecore.database.writes.show_alert")


class TestQualifiedTable:
    """Test table name validation"""

    def test_plain_table(self):
        assert qualified_table("training") == '"training"'

    def test_schema_table(self):
        assert qualified_table("main.training") == '"main"."training"'

    @pytest.mark.parametrize("name", ["training; DROP TABLE x", "train ing", "tr'aining", "t-1"])
    def test_invalid_characters(self, name):
        with pytest.raises(ValidationError, match="invalid characters"):
            qualified_table(name)

    @pytest.mark.parametrize("name", ["a.b.c", ".training", "training."])
    def test_bad_shape(self, name):
        with pytest.raises(ValidationError, match="'table' or 'schema.table'"):
            qualified_table(name)

    def test_empty(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            qualified_table("")

    @pytest.mark.parametrize("name", [None, 5, ["training"]])
    def test_non_string(self, name):
        with pytest.raises(ValidationError, match="single character string"):
            qualified_table(name)


class TestQueryDatabase:
    """Test query_database"""

    def test_reads_table(self, con):
        result = query_database(con, "training")

        assert isinstance(result, pd.DataFrame)
        assert len(result) == 2
        assert list(result.columns) == ["id", "start_time", "end_time", "training_type"]
        assert result["training_type"].tolist() == ["CPR", "Fire Suppression"]

    def test_schema_qualified(self, con):
        assert len(query_database(con, "main.training")) == 2

    def test_missing_table_returns_none(self, con, caplog):
        assert query_database(con, "no_such_table") is None
        assert "Database query failed for table 'no_such_table'" in caplog.text

    def test_no_connection(self):
        with pytest.raises(DatabaseUnavailableError):
            query_database(None, "training")

    def test_invalid_name_checked_before_connection(self):
        with pytest.raises(ValidationError):
            query_database(None, "bad name")


class TestCheckWriteResult:
    """Test check_write_result"""

    def test_success(self, alert):
        assert check_write_result(1) is True
        alert.assert_called_once_with("Success", "Write successful.", kind="success")

    def test_success_custom_message(self, alert):
        assert check_write_result(1, success_message="Shift saved.") is True
        alert.assert_called_once_with("Success", "Shift saved.", kind="success")

    def test_success_quiet(self, alert):
        assert check_write_result(1, show_message=False) is True
        alert.assert_not_called()

    def test_zero_rows_within_default_range(self, alert):
        assert check_write_result(0) is True

    def test_too_many_rows(self, alert, caplog):
        assert check_write_result(3, context="updating roster") is False

        title, text = alert.call_args.args
        assert title == "Error"
        assert "when updating roster" in text
        assert alert.call_args.kwargs == {"kind": "error"}
        assert "Database write failed when updating roster" in caplog.text

    def test_custom_range(self, alert):
        assert check_write_result(5, expected_min=2, expected_max=10) is True
        assert check_write_result(1, expected_min=2, expected_max=10) is False

    @pytest.mark.parametrize("result", [None, "1", math.nan, True])
    def test_non_numeric_result(self, alert, result):
        assert check_write_result(result) is False
        assert alert.call_args.kwargs == {"kind": "error"}

    @pytest.mark.parametrize("kwargs,message", [
        ({"success_message": 5}, "successMessage"),
        ({"context": 5}, "context"),
        ({"expected_min": "0"}, "must be numeric"),
        ({"expected_min": 3, "expected_max": 1}, "less than or equal"),
        ({"show_message": "yes"}, "showMessage"),
    ])
    def test_validation(self, alert, kwargs, message):
        with pytest.raises(ValidationError, match=message):
            check_write_result(1, **kwargs)
        alert.assert_not_called()


class TestShowAlert:
    """Test Streamlit rendering of alerts"""

    def test_renders_success(self, mocker):
        st = mocker.patch("firecore.ui.notifications.st")

        check_write_result(1, success_message="Saved.")

        st.success.assert_called_once()
        assert "Saved." in st.success.call_args.args[0]

    def test_renders_error(self, mocker):
        st = mocker.patch("firecore.ui.notifications.st")

        check_write_result(7)

        st.error.assert_called_once()
        assert "Result: 7" in st.error.call_args.args[0]

    def test_unknown_kind(self, mocker):
        mocker.patch("firecore.ui.notifications.st")
        from firecore.ui import show_alert

        with pytest.raises(ValueError, match="Unknown alert kind"):
            show_alert("Title", "Text", kind="toast")


class TestAuditLog:
    """Test audit_log"""

    @pytest.fixture
    def clock(self):
        return TimeZoneClock("UTC", now_func=lambda: datetime(2025, 1, 15, 21, 30, 45, 999, tzinfo=timezone.utc))

    def test_writes_row(self, con, clock):
        assert audit_log(con, "Viewed incident #12345", "Jane Doe", clock=clock) == 1

        row = con.execute("SELECT username, date_time, user_action FROM audit_log").fetchone()
        assert row == ("Jane Doe", "2025-01-15 21:30:45", "Viewed incident #12345")

    def test_callable_user(self, con, clock):
        audit_log(con, "Logged in", lambda: "John Smith", clock=clock)

        assert con.execute("SELECT username FROM audit_log").fetchone() == ("John Smith",)

    def test_unknown_user(self, con, clock):
        audit_log(con, "Logged in", None, clock=clock)
        audit_log(con, "Logged in", "", clock=clock)

        names = [r[0] for r in con.execute("SELECT username FROM audit_log")]
        assert names == ["Unknown", "Unknown"]

    def test_timestamp_stored_in_utc(self, con):
        denver_clock = TimeZoneClock(
            "America/Denver",
            now_func=lambda: datetime(2025, 1, 16, 3, 0, tzinfo=timezone.utc)
        )

        audit_log(con, "Logged out", "Jane Doe", clock=denver_clock)

        assert con.execute("SELECT date_time FROM audit_log").fetchone() == ("2025-01-16 03:00:00",)

    def test_invalid_action(self, con):
        with pytest.raises(ValidationError, match="userAction"):
            audit_log(con, 42, "Jane Doe")

    def test_failed_insert_returns_zero(self, caplog):
        empty = sqlite3.connect(":memory:")

        assert audit_log(empty, "Logged in", "Jane Doe") == 0
        assert "Failed to write to audit log" in caplog.text
        empty.close()


class TestResolveUsername:
    """Test username extraction"""

    def test_object_with_name(self):
        class Session:
            name = "Chief Brody"

        assert resolve_username(Session()) == "Chief Brody"

    def test_failing_callable(self):
        def broken():
            raise RuntimeError("session expired")

        assert resolve_username(broken) == "Unknown"

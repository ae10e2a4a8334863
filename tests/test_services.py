"""Tests for the in-memory stores."""
from datetime import datetime, timezone

import pytest

from errors import ConflictError, ValidationError
from models import Meeting
from services import Directory, MeetingLedger, ScheduleIndex

TEN = datetime(2025, 9, 9, 10, tzinfo=timezone.utc)
ELEVEN = datetime(2025, 9, 9, 11, tzinfo=timezone.utc)


class TestDirectory:

    def test_register_assigns_id(self):
        d = Directory()
        p = d.register("Alice", "alice@example.com")
        assert p.id
        assert p.name == "Alice"
        assert d.find(p.id) == p
        assert d.exists(p.id)

    def test_duplicate_email_conflicts(self):
        d = Directory()
        d.register("Bob", "bob@example.com")
        with pytest.raises(ConflictError, match="Email must be unique"):
            d.register("Bobby", "bob@example.com")
        assert d.register("Bobby", "bobby@example.com").name == "Bobby"

    def test_email_match_is_case_sensitive(self):
        d = Directory()
        lower = d.register("Alice", "alice@example.com")
        upper = d.register("Alice", "Alice@example.com")
        assert lower.id != upper.id
        assert d.exists(lower.id) and d.exists(upper.id)

    @pytest.mark.parametrize("name,email", [("", "a@example.com"), ("A", ""), (None, "a@example.com"), ("A", None)])
    def test_name_and_email_required(self, name, email):
        with pytest.raises(ValidationError):
            Directory().register(name, email)

    def test_unknown_id(self):
        d = Directory()
        assert d.find("nope") is None
        assert not d.exists("nope")


class TestMeetingLedger:

    def test_upcoming_keeps_insertion_order(self):
        ledger = MeetingLedger()
        ledger.append(Meeting(id="m1", start=ELEVEN, participants=["a"]))
        ledger.append(Meeting(id="m2", start=TEN, participants=["a", "b"]))
        ledger.append(Meeting(id="m3", start=TEN, participants=["b"]))
        as_of = datetime(2025, 9, 9, 0, tzinfo=timezone.utc)
        assert [m.id for m in ledger.upcoming_for("a", as_of)] == ["m1", "m2"]

    def test_upcoming_is_strictly_after(self):
        ledger = MeetingLedger()
        ledger.append(Meeting(id="m1", start=TEN, participants=["a"]))
        ledger.append(Meeting(id="m2", start=ELEVEN, participants=["a"]))
        assert [m.id for m in ledger.upcoming_for("a", TEN)] == ["m2"]

    def test_unknown_person_has_nothing(self):
        ledger = MeetingLedger()
        ledger.append(Meeting(id="m1", start=TEN, participants=["a"]))
        assert ledger.upcoming_for("ghost", TEN.replace(hour=0)) == []


class TestScheduleIndex:

    def test_reserve_marks_conflict(self):
        idx = ScheduleIndex()
        assert not idx.has_conflict("a", TEN)
        idx.reserve("a", TEN)
        assert idx.has_conflict("a", TEN)
        assert not idx.has_conflict("a", ELEVEN)
        assert not idx.has_conflict("b", TEN)

    def test_reserve_is_idempotent(self):
        idx = ScheduleIndex()
        idx.reserve("a", TEN)
        idx.reserve("a", TEN)
        assert idx.has_conflict("a", TEN)
        assert not idx.has_conflict("a", ELEVEN)

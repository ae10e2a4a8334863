# services.py
from __future__ import annotations
import uuid
from datetime import datetime
from typing import Dict, List, Optional, Set

from errors import ConflictError, ValidationError
from models import Meeting, Person


def new_id() -> str:
    return str(uuid.uuid4())


class Directory:
    def __init__(self):
        self._persons: Dict[str, Person] = {}
        self._by_email: Dict[str, str] = {}

    def register(self, name: Optional[str], email: Optional[str]) -> Person:
        if not name or not email:
            raise ValidationError("Name and email are required")
        # exact, case-sensitive match
        if email in self._by_email:
            raise ConflictError("Email must be unique")
        person = Person(id=new_id(), name=name, email=email)
        assert person.id not in self._persons, f"duplicate person id {person.id}"
        self._persons[person.id] = person
        self._by_email[email] = person.id
        return person

    def find(self, person_id: str) -> Optional[Person]:
        return self._persons.get(person_id)

    def exists(self, person_id: str) -> bool:
        return person_id in self._persons


class MeetingLedger:
    def __init__(self):
        self._meetings: List[Meeting] = []
        self._ids: Set[str] = set()

    def append(self, meeting: Meeting) -> None:
        assert meeting.id not in self._ids, f"duplicate meeting id {meeting.id}"
        self._meetings.append(meeting)
        self._ids.add(meeting.id)

    def upcoming_for(self, person_id: str, as_of: datetime) -> List[Meeting]:
        # insertion order, not chronological
        return [m for m in self._meetings if person_id in m.participants and m.start > as_of]


class ScheduleIndex:
    def __init__(self):
        self._busy: Dict[str, Set[datetime]] = {}

    def has_conflict(self, person_id: str, slot: datetime) -> bool:
        return slot in self._busy.get(person_id, ())

    def reserve(self, person_id: str, slot: datetime) -> None:
        self._busy.setdefault(person_id, set()).add(slot)


class SchedulerStore:
    """All process-lifetime state: persons, meetings and the busy-slot index."""

    def __init__(self):
        self.directory = Directory()
        self.ledger = MeetingLedger()
        self.index = ScheduleIndex()

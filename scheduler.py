# scheduler.py
from __future__ import annotations
import asyncio
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, Sequence

from errors import ConflictError, NotFoundError, ValidationError
from logging_config import get_logger
from models import Meeting, Person
from services import SchedulerStore, new_id
from timeslots import hourly_slots, is_hour_aligned, parse_instant

logger = get_logger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Scheduler:
    """Booking and suggestion operations over a SchedulerStore.

    Mutations (register, create_meeting) are serialized by one lock. Their
    validate-then-commit bodies never await, so a reader on the same loop
    sees either none or all of a booking.
    """

    def __init__(self, store: Optional[SchedulerStore] = None, clock: Callable[[], datetime] = utcnow):
        self.store = store or SchedulerStore()
        self.clock = clock
        self._lock = asyncio.Lock()

    # ---- Persons ----
    async def register(self, name: Optional[str], email: Optional[str]) -> Person:
        async with self._lock:
            try:
                person = self.store.directory.register(name, email)
            except (ValidationError, ConflictError) as e:
                logger.warning("person_rejected", reason=e.message)
                raise
        logger.info("person_registered", person_id=person.id)
        return person

    def find(self, person_id: str) -> Optional[Person]:
        return self.store.directory.find(person_id)

    def exists(self, person_id: str) -> bool:
        return self.store.directory.exists(person_id)

    def upcoming_for(self, person_id: str, as_of: Optional[datetime] = None) -> List[Meeting]:
        if self.find(person_id) is None:
            raise NotFoundError("Person not found")
        return self.store.ledger.upcoming_for(person_id, as_of or self.clock())

    # ---- Meetings ----
    async def create_meeting(self, start: Any, participant_ids: Any) -> Meeting:
        async with self._lock:
            try:
                slot = self._validate_booking(start, participant_ids)
            except (ValidationError, NotFoundError, ConflictError) as e:
                logger.warning("meeting_rejected", start=start, reason=e.message)
                raise
            meeting = Meeting(id=new_id(), start=slot, participants=list(participant_ids))
            self.store.ledger.append(meeting)
            for pid in meeting.participants:
                self.store.index.reserve(pid, slot)
        logger.info("meeting_booked", meeting_id=meeting.id, start=slot.isoformat(),
                    participants=len(meeting.participants))
        return meeting

    def _validate_booking(self, start: Any, participant_ids: Any) -> datetime:
        if (not start or not isinstance(participant_ids, (list, tuple)) or not participant_ids
                or not all(isinstance(p, str) for p in participant_ids)):
            raise ValidationError("Time and participants required")
        if not is_hour_aligned(start):
            raise ValidationError("Meeting must start at the hour mark")
        for pid in participant_ids:
            if not self.store.directory.exists(pid):
                raise NotFoundError(f"Person {pid} not found")
        slot = parse_instant(start)
        for pid in participant_ids:
            if self.store.index.has_conflict(pid, slot):
                raise ConflictError(f"Person {pid} has a conflict at this time")
        return slot

    # ---- Suggestions ----
    def suggest_slots(self, participant_ids: Sequence[str], from_: Any) -> List[datetime]:
        if not participant_ids:
            raise ValidationError("Participants required")
        if not from_:
            raise ValidationError("From time required")
        anchor = parse_instant(from_)
        index = self.store.index
        return [slot for slot in hourly_slots(anchor)
                if not any(index.has_conflict(pid, slot) for pid in participant_ids)]

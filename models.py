from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional, List

from timeslots import format_instant

# ---- Domain ----
class Person(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str

class Meeting(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    start: datetime
    participants: List[str]

# ---- Common ----
class ErrorOut(BaseModel):
    error: str

# ---- Persons ----
class PersonIn(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None

# ---- Meetings ----
class MeetingIn(BaseModel):
    time: Optional[str] = None
    participants: Optional[List[Any]] = None  # item types checked by Scheduler

class MeetingOut(BaseModel):
    id: str
    time: str
    participants: List[str]

    @classmethod
    def from_meeting(cls, m: Meeting) -> "MeetingOut":
        return cls(id=m.id, time=format_instant(m.start), participants=list(m.participants))

# ---- Suggestions ----
class SuggestIn(BaseModel):
    participants: Optional[List[str]] = None
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None  # accepted, not used

class SuggestOut(BaseModel):
    slots: List[str]

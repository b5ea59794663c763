"""
Domain models (Pydantic).

These types are the contract between the store, the services and the API:
- presence/profile state (`User`, `Location`, `Profile`)
- proximity pairings (`Match`) and their transcripts (`Message`)
- request payloads accepted by the HTTP layer

JSON uses camelCase keys (`isActive`, `revealRequestedBy`, ...) to stay compatible
with existing mobile clients; snake_case names are accepted on input too.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from nearmatch.core.ids import new_id
from nearmatch.core.time import utc_now


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Mode(str, Enum):
    ANONYMOUS = "anonymous"
    VISIBLE = "visible"


class MatchStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"


class Location(_CamelModel):
    """A point in decimal degrees."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class Profile(_CamelModel):
    """The publicly viewable part of a user."""

    name: str = ""
    bio: str = ""
    photo: str = ""
    interests: list[str] = Field(default_factory=list)


class User(_CamelModel):
    """Identity, profile and presence state for one email."""

    id: str = Field(default_factory=new_id)
    email: str

    name: str = ""
    bio: str = ""
    photo: str = ""
    interests: list[str] = Field(default_factory=list)
    profile_completed: bool = False

    is_active: bool = False
    mode: Mode | None = None
    anonymous_started_at: datetime | None = None
    location: Location | None = None

    def profile(self) -> Profile:
        return Profile(name=self.name, bio=self.bio, photo=self.photo, interests=list(self.interests or []))


class Match(_CamelModel):
    """A proximity pairing between two users.

    The logical identity is the unordered pair {initiator, receiver}; only the
    receiver may accept or ignore it.
    """

    id: str = Field(default_factory=new_id)
    initiator: str
    receiver: str
    mode: Mode
    status: MatchStatus = MatchStatus.PENDING
    created_at: datetime = Field(default_factory=utc_now)
    reveal_requested_by: str | None = None
    revealed: bool = False

    def involves(self, email: str) -> bool:
        return email in (self.initiator, self.receiver)

    def is_between(self, a: str, b: str) -> bool:
        return {self.initiator, self.receiver} == {a, b}


class Message(_CamelModel):
    """One chat line in a match transcript."""

    sender: str
    text: str
    created_at: datetime = Field(default_factory=utc_now)


# --- request payloads -------------------------------------------------------
# Required fields are optional at the schema level so missing values surface as
# 400 VALIDATION_ERROR from the services rather than FastAPI's generic 422.


class LoginRequest(_CamelModel):
    email: str | None = None


class ProfileUpdateRequest(_CamelModel):
    email: str | None = None
    name: str | None = None
    bio: str | None = None
    photo: str | None = None
    interests: list[str] | None = None


class ActivateRequest(_CamelModel):
    email: str | None = None
    mode: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class EmailRequest(_CamelModel):
    email: str | None = None


class MatchActionRequest(_CamelModel):
    match_id: str | int | None = None
    email: str | None = None


class SendMessageRequest(_CamelModel):
    match_id: str | int | None = None
    sender: str | None = None
    text: str | None = None


class ProfileWithStatus(Profile):
    profile_completed: bool = False


class ProfileUpdateResult(_CamelModel):
    success: bool = True
    profile: ProfileWithStatus


class SuccessResponse(_CamelModel):
    success: bool = True


class LoginResponse(_CamelModel):
    user: User

"""
API routes.

Endpoints:
- POST `/login`, `/profile/update`, GET `/profile/{email}`: identity + profile.
- POST `/activate`, `/deactivate`: presence (activation triggers matching).
- GET `/matches`, POST `/matches/accept|ignore`: match lifecycle.
- POST `/matches/reveal/request|accept`: anonymous reveal handshake.
- POST `/messages/send`, GET `/messages`: chat for accepted matches.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, NoReturn

from fastapi import APIRouter, HTTPException, Query

from nearmatch.config.settings import get_settings
from nearmatch.domain.errors import NearMatchError
from nearmatch.domain.models import (
    ActivateRequest,
    EmailRequest,
    LoginRequest,
    LoginResponse,
    Match,
    MatchActionRequest,
    Message,
    Profile,
    ProfileUpdateRequest,
    ProfileUpdateResult,
    SendMessageRequest,
    SuccessResponse,
    User,
)
from nearmatch.services import lifecycle, matching, messaging, presence, profiles
from nearmatch.store.memory import InMemoryStore

router = APIRouter()


@lru_cache
def _store() -> InMemoryStore:
    """Process-wide store; restarting the process discards all state."""
    return InMemoryStore()


def _raise_http(exc: NearMatchError) -> NoReturn:
    raise HTTPException(status_code=exc.status_code, detail=exc.as_detail()) from exc


@router.post("/login", response_model=LoginResponse)
def post_login(payload: LoginRequest) -> Any:
    """Get or create the user for an email."""
    try:
        user = presence.get_or_create_user(_store(), payload.email)
    except NearMatchError as e:
        _raise_http(e)
    return LoginResponse(user=user)


@router.post("/profile/update", response_model=ProfileUpdateResult)
def post_profile_update(payload: ProfileUpdateRequest) -> Any:
    try:
        profile = presence.update_profile(
            _store(),
            payload.email,
            name=payload.name,
            bio=payload.bio,
            photo=payload.photo,
            interests=payload.interests,
        )
    except NearMatchError as e:
        _raise_http(e)
    return ProfileUpdateResult(profile=profile)


@router.get("/profile/{email}", response_model=Profile)
def get_profile(email: str, requesting_user: str | None = Query(default=None, alias="requestingUser")) -> Any:
    """Return a profile, hiding anonymous users until a reveal."""
    try:
        return profiles.get_profile(_store(), email, requesting_user)
    except NearMatchError as e:
        _raise_http(e)


@router.post("/activate", response_model=User)
def post_activate(payload: ActivateRequest) -> Any:
    try:
        return presence.activate(
            _store(),
            payload.email,
            mode=payload.mode,
            latitude=payload.latitude,
            longitude=payload.longitude,
            settings=get_settings(),
        )
    except NearMatchError as e:
        _raise_http(e)


@router.post("/deactivate", response_model=User)
def post_deactivate(payload: EmailRequest) -> Any:
    try:
        return presence.deactivate(_store(), payload.email)
    except NearMatchError as e:
        _raise_http(e)


@router.get("/matches", response_model=list[Match])
def get_matches(email: str | None = None) -> Any:
    try:
        return matching.list_matches(_store(), email)
    except NearMatchError as e:
        _raise_http(e)


@router.post("/matches/accept", response_model=Match)
def post_accept_match(payload: MatchActionRequest) -> Any:
    """Accept a pending match (receiver only)."""
    try:
        return lifecycle.accept_match(_store(), payload.match_id, payload.email)
    except NearMatchError as e:
        _raise_http(e)


@router.post("/matches/ignore", response_model=SuccessResponse)
def post_ignore_match(payload: MatchActionRequest) -> Any:
    """Drop a match (receiver only)."""
    try:
        lifecycle.ignore_match(_store(), payload.match_id, payload.email)
    except NearMatchError as e:
        _raise_http(e)
    return SuccessResponse()


@router.post("/matches/reveal/request", response_model=Match)
def post_reveal_request(payload: MatchActionRequest) -> Any:
    try:
        return lifecycle.request_reveal(_store(), payload.match_id, payload.email)
    except NearMatchError as e:
        _raise_http(e)


@router.post("/matches/reveal/accept", response_model=Match)
def post_reveal_accept(payload: MatchActionRequest) -> Any:
    try:
        return lifecycle.accept_reveal(_store(), payload.match_id, payload.email)
    except NearMatchError as e:
        _raise_http(e)


@router.post("/messages/send", response_model=SuccessResponse)
def post_send_message(payload: SendMessageRequest) -> Any:
    try:
        messaging.send_message(_store(), payload.match_id, payload.sender, payload.text)
    except NearMatchError as e:
        _raise_http(e)
    return SuccessResponse()


@router.get("/messages", response_model=list[Message])
def get_messages(match_id: str | None = Query(default=None, alias="matchId")) -> Any:
    try:
        return messaging.get_messages(_store(), match_id)
    except NearMatchError as e:
        _raise_http(e)

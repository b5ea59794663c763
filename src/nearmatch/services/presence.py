"""
Presence and profile operations.

A user record is keyed by email and created lazily on first login. Going active
stores the mode + location and immediately runs a proximity scan.
"""

from __future__ import annotations

import logging

from nearmatch.config.settings import Settings
from nearmatch.core.time import utc_now
from nearmatch.domain.errors import NotFoundError, ValidationError
from nearmatch.domain.models import Location, Mode, ProfileWithStatus, User
from nearmatch.services.matching import scan_for_matches
from nearmatch.store.base import Store

logger = logging.getLogger(__name__)


def _require_user(store: Store, email: str | None) -> User:
    user = store.get_user(email) if email else None
    if user is None:
        raise NotFoundError("User not found")
    return user


def parse_mode(value: str | Mode | None) -> Mode:
    """Validate a client-supplied mode string."""
    try:
        return Mode(value)
    except ValueError as e:
        allowed = ", ".join(m.value for m in Mode)
        raise ValidationError(f"Invalid mode {value!r}; expected one of: {allowed}") from e


def get_or_create_user(store: Store, email: str | None) -> User:
    """Return the user for `email`, creating an empty record on first login."""
    # The email is the identity key and is stored exactly as sent.
    if not email:
        raise ValidationError("Email required")

    with store.lock:
        user = store.get_user(email)
        if user is None:
            user = User(email=email)
            store.put_user(user)
            logger.info("Created user %s", email)
        return user.model_copy(deep=True)


def update_profile(
    store: Store,
    email: str | None,
    *,
    name: str | None = None,
    bio: str | None = None,
    photo: str | None = None,
    interests: list[str] | None = None,
) -> ProfileWithStatus:
    """Partially update profile fields; `None` means "leave unchanged"."""
    with store.lock:
        user = _require_user(store, email)

        if name is not None:
            user.name = name
        if bio is not None:
            user.bio = bio
        if photo is not None:
            user.photo = photo
        if interests is not None:
            user.interests = list(interests)
        user.profile_completed = bool(user.name) and bool(user.bio)

        store.put_user(user)
        return ProfileWithStatus(**user.profile().model_dump(), profile_completed=user.profile_completed)


def activate(
    store: Store,
    email: str | None,
    *,
    mode: str | Mode | None,
    latitude: float | None,
    longitude: float | None,
    settings: Settings,
) -> User:
    """Go active in `mode` at the given location, then scan for nearby users."""
    with store.lock:
        user = _require_user(store, email)
        parsed = parse_mode(mode)

        user.is_active = True
        user.mode = parsed
        if latitude is not None and longitude is not None:
            user.location = Location(latitude=latitude, longitude=longitude)
        else:
            user.location = None
        user.anonymous_started_at = utc_now() if parsed is Mode.ANONYMOUS else None
        store.put_user(user)

        logger.info("User %s active mode=%s location=%s", user.email, parsed.value, user.location)
        scan_for_matches(store, user.email, radius_m=settings.matching.radius_m)
        return user.model_copy(deep=True)


def deactivate(store: Store, email: str | None) -> User:
    """Go inactive; the last location is kept but ignored by the match engine."""
    with store.lock:
        user = _require_user(store, email)
        user.is_active = False
        user.mode = None
        user.anonymous_started_at = None
        store.put_user(user)
        logger.info("User %s inactive", user.email)
        return user.model_copy(deep=True)

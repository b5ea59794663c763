"""
Process-local in-memory store.

Everything lives in insertion-ordered dicts and is lost on restart. Iteration
returns snapshots so callers may mutate the store while scanning.
"""

from __future__ import annotations

import threading
from typing import Iterator

from nearmatch.domain.models import Match, Message, User


class InMemoryStore:
    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._users: dict[str, User] = {}
        self._matches: dict[str, Match] = {}
        # Keyed by match id; transcripts of removed matches are left in place.
        self._messages: dict[str, list[Message]] = {}

    def get_user(self, email: str) -> User | None:
        return self._users.get(email)

    def put_user(self, user: User) -> None:
        self._users[user.email] = user

    def iter_users(self) -> Iterator[User]:
        return iter(list(self._users.values()))

    def get_match(self, match_id: str) -> Match | None:
        return self._matches.get(str(match_id))

    def put_match(self, match: Match) -> None:
        self._matches[match.id] = match

    def delete_match(self, match_id: str) -> None:
        self._matches.pop(str(match_id), None)

    def iter_matches(self) -> Iterator[Match]:
        return iter(list(self._matches.values()))

    def append_message(self, match_id: str, message: Message) -> None:
        self._messages.setdefault(str(match_id), []).append(message)

    def list_messages(self, match_id: str) -> list[Message]:
        return list(self._messages.get(str(match_id), []))


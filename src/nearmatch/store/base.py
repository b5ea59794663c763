"""
Store interface.

Services only talk to this protocol, so a persistent backend can replace the
in-memory store without touching business logic. Implementations must expose a
re-entrant `lock`; services hold it for the whole of each operation and only
hand copies of stored records back to callers, so responses are serialized from
a consistent snapshot.
"""

from __future__ import annotations

from typing import ContextManager, Iterator, Protocol

from nearmatch.domain.models import Match, Message, User


class Store(Protocol):
    lock: ContextManager

    # users
    def get_user(self, email: str) -> User | None: ...

    def put_user(self, user: User) -> None: ...

    def iter_users(self) -> Iterator[User]: ...

    # matches
    def get_match(self, match_id: str) -> Match | None: ...

    def put_match(self, match: Match) -> None: ...

    def delete_match(self, match_id: str) -> None: ...

    def iter_matches(self) -> Iterator[Match]: ...

    # transcripts
    def append_message(self, match_id: str, message: Message) -> None: ...

    def list_messages(self, match_id: str) -> list[Message]: ...

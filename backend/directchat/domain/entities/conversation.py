"""
Conversation Entity - A direct-message thread between exactly two users.

party_a/party_b keep the order the conversation was requested in, but the
pair is symmetric: (A, B) and (B, A) name the same conversation.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from directchat.domain.value_objects.conversation_id import ConversationId
from directchat.domain.value_objects.user_id import UserId


@dataclass
class Conversation:
    party_a: UserId
    party_b: UserId
    created_at: datetime
    updated_at: datetime
    id: Optional[ConversationId] = None

    def __post_init__(self):
        if self.party_a == self.party_b:
            raise ValueError("A conversation needs two distinct users")

    @classmethod
    def start(cls, party_a: UserId, party_b: UserId) -> Conversation:
        now = datetime.now(timezone.utc)
        return cls(party_a=party_a, party_b=party_b, created_at=now, updated_at=now)

    @property
    def canonical_pair(self) -> tuple[UserId, UserId]:
        """The pair sorted low/high, used as the uniqueness key."""
        return canonical_pair(self.party_a, self.party_b)

    def has_party(self, user_id: UserId) -> bool:
        return user_id in (self.party_a, self.party_b)

    def touch(self, at: datetime) -> None:
        """Advance recency; never moves updated_at backwards."""
        if at > self.updated_at:
            self.updated_at = at


def canonical_pair(first: UserId, second: UserId) -> tuple[UserId, UserId]:
    return (first, second) if first <= second else (second, first)

"""Presence state of a real-time room."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, TypeVar

__all__ = ["PresenceState"]

P = TypeVar("P")


@dataclass
class PresenceState(Generic[P]):
    """This client's presence plus every peer's, keyed by peer id."""

    user: Optional[P] = None
    peers: Dict[str, P] = field(default_factory=dict)
    is_loading: bool = True
    error: Optional[str] = None

    def peer_count(self) -> int:
        """Number of peers, not counting this client."""
        return len(self.peers)

    def has_peers(self) -> bool:
        """Whether any other peer is present."""
        return bool(self.peers)

    def peer_ids(self) -> List[str]:
        """Ids of all peers in the room."""
        return list(self.peers)
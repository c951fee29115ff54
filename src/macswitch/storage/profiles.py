from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple

from ..models import MachineProfile
from ..processing.read import profile_from_dict, profile_user_id
from ..utils.logging import get_logger

logger = get_logger(__name__)

# Key for records that carry no UserId (a bare profile or collector output)
DEFAULT_USER_ID = "local"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class StoredProfile:
    user_id: str
    machine: MachineProfile
    applications: Tuple[str, ...] = ()
    saved_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "machine": self.machine.to_dict(),
            "applications": list(self.applications),
            "saved_at": self.saved_at.isoformat(),
        }


class ProfileStore(Protocol):
    def get(self, user_id: str) -> Optional[StoredProfile]: ...

    def replace(self, user_id: str, record: StoredProfile) -> None: ...


class InMemoryProfileStore:
    """Per-user machine profiles keyed by an opaque user id.

    Writes replace the whole record under a lock, so a reader sees either
    the previous profile or the new one.
    """

    def __init__(self) -> None:
        self._records: Dict[str, StoredProfile] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> Optional[StoredProfile]:
        with self._lock:
            return self._records.get(user_id)

    def replace(self, user_id: str, record: StoredProfile) -> None:
        if not user_id:
            raise ValueError("user_id must be a non-empty string")
        with self._lock:
            self._records[user_id] = record
        logger.debug("Stored profile for %s", user_id)

    def save(
        self,
        user_id: str,
        machine: MachineProfile,
        applications: Optional[List[str]] = None,
    ) -> StoredProfile:
        record = StoredProfile(user_id, machine, tuple(applications or ()))
        self.replace(user_id, record)
        return record

    def import_profile(self, data: Mapping[str, Any], user_id: Optional[str] = None) -> StoredProfile:
        """Store a profile record as read from JSON, keyed by ``user_id`` or its ``UserId``."""
        machine, applications = profile_from_dict(data)
        user_id = user_id or profile_user_id(data) or DEFAULT_USER_ID
        record = self.save(user_id, machine, applications)
        logger.info("Imported profile %s (%d apps)", user_id, len(record.applications))
        return record

    def delete(self, user_id: str) -> bool:
        with self._lock:
            return self._records.pop(user_id, None) is not None

    def all(self) -> List[StoredProfile]:
        with self._lock:
            return list(self._records.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

"""
SavedQuery model - A persisted (constraint, search key) pair
"""
from dataclasses import dataclass
from datetime import datetime
import uuid

from ...constants import OBJECT_ID


@dataclass
class SavedQuery:
    """Saved query record"""
    id: str
    constraint_text: str
    search_key: str = OBJECT_ID
    position: int = 0
    created_at: str = None

    def __post_init__(self):
        if not self.id:
            self.id = str(uuid.uuid4())
        if not self.created_at:
            self.created_at = datetime.now().isoformat()
        if not self.search_key:
            self.search_key = OBJECT_ID

    @classmethod
    def new(cls, constraint_text: str, search_key: str = OBJECT_ID) -> "SavedQuery":
        """Create a record with a fresh identity."""
        return cls(id="", constraint_text=constraint_text, search_key=search_key)

    def as_pair(self) -> tuple:
        """Return (constraint, search_key)."""
        return self.constraint_text, self.search_key

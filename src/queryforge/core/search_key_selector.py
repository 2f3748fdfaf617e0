"""
Search key selection among the fields of a class.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from ..constants import OBJECT_ID

logger = logging.getLogger(__name__)


class SearchKeySelector:
    """
    Single selection over a fixed list of field names.

    At most one field is checked at a time. The sentinel OBJECT_ID means
    "no explicit key" and is never reported as checked, even when the class
    has an objectId field.
    """

    def __init__(self, fields: Sequence[str], search_key: str = OBJECT_ID):
        self._fields: Tuple[str, ...] = tuple(fields)
        self._search_key = search_key or OBJECT_ID

    @property
    def fields(self) -> Tuple[str, ...]:
        return self._fields

    @property
    def search_key(self) -> str:
        return self._search_key

    def toggle(self, field: str) -> str:
        """
        Toggle a field as the search key.

        Toggling the current key clears the selection back to OBJECT_ID;
        toggling any other listed field selects it instead. Fields not in
        the list leave the selection unchanged.

        Returns:
            The search key after the toggle
        """
        if field not in self._fields:
            logger.debug(f"Ignoring toggle of unknown field '{field}'")
            return self._search_key

        if field == self._search_key:
            self._search_key = OBJECT_ID
        else:
            self._search_key = field
        return self._search_key

    def select(self, search_key: str):
        """Set the key directly, e.g. from a saved query."""
        self._search_key = search_key or OBJECT_ID

    def clear(self):
        self._search_key = OBJECT_ID

    def is_checked(self, field: str) -> bool:
        return (
            field != OBJECT_ID
            and field == self._search_key
            and field in self._fields
        )

    def checked_fields(self) -> List[bool]:
        """One flag per field, in field order."""
        return [self.is_checked(f) for f in self._fields]

    def checked_field(self) -> Optional[str]:
        return self._search_key if self.is_checked(self._search_key) else None

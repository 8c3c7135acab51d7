# histfsm/core/history.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import Iterator, List, Optional, Tuple

from histfsm.core.types import StateID

logger = logging.getLogger(__name__)


class History:
    """
    Linear record of the states a machine has moved to, with a cursor marking
    the position used by undo and redo.

    The cursor is -1 when nothing is recorded, or when undo has stepped back
    past the first entry. Otherwise it indexes into the recorded entries.
    """

    def __init__(self) -> None:
        self._entries: List[StateID] = []
        self._cursor = -1

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def entries(self) -> Tuple[StateID, ...]:
        """A snapshot of the recorded states, oldest first."""
        return tuple(self._entries)

    @property
    def current(self) -> Optional[StateID]:
        """The entry under the cursor, or None when the cursor is before the first entry."""
        if self._cursor < 0:
            return None
        return self._entries[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor >= 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._entries) - 1

    def record(self, state: StateID) -> None:
        """
        Append a state reached by a forward mutation.

        If the cursor is not on the last entry, the entries after it are the
        future of an undone branch. They are discarded before the new state is
        appended, so they can no longer be redone. The entry under the cursor
        itself is kept, so undo after the new state returns to the branch point.

        :param state: The state that was just entered.
        """
        if self.can_redo:
            dropped = len(self._entries) - (self._cursor + 1)
            self._entries = self._entries[: self._cursor + 1]
            logger.debug("Discarded %d redo entries after cursor %d", dropped, self._cursor)
        self._entries.append(state)
        self._cursor = len(self._entries) - 1

    def back(self) -> bool:
        """
        Move the cursor one step back.

        :return: False if the cursor was already before the first entry.
        """
        if not self.can_undo:
            return False
        self._cursor -= 1
        return True

    def forward(self) -> bool:
        """
        Move the cursor one step forward.

        :return: False if the cursor was already on the last entry.
        """
        if not self.can_redo:
            return False
        self._cursor += 1
        return True

    def clear(self) -> None:
        self._entries = []
        self._cursor = -1

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[StateID]:
        return iter(self.entries)

    def __repr__(self) -> str:
        return f"History(entries={self._entries!r}, cursor={self._cursor})"

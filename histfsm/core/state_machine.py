# histfsm/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import Any, List, Mapping, Optional, Tuple, Union

from histfsm.core.config import Configuration
from histfsm.core.errors import ConfigMissingError, UndeclaredStateError, UnknownEventError
from histfsm.core.history import History
from histfsm.core.types import EventID, StateID

logger = logging.getLogger(__name__)


class StateMachine:
    """
    A finite state machine driven by named events, with a linear undo/redo
    history of the states it has moved through.

    The machine starts in the configured initial state. Every forward mutation
    (change_state, trigger, reset) is recorded in the history; undo and redo
    move through the recorded states without recording anything new.
    """

    def __init__(self, config: Union[Configuration, Mapping[str, Any], None] = None) -> None:
        """
        :param config: A Configuration, or a mapping in the form accepted by
            Configuration.from_dict.
        :raises ConfigMissingError: If no configuration is given.
        :raises ConfigurationError: If the configuration is invalid.
        """
        if config is None:
            raise ConfigMissingError()
        self._config = Configuration.coerce(config)
        self._state: StateID = self._config.initial
        self._history = History()
        logger.debug("State machine created in state '%s'", self._state)

    @property
    def config(self) -> Configuration:
        return self._config

    @property
    def state(self) -> StateID:
        """The current state."""
        return self._state

    @property
    def history(self) -> Tuple[StateID, ...]:
        """The recorded states, oldest first."""
        return self._history.entries

    @property
    def history_cursor(self) -> int:
        return self._history.cursor

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def get_state(self) -> StateID:
        """Return the current state."""
        return self._state

    def change_state(self, state: StateID) -> None:
        """
        Move directly to a declared state, regardless of transitions.

        :param state: Target state name.
        :raises UndeclaredStateError: If ``state`` is not declared.
        """
        if not self._config.is_declared(state):
            logger.debug("Rejected change to undeclared state '%s'", state)
            raise UndeclaredStateError(state)
        self._enter(state, "change_state")

    def trigger(self, event: EventID) -> None:
        """
        Follow the current state's transition for ``event``.

        :param event: Event name.
        :raises UnknownEventError: If the current state has no transition for ``event``.
        """
        descriptor = self._config.states[self._state]
        if not descriptor.handles(event):
            logger.debug("Rejected event '%s' in state '%s'", event, self._state)
            raise UnknownEventError(event, self._state)
        self._enter(descriptor.target(event), f"trigger({event})")

    def reset(self) -> None:
        """Return to the initial state. The reset is recorded like any other change."""
        self._enter(self._config.initial, "reset")

    def get_states(self, event: Optional[EventID] = None) -> List[StateID]:
        """
        List declared states, in declared order.

        :param event: If given, only states with a transition for this event are listed.
        :return: The matching state names; empty if no state handles ``event``.
        """
        if not event:
            return list(self._config.state_names)
        return [name for name, descriptor in self._config.states.items() if descriptor.handles(event)]

    def undo(self) -> bool:
        """
        Step back one entry in the history.

        Stepping back past the first recorded entry lands on the initial state.

        :return: False if there was nothing to undo.
        """
        if not self._history.back():
            return False
        previous = self._state
        recorded = self._history.current
        self._state = recorded if recorded is not None else self._config.initial
        logger.debug("Undo: '%s' -> '%s' (cursor %d)", previous, self._state, self._history.cursor)
        return True

    def redo(self) -> bool:
        """
        Step forward one entry in the history.

        :return: False if there was nothing to redo.
        """
        if not self._history.forward():
            return False
        previous = self._state
        self._state = self._history.current
        logger.debug("Redo: '%s' -> '%s' (cursor %d)", previous, self._state, self._history.cursor)
        return True

    def clear_history(self) -> None:
        """Forget all recorded states. The current state is kept."""
        self._history.clear()
        logger.debug("History cleared in state '%s'", self._state)

    def _enter(self, state: StateID, cause: str) -> None:
        previous = self._state
        self._state = state
        self._history.record(state)
        logger.debug("%s: '%s' -> '%s' (cursor %d)", cause, previous, state, self._history.cursor)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._state!r}, history_cursor={self._history.cursor})"

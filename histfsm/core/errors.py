# histfsm/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import List, Optional


class FSMError(Exception):
    """
    Base exception class for errors raised by the state machine library.
    """


class ConfigMissingError(FSMError):
    """
    Raised when a state machine is constructed without a configuration.
    """

    def __init__(self, message: str = "Cannot create a state machine without a configuration") -> None:
        super().__init__(message)


class ConfigurationError(FSMError):
    """
    Raised when a configuration is malformed or internally inconsistent.

    Every problem found during validation is kept in ``errors`` so callers can
    report them all at once.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.errors: List[str] = list(errors) if errors else [message]


class UndeclaredStateError(FSMError):
    """
    Raised when a state name is not declared in the machine's configuration.
    """

    def __init__(self, state: str) -> None:
        super().__init__(f"Undeclared state '{state}'")
        self.state = state


class UnknownEventError(FSMError):
    """
    Raised when an event has no transition from the current state.
    """

    def __init__(self, event: str, state: str) -> None:
        super().__init__(f"Unknown event '{event}' for state '{state}'")
        self.event = event
        self.state = state

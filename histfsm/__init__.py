"""histfsm: finite state machine with undo/redo history

A small, synchronous state machine driven by named events. The machine is
built from a declarative configuration of states and their transition tables,
and records every state it moves to so that changes can be undone and redone.

Responsibilities:
    - Configuration loading and validation
    - Event-driven and direct state changes
    - Linear undo/redo history with branch truncation

Cross-cutting Concerns:
    Thread Safety:
        - Not thread-safe; callers serialize access to a machine

    Error Handling:
        - All errors derive from FSMError
        - Failing operations never mutate state or history

    Logging:
        - State changes and history moves logged at DEBUG on module loggers
        - No handlers are configured by the library
"""

from histfsm.core import (
    ConfigMissingError,
    Configuration,
    ConfigurationError,
    FSMError,
    History,
    StateDescriptor,
    StateMachine,
    UndeclaredStateError,
    UnknownEventError,
)

__version__ = "0.1.0"

__all__ = [
    "Configuration",
    "StateDescriptor",
    "FSMError",
    "ConfigMissingError",
    "ConfigurationError",
    "UndeclaredStateError",
    "UnknownEventError",
    "History",
    "StateMachine",
]

# histfsm/core/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Core package: configuration, history buffer and the state machine itself.
"""

from .config import Configuration, StateDescriptor
from .errors import ConfigMissingError, ConfigurationError, FSMError, UndeclaredStateError, UnknownEventError
from .history import History
from .state_machine import StateMachine

__all__ = [
    # Configuration
    "Configuration",
    "StateDescriptor",
    # Errors
    "FSMError",
    "ConfigMissingError",
    "ConfigurationError",
    "UndeclaredStateError",
    "UnknownEventError",
    # Machine
    "History",
    "StateMachine",
]

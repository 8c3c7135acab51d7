# histfsm/core/config.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, List, Mapping, Tuple

from histfsm.core.errors import ConfigurationError
from histfsm.core.types import EventID, StateID, TransitionTable


@dataclass(frozen=True)
class StateDescriptor:
    """
    Describes a single declared state: the events it reacts to and the state
    each event leads to.
    """

    transitions: TransitionTable = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.transitions, Mapping):
            raise ConfigurationError(
                f"Transitions must be a mapping of event to state, got {type(self.transitions).__name__}"
            )
        object.__setattr__(self, "transitions", MappingProxyType(dict(self.transitions)))

    def target(self, event: EventID) -> StateID:
        """
        Return the target state for ``event``.

        :raises KeyError: If the state has no transition for ``event``.
        """
        return self.transitions[event]

    def handles(self, event: EventID) -> bool:
        return event in self.transitions


@dataclass(frozen=True)
class Configuration:
    """
    Immutable description of a state machine: the state it starts in and the
    transition table of every declared state.

    The configuration is validated as soon as it is created, so a machine built
    from it never has to re-check state names at runtime.
    """

    initial: StateID
    states: Mapping[StateID, StateDescriptor]

    def __post_init__(self) -> None:
        if not isinstance(self.states, Mapping):
            raise ConfigurationError(
                f"'states' must be a mapping of state name to state descriptor, got {type(self.states).__name__}"
            )
        errors: List[str] = []
        states = {}
        for name, descriptor in self.states.items():
            if isinstance(descriptor, StateDescriptor):
                states[name] = descriptor
            elif isinstance(descriptor, Mapping):
                states[name] = StateDescriptor(descriptor)
            else:
                errors.append(f"Transitions of state '{name}' must be a mapping of event to state")
        if errors:
            raise ConfigurationError("Invalid configuration: " + "; ".join(errors), errors)
        object.__setattr__(self, "states", MappingProxyType(states))
        _ConfigurationValidator().validate(self)

    @property
    def state_names(self) -> Tuple[StateID, ...]:
        """All declared state names, in declared order."""
        return tuple(self.states)

    def is_declared(self, state: StateID) -> bool:
        return state in self.states

    def transitions_for(self, state: StateID) -> TransitionTable:
        """
        Return the transition table of a declared state.

        :param state: A declared state name.
        :raises KeyError: If ``state`` is not declared.
        """
        return self.states[state].transitions

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Configuration":
        """
        Build a configuration from its plain mapping form::

            {
                "initial": "green",
                "states": {
                    "green": {"transitions": {"next": "yellow"}},
                    "yellow": {"transitions": {"next": "red"}},
                    "red": {"transitions": {"next": "green"}},
                },
            }

        A state entry without ``transitions`` has no outgoing transitions.

        :param data: The mapping to load.
        :raises ConfigurationError: If the mapping does not have this shape or
            describes an inconsistent machine.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"Configuration must be a mapping, got {type(data).__name__}")

        errors: List[str] = []
        if "initial" not in data:
            errors.append("Configuration is missing 'initial'")
        if "states" not in data:
            errors.append("Configuration is missing 'states'")
        if errors:
            raise ConfigurationError("; ".join(errors), errors)

        raw_states = data["states"]
        if not isinstance(raw_states, Mapping):
            raise ConfigurationError("'states' must be a mapping of state name to state descriptor")

        states = {}
        for name, entry in raw_states.items():
            if entry is None:
                entry = {}
            if not isinstance(entry, Mapping):
                errors.append(f"State '{name}' must be described by a mapping")
                continue
            transitions = entry.get("transitions") or {}
            if not isinstance(transitions, Mapping):
                errors.append(f"Transitions of state '{name}' must be a mapping of event to state")
                continue
            states[name] = StateDescriptor(transitions)

        if errors:
            raise ConfigurationError("; ".join(errors), errors)
        return cls(initial=data["initial"], states=states)

    @classmethod
    def coerce(cls, config: Any) -> "Configuration":
        """Return ``config`` as a :class:`Configuration`, loading plain mappings."""
        if isinstance(config, Configuration):
            return config
        return cls.from_dict(config)


class _ConfigurationValidator:
    """
    Checks a configuration for consistency. All problems are collected and
    raised together in a single ConfigurationError.
    """

    def validate(self, config: Configuration) -> None:
        errors: List[str] = []
        errors.extend(self._check_names(config))
        if not config.states:
            errors.append("Configuration must declare at least one state")
        elif isinstance(config.initial, str) and config.initial not in config.states:
            errors.append(f"Initial state '{config.initial}' is not declared")
        errors.extend(self._check_targets(config))

        if errors:
            raise ConfigurationError("Invalid configuration: " + "; ".join(errors), errors)

    @staticmethod
    def _check_names(config: Configuration) -> List[str]:
        errors = []
        if not isinstance(config.initial, str):
            errors.append(f"Initial state must be a string, got {type(config.initial).__name__}")
        for name, descriptor in config.states.items():
            if not isinstance(name, str) or not name:
                errors.append(f"State names must be non-empty strings, got {name!r}")
            for event in descriptor.transitions:
                if not isinstance(event, str) or not event:
                    errors.append(f"Event names in state '{name}' must be non-empty strings, got {event!r}")
        return errors

    @staticmethod
    def _check_targets(config: Configuration) -> List[str]:
        errors = []
        for name, descriptor in config.states.items():
            for event, target in descriptor.transitions.items():
                if not isinstance(target, str) or target not in config.states:
                    errors.append(f"Transition '{event}' from state '{name}' targets undeclared state '{target}'")
        return errors

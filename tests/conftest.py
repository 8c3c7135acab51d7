# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict

import pytest

from histfsm.core.config import Configuration
from histfsm.core.state_machine import StateMachine


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def traffic_light_dict() -> Dict[str, Any]:
    """Plain-mapping configuration for a three-state traffic light."""
    return {
        "initial": "green",
        "states": {
            "green": {"transitions": {"next": "yellow"}},
            "yellow": {"transitions": {"next": "red"}},
            "red": {"transitions": {"next": "green"}},
        },
    }


@pytest.fixture
def traffic_light_config(traffic_light_dict) -> Configuration:
    return Configuration.from_dict(traffic_light_dict)


@pytest.fixture
def traffic_light(traffic_light_config) -> StateMachine:
    """A traffic light machine in its initial 'green' state."""
    return StateMachine(traffic_light_config)


@pytest.fixture
def document_dict() -> Dict[str, Any]:
    """A document workflow where states handle different events."""
    return {
        "initial": "draft",
        "states": {
            "draft": {"transitions": {"submit": "review", "discard": "archived"}},
            "review": {"transitions": {"approve": "published", "reject": "draft"}},
            "published": {"transitions": {"retire": "archived"}},
            "archived": {},
        },
    }


@pytest.fixture
def document_machine(document_dict) -> StateMachine:
    return StateMachine(document_dict)

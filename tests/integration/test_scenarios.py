# tests/integration/test_scenarios.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""End-to-end walks through the traffic light and document workflow machines."""

import pytest

from histfsm import StateMachine, UnknownEventError


def test_undo_back_to_start(traffic_light):
    traffic_light.trigger("next")
    assert traffic_light.get_state() == "yellow"
    traffic_light.trigger("next")
    assert traffic_light.get_state() == "red"

    assert traffic_light.undo() is True
    assert traffic_light.get_state() == "yellow"
    assert traffic_light.undo() is True
    assert traffic_light.get_state() == "green"
    assert traffic_light.undo() is False
    assert traffic_light.get_state() == "green"


def test_direct_jump_then_unknown_event(traffic_light):
    traffic_light.trigger("next")
    traffic_light.trigger("next")
    assert traffic_light.get_state() == "red"

    traffic_light.change_state("green")
    assert traffic_light.get_state() == "green"

    with pytest.raises(UnknownEventError):
        traffic_light.trigger("bogus")
    assert traffic_light.get_state() == "green"


def test_every_light_handles_next(traffic_light):
    assert traffic_light.get_states("next") == ["green", "yellow", "red"]
    assert traffic_light.get_states() == ["green", "yellow", "red"]


def test_new_branch_blocks_redo(traffic_light):
    traffic_light.trigger("next")
    traffic_light.trigger("next")
    traffic_light.undo()
    traffic_light.trigger("next")
    assert traffic_light.redo() is False


def test_document_review_cycle(document_machine):
    document_machine.trigger("submit")
    document_machine.trigger("reject")
    document_machine.trigger("submit")
    document_machine.trigger("approve")
    assert document_machine.get_state() == "published"
    assert document_machine.history == ("review", "draft", "review", "published")

    # Walk back to the first rejection and take the approval branch instead.
    document_machine.undo()
    document_machine.undo()
    assert document_machine.get_state() == "draft"
    document_machine.trigger("discard")
    assert document_machine.history == ("review", "draft", "archived")
    assert document_machine.redo() is False

    document_machine.reset()
    assert document_machine.get_state() == "draft"
    assert document_machine.undo() is True
    assert document_machine.get_state() == "archived"


def test_independent_machines_share_configuration(traffic_light_config):
    first = StateMachine(traffic_light_config)
    second = StateMachine(traffic_light_config)
    first.trigger("next")
    assert first.get_state() == "yellow"
    assert second.get_state() == "green"
    assert second.history == ()

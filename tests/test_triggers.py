import logging

import pytest

from leiengine.entity import Entity
from leiengine.log import LOGGER_NAME, TRACE
from leiengine.triggers import LevelSwitchCollider, TriggerCollider, TriggerContacts


class FakeWorld:
    def __init__(self):
        self.overlapping = []

    def contact_test(self, obj, contacts):
        for other in self.overlapping:
            contacts.add_contact(other)


class RecordingTrigger(TriggerCollider):
    def __init__(self, entity):
        super().__init__(entity)
        self.events = []

    def on_trigger_enter(self, other):
        self.events.append(("enter", other))

    def on_trigger_stay(self, other):
        self.events.append(("stay", other))

    def on_trigger_exit(self, other):
        self.events.append(("exit", other))


def _setup(ignored=()):
    world = FakeWorld()
    trigger = Entity("zone").add_component(RecordingTrigger)
    trigger.init("zone-body", world, ignored)
    return world, trigger


def test_contacts_skip_ignored():
    contacts = TriggerContacts({"player"})
    contacts.add_contact("player")
    contacts.add_contact("crate")
    contacts.add_contact("crate")
    assert list(contacts.touching) == ["crate"]


def test_enter_then_stay_then_exit():
    world, trigger = _setup()
    world.overlapping = ["crate"]
    trigger.physics_update()
    assert trigger.events == [("enter", "crate")]
    assert trigger.colliders == ("crate",)

    trigger.physics_update()
    assert trigger.events[-1] == ("stay", "crate")

    world.overlapping = []
    trigger.physics_update()
    assert trigger.events[-1] == ("exit", "crate")
    assert trigger.colliders == ()


def test_ignored_colliders_never_reported():
    world, trigger = _setup(ignored=["self-body"])
    world.overlapping = ["self-body", "ball"]
    trigger.physics_update()
    assert trigger.events == [("enter", "ball")]


def test_mixed_enter_and_exit_in_one_step():
    world, trigger = _setup()
    world.overlapping = ["a"]
    trigger.physics_update()
    world.overlapping = ["b"]
    trigger.physics_update()
    assert trigger.events[1:] == [("enter", "b"), ("exit", "a")]
    assert trigger.colliders == ("b",)


def test_uninitialized_trigger_raises():
    trigger = Entity().add_component(TriggerCollider)
    with pytest.raises(RuntimeError):
        trigger.physics_update()


def test_level_switch_logs_while_inside(caplog):
    world = FakeWorld()
    collider = Entity("goal").add_component(LevelSwitchCollider)
    collider.init("goal-body", world)
    world.overlapping = ["player"]
    with caplog.at_level(TRACE, logger=LOGGER_NAME):
        collider.physics_update()
        assert not [r for r in caplog.records if r.name == LOGGER_NAME]
        collider.physics_update()
    records = [r for r in caplog.records if r.name == LOGGER_NAME]
    assert len(records) == 1
    assert records[0].levelno == TRACE
    assert logging.getLevelName(TRACE) == "TRACE"
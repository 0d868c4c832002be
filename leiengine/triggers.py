"""Trigger volumes that report objects entering, staying in and leaving them."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Protocol

from leiengine.entity import Component, Entity
from leiengine.log import TRACE, get_logger


class TriggerContacts:
    """Collects the objects touching a trigger, skipping ignored ones."""

    def __init__(self, ignored: Iterable[Hashable] = ()):
        self.ignored = set(ignored)
        self.touching: dict[Hashable, None] = {}

    def add_contact(self, other: Hashable) -> None:
        """Record a contact with ``other`` unless it is ignored."""
        if other not in self.ignored:
            self.touching[other] = None


class ContactWorld(Protocol):
    """A world that reports every object overlapping a given one."""

    def contact_test(self, obj: Hashable, contacts: TriggerContacts) -> None: ...


class TriggerCollider(Component):
    """Component running a contact test each physics step and reporting changes."""

    def __init__(self, entity: Entity):
        super().__init__(entity)
        self.trigger: Hashable | None = None
        self.world: ContactWorld | None = None
        self.ignored_colliders: set[Hashable] = set()
        self.last_entered: Hashable | None = None
        self.last_exited: Hashable | None = None
        self._colliders: dict[Hashable, None] = {}

    @property
    def colliders(self) -> tuple[Hashable, ...]:
        """Objects currently inside the trigger."""
        return tuple(self._colliders)

    def init(self, trigger: Hashable, world: ContactWorld,
             ignored_colliders: Iterable[Hashable] = ()) -> None:
        """Set the trigger object, the world to test in and the objects to ignore."""
        self.trigger = trigger
        self.world = world
        self.ignored_colliders.update(ignored_colliders)

    def physics_update(self) -> None:
        if self.trigger is None or self.world is None:
            raise RuntimeError("trigger collider has not been initialized")

        contacts = TriggerContacts(self.ignored_colliders)
        self.world.contact_test(self.trigger, contacts)
        touching = contacts.touching

        entered = []
        for collider in touching:
            if collider in self._colliders:
                self.on_trigger_stay(collider)
            else:
                entered.append(collider)
                self.on_trigger_enter(collider)

        exited = [c for c in self._colliders if c not in touching]
        for collider in exited:
            self.on_trigger_exit(collider)

        for collider in entered:
            self._colliders[collider] = None
        for collider in exited:
            del self._colliders[collider]

    def on_trigger_enter(self, other: Hashable) -> None:
        """Called when ``other`` starts touching the trigger."""
        self.last_entered = other

    def on_trigger_stay(self, other: Hashable) -> None:
        """Called each step ``other`` keeps touching the trigger."""

    def on_trigger_exit(self, other: Hashable) -> None:
        """Called when ``other`` stops touching the trigger."""
        self.last_exited = other


class LevelSwitchCollider(TriggerCollider):
    """Trigger marking the end of a level."""

    def on_trigger_stay(self, other: Hashable) -> None:
        get_logger().log(TRACE, "Level switch trigger reached")
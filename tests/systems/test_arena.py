"""
test_arena.py
-------------
Unit tests for handle-based entity ownership in the Arena.
"""

import pytest

from air_combat.core.errors import EntityConversionError
from air_combat.entities.base_entity import BaseEntity
from air_combat.entities.camera import Camera
from air_combat.entities.enemy import Enemy
from air_combat.entities.player import Player
from air_combat.systems.arena import Arena


@pytest.fixture
def arena():
    return Arena()


def player_with_children(count=2):
    player = Player(100, 100)
    children = [BaseEntity(name=f"effect{i}") for i in range(count)]
    for child in children:
        player.add_child(child)
    return player, children


class TestOwnership:

    def test_add_child_registers_whole_subtree(self, arena):
        player, children = player_with_children()
        handle = arena.add_child(player)

        assert arena.get(handle) is player
        assert all(arena.contains(c.handle) for c in children)
        assert arena.get_children(handle) == [c.handle for c in children]
        assert len(arena) == 3

    def test_handles_are_unique(self, arena):
        handles = [arena.add_child(Enemy()) for _ in range(5)]
        assert len(set(handles)) == 5

    def test_adding_twice_is_rejected(self, arena):
        enemy = Enemy()
        arena.add_child(enemy)
        with pytest.raises(ValueError):
            arena.add_child(enemy)

    def test_add_under_parent(self, arena):
        parent = arena.add_child(Player())
        child = arena.add_child(BaseEntity(5, 0), parent=parent)
        assert arena.get_children(parent) == [child]
        assert arena.get(child).global_position().x == 5

    def test_remove_child_detaches_without_destroying(self, arena):
        player, children = player_with_children()
        handle = arena.add_child(player)

        removed = arena.remove_child(handle)

        assert removed is player
        assert not arena.contains(handle)
        assert player.handle is None
        assert not player.freed
        assert player.children == children
        assert len(arena) == 0


class TestDestruction:

    def test_queue_free_defers_until_flush(self, arena):
        handle = arena.add_child(Enemy())
        arena.queue_free(handle)

        assert arena.contains(handle)
        assert arena.flush() == 1
        assert not arena.contains(handle)

    def test_flush_destroys_descendants(self, arena):
        player, children = player_with_children()
        handle = arena.add_child(player)
        arena.queue_free(handle)
        arena.flush()

        assert player.freed and all(c.freed for c in children)
        assert len(arena) == 0

    def test_queued_child_of_detached_parent_is_still_destroyed(self, arena):
        player, children = player_with_children()
        handle = arena.add_child(player)
        for child_handle in arena.get_children(handle):
            arena.queue_free(child_handle)
        arena.remove_child(handle)

        assert arena.flush() == 2
        assert all(c.freed for c in children)
        assert player.children == []
        assert not player.freed

    def test_queue_free_is_idempotent(self, arena):
        handle = arena.add_child(Enemy())
        arena.queue_free(handle)
        arena.queue_free(handle)
        assert arena.flush() == 1

    def test_clear_empties_arena(self, arena):
        for _ in range(3):
            arena.add_child(Enemy())
        arena.clear()
        assert len(arena) == 0 and arena.roots() == []


class TestQueries:

    def test_resolve_checks_type(self, arena):
        handle = arena.add_child(Enemy())
        assert isinstance(arena.resolve(handle, Enemy), Enemy)
        with pytest.raises(EntityConversionError):
            arena.resolve(handle, Player)

    def test_resolve_dead_handle(self, arena):
        with pytest.raises(EntityConversionError):
            arena.resolve(None, Player)
        with pytest.raises(EntityConversionError):
            arena.resolve(999, Player)

    def test_single_current_camera(self, arena):
        first, second = Camera(), Camera()
        first.make_current()
        second.make_current()
        arena.add_child(first)
        arena.add_child(second)

        assert arena.camera() is second
        assert not first.current

    def test_removing_camera_clears_current(self, arena):
        camera = Camera()
        camera.make_current()
        handle = arena.add_child(camera)
        arena.remove_child(handle)
        assert arena.camera() is None

    def test_set_current_camera_switches_view(self, arena):
        first, second = Camera(), Camera()
        first.make_current()
        arena.add_child(first)
        handle = arena.add_child(second)

        assert arena.set_current_camera(handle) is second
        assert arena.camera() is second
        assert second.current and not first.current

    def test_set_current_camera_rejects_other_entities(self, arena):
        handle = arena.add_child(Enemy())
        with pytest.raises(EntityConversionError):
            arena.set_current_camera(handle)

"""Room registry contract tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from liveroom.rooms.registry import RoomDetail
from liveroom.rooms.registry import RoomRegistry
from liveroom.rooms.registry import now_millis


def _ticking_clock(start: int = 1_000) -> Callable[[], int]:
    ticks = iter(range(start, start + 10_000))
    return lambda: next(ticks)


def _publish(registry: RoomRegistry, room_id: str, name: str = "Room") -> RoomDetail:
    return registry.publish(room_id=room_id, mcu_url=f"mcu://{room_id}", name=name, publisher_user_id="u100")


def test_publish_then_query_one_round_trips_fields() -> None:
    """Input: publish r1 -> Output: same fields, timestamp inside the call window."""
    registry = RoomRegistry()

    before = now_millis()
    registry.publish(room_id="r1", mcu_url="u1", name="Room1", publisher_user_id="u100")
    after = now_millis()

    room = registry.query_one("r1")
    assert room is not None
    assert (room.room_id, room.mcu_url, room.name, room.publisher_user_id) == ("r1", "u1", "Room1", "u100")
    assert before <= room.created_at_millis <= after


def test_republish_replaces_entry_and_resets_timestamp() -> None:
    """Input: publish X as A then X as B -> Output: one record named B with a newer stamp."""
    registry = RoomRegistry(clock=_ticking_clock())

    first = _publish(registry, "x", name="A")
    second = _publish(registry, "x", name="B")

    assert registry.query_one("x") == second
    assert second.name == "B"
    assert second.created_at_millis > first.created_at_millis
    assert [room.room_id for room in registry.query_all()] == ["x"]
    assert len(registry) == 1


def test_unpublish_unknown_room_is_a_noop() -> None:
    registry = RoomRegistry()
    _publish(registry, "keep")

    registry.unpublish("missing")

    assert "missing" not in registry
    assert [room.room_id for room in registry.query_all()] == ["keep"]


def test_unpublish_removes_room() -> None:
    registry = RoomRegistry()
    _publish(registry, "r1")

    registry.unpublish("r1")
    registry.unpublish("r1")

    assert registry.query_one("r1") is None
    assert registry.query_all() == []


def test_query_all_orders_newest_first() -> None:
    """Input: publish A, B, C with increasing stamps -> Output: C, B, A."""
    registry = RoomRegistry(clock=_ticking_clock())
    for room_id in ("a", "b", "c"):
        _publish(registry, room_id)

    assert [room.room_id for room in registry.query_all()] == ["c", "b", "a"]


def test_query_all_with_tied_timestamps_keeps_every_room_once() -> None:
    registry = RoomRegistry(clock=lambda: 42)
    for room_id in ("a", "b", "c", "d"):
        _publish(registry, room_id)

    rooms = registry.query_all()

    assert sorted(room.room_id for room in rooms) == ["a", "b", "c", "d"]
    assert all(room.created_at_millis == 42 for room in rooms)


def test_republish_moves_room_to_front() -> None:
    registry = RoomRegistry(clock=_ticking_clock())
    for room_id in ("a", "b", "c"):
        _publish(registry, room_id)

    _publish(registry, "a", name="again")

    assert [room.room_id for room in registry.query_all()] == ["a", "c", "b"]


def test_query_one_unknown_id_returns_none() -> None:
    registry = RoomRegistry()
    _publish(registry, "r1")

    assert registry.query_one("nope") is None


def test_query_dispatches_on_empty_id() -> None:
    registry = RoomRegistry(clock=_ticking_clock())
    _publish(registry, "a")
    _publish(registry, "b")

    assert [room.room_id for room in registry.query()] == ["b", "a"]
    assert [room.room_id for room in registry.query("")] == ["b", "a"]
    assert [room.room_id for room in registry.query("a")] == ["a"]
    assert registry.query("zzz") == []


@pytest.mark.parametrize("missing", ["room_id", "mcu_url", "name", "publisher_user_id"])
def test_publish_rejects_empty_fields_without_mutation(missing: str) -> None:
    registry = RoomRegistry()
    fields = {"room_id": "r1", "mcu_url": "u1", "name": "Room1", "publisher_user_id": "u100"}
    fields[missing] = ""

    with pytest.raises(ValueError, match=missing):
        registry.publish(**fields)

    assert len(registry) == 0


def test_unpublish_rejects_empty_id() -> None:
    with pytest.raises(ValueError):
        RoomRegistry().unpublish("")


def test_room_detail_is_immutable() -> None:
    registry = RoomRegistry()
    room = _publish(registry, "r1")

    with pytest.raises(AttributeError):
        room.name = "changed"  # type: ignore[misc]

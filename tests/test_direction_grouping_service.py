"""Tests for direction grouping."""

import pytest

from map_departures.application.services import DirectionGroupingService
from tests.test_services import make_departure


def _summary(directions) -> list[tuple[str, int]]:  # type: ignore[no-untyped-def]
    return [(direction.destination, direction.size) for direction in directions]


def test_when_three_groups_then_two_largest_kept_in_size_order() -> None:
    """Given groups A:2, B:3, C:1, when grouping, then B then A are returned."""
    departures = [make_departure(dest) for dest in ["A,1", "A,2", "B", "B", "B", "C"]]

    result = DirectionGroupingService().group(departures)

    assert _summary(result) == [("B", 3), ("A", 2)]


def test_when_empty_input_then_no_directions() -> None:
    """Given no departures, when grouping, then the result is empty."""
    assert DirectionGroupingService().group([]) == []


def test_when_single_group_then_one_direction() -> None:
    """Given one destination, when grouping, then one direction is returned."""
    departures = [make_departure("Renens, gare"), make_departure("Renens, Piscine")]

    result = DirectionGroupingService().group(departures)

    assert _summary(result) == [("Renens", 2)]


def test_when_grouped_then_members_keep_input_order_and_original_text() -> None:
    """Given departures of one group, when grouping, then order and destination text are kept."""
    departures = [
        make_departure("A, x", number="1"),
        make_departure("B", number="2"),
        make_departure("A, y", number="3"),
    ]

    result = DirectionGroupingService().group(departures)

    group_a = result[0]
    assert group_a.destination == "A"
    assert [d.number for d in group_a.departures] == ["1", "3"]
    assert [d.destination for d in group_a.departures] == ["A, x", "A, y"]


def test_when_groups_tie_then_first_seen_wins() -> None:
    """Given equally sized groups, when grouping, then they keep first-seen order."""
    departures = [make_departure(dest) for dest in ["C", "B", "A", "A", "B", "C"]]

    result = DirectionGroupingService().group(departures)

    assert _summary(result) == [("C", 2), ("B", 2)]


def test_when_grouping_repeatedly_then_result_is_stable() -> None:
    """Given the same input, when grouping many times, then the result is always equal."""
    departures = [make_departure(dest) for dest in ["X", "Y", "Z", "Y", "X", "Z"]]
    service = DirectionGroupingService()

    results = [service.group(departures) for _ in range(20)]

    assert all(result == results[0] for result in results)


def test_when_max_directions_configured_then_respected() -> None:
    """Given a custom maximum, when grouping, then that many directions are kept."""
    departures = [make_departure(dest) for dest in ["A", "B", "C", "C"]]

    result = DirectionGroupingService(max_directions=3).group(departures)

    assert _summary(result) == [("C", 2), ("A", 1), ("B", 1)]


def test_when_max_directions_negative_then_rejected() -> None:
    """Given a negative maximum, when creating the service, then ValueError is raised."""
    with pytest.raises(ValueError, match="must not be negative"):
        DirectionGroupingService(max_directions=-1)

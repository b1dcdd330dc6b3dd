import pytest

from streamecs.resources import MutableResourceRegistry, ResourceRegistry


class Time:
    def __init__(self, seconds):
        self.seconds = seconds


class Score:
    def __init__(self, points):
        self.points = points


def test_get_and_contains():
    time = Time(1)
    registry = ResourceRegistry(time, 5)
    assert registry.contains(Time)
    assert registry.contains(int)
    assert not registry.contains(Score)
    assert registry.get(Time) is time
    assert registry.get(int) == 5
    assert registry.get(Score) is None


def test_lookup_uses_exact_type():
    registry = ResourceRegistry(True)
    assert not registry.contains(int)
    assert registry.get(bool) is True


def test_provide_present_resource():
    score = Score(3)
    registry = ResourceRegistry(score)
    assert registry.provide(Score) is score


def test_provide_missing_resource_raises():
    registry = ResourceRegistry(Score(3))
    with pytest.raises(KeyError) as info:
        registry.provide(Time)
    assert "should exist by trait definition" in str(info.value)


def test_get_allows_mutation_in_place():
    registry = ResourceRegistry(Score(0))
    registry.get(Score).points += 10
    assert registry.provide(Score).points == 10


def test_with_prepends_and_leaves_original():
    base = ResourceRegistry(Score(1))
    time = Time(2)
    extended = base.with_(time)
    assert list(extended)[0] is time
    assert len(extended) == len(base) + 1
    assert not base.contains(Time)
    assert extended.contains(Time) and extended.contains(Score)


def test_with_duplicate_type_finds_newest_first():
    registry = ResourceRegistry(1).with_(2)
    assert registry.get(int) == 2
    assert list(registry) == [2, 1]


def test_len_iter_and_emptiness():
    empty = ResourceRegistry()
    assert empty.is_empty()
    assert list(empty) == []
    registry = ResourceRegistry("a", 1)
    assert not registry.is_empty()
    assert list(registry) == ["a", 1]


def test_insert_returns_previous():
    registry = MutableResourceRegistry()
    first = Score(1)
    second = Score(2)
    assert registry.insert(first) is None
    assert registry.insert(second) is first
    assert registry.get(Score) is second
    assert len(registry) == 1


def test_try_insert_behaves_like_insert():
    registry = MutableResourceRegistry(Time(1))
    replacement = Time(2)
    previous = registry.try_insert(replacement)
    assert previous.seconds == 1
    assert registry.provide(Time) is replacement


def test_remove_returns_resource():
    score = Score(4)
    registry = MutableResourceRegistry(score, "name")
    assert registry.remove(Score) is score
    assert not registry.contains(Score)
    assert registry.remove(Score) is None
    assert list(registry) == ["name"]


def test_clear_removes_everything():
    registry = MutableResourceRegistry(Score(1), Time(1))
    registry.clear()
    assert registry.is_empty()
    assert registry.get(Score) is None


def test_mutable_with_keeps_mutability():
    registry = MutableResourceRegistry(1).with_("x")
    assert isinstance(registry, MutableResourceRegistry)
    assert registry.remove(str) == "x"
    assert list(registry) == [1]
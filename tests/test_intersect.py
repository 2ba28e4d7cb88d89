from dataclasses import dataclass

import pytest

from lokit.intersect import (
    contains,
    contains_by,
    difference,
    every,
    every_by,
    intersect,
    none,
    none_by,
    some,
    some_by,
    symmetric_difference,
    union,
    without,
    without_by,
    without_empty,
    without_nth,
)


class MyStrings(list):
    pass


ALL_STRINGS = MyStrings(["", "foo", "bar"])


def test_contains():
    assert contains([0, 1, 2, 3, 4, 5], 5) is True
    assert contains([0, 1, 2, 3, 4, 5], 6) is False


def test_contains_by():
    a1 = [(1, "1"), (2, "2"), (3, "3")]
    assert contains_by(a1, lambda t: t[0] == 1 and t[1] == "2") is False
    assert contains_by(a1, lambda t: t[0] == 2 and t[1] == "2") is True
    a2 = ["aaa", "bbb", "ccc"]
    assert contains_by(a2, lambda t: t == "ccc") is True
    assert contains_by(a2, lambda t: t == "ddd") is False


@pytest.mark.parametrize(
    "subset, expected",
    [([0, 2], True), ([0, 6], False), ([-1, 6], False), ([], True)],
)
def test_every(subset, expected):
    assert every([0, 1, 2, 3, 4, 5], subset) is expected


def test_every_by():
    assert every_by([1, 2, 3, 4], lambda x: x < 5) is True
    assert every_by([1, 2, 3, 4], lambda x: x < 3) is False
    assert every_by([1, 2, 3, 4], lambda x: x < 0) is False
    assert every_by([], lambda x: x < 5) is True


@pytest.mark.parametrize(
    "subset, expected",
    [([0, 2], True), ([0, 6], True), ([-1, 6], False), ([], False)],
)
def test_some(subset, expected):
    assert some([0, 1, 2, 3, 4, 5], subset) is expected


def test_some_by():
    assert some_by([1, 2, 3, 4], lambda x: x < 5) is True
    assert some_by([1, 2, 3, 4], lambda x: x < 3) is True
    assert some_by([1, 2, 3, 4], lambda x: x < 0) is False
    assert some_by([], lambda x: x < 5) is False


@pytest.mark.parametrize(
    "subset, expected",
    [([0, 2], False), ([0, 6], False), ([-1, 6], True), ([], True)],
)
def test_none(subset, expected):
    assert none([0, 1, 2, 3, 4, 5], subset) is expected


def test_none_by():
    assert none_by([1, 2, 3, 4], lambda x: x < 5) is False
    assert none_by([1, 2, 3, 4], lambda x: x < 3) is False
    assert none_by([1, 2, 3, 4], lambda x: x < 0) is True
    assert none_by([], lambda x: x < 5) is True


def test_intersect():
    assert intersect([0, 1, 2, 3, 4, 5], [0, 2]) == [0, 2]
    assert intersect([0, 1, 2, 3, 4, 5], [0, 6]) == [0]
    assert intersect([0, 1, 2, 3, 4, 5], [-1, 6]) == []
    assert intersect([0, 6], [0, 1, 2, 3, 4, 5]) == [0]
    assert intersect([0, 6, 0], [0, 1, 2, 3, 4, 5]) == [0]


def test_intersect_preserves_type():
    result = intersect(ALL_STRINGS, ALL_STRINGS)
    assert type(result) is MyStrings
    assert result == ["", "foo", "bar"]


def test_difference():
    assert difference([0, 1, 2, 3, 4, 5], [0, 2, 6]) == ([1, 3, 4, 5], [6])
    assert difference([1, 2, 3, 4, 5], [0, 6]) == ([1, 2, 3, 4, 5], [0, 6])
    assert difference([0, 1, 2, 3, 4, 5], [0, 1, 2, 3, 4, 5]) == ([], [])


def test_difference_preserves_type():
    a, b = difference(ALL_STRINGS, ALL_STRINGS)
    assert type(a) is MyStrings and type(b) is MyStrings
    assert a == [] and b == []


def test_symmetric_difference():
    assert sorted(symmetric_difference([0, 1, 2, 3, 4, 5], [0, 2, 6])) == [1, 3, 4, 5, 6]
    assert sorted(symmetric_difference([1, 2, 3, 4, 5], [0, 6])) == [0, 1, 2, 3, 4, 5, 6]
    assert symmetric_difference([0, 1, 2, 3, 4, 5], [0, 1, 2, 3, 4, 5]) == []


def test_union():
    assert union([0, 1, 2, 3, 4, 5], [0, 2, 10]) == [0, 1, 2, 3, 4, 5, 10]
    assert union([0, 1, 2, 3, 4, 5], [6, 7]) == [0, 1, 2, 3, 4, 5, 6, 7]
    assert union([0, 1, 2, 3, 4, 5], []) == [0, 1, 2, 3, 4, 5]
    assert union([0, 1, 2], [0, 1, 2]) == [0, 1, 2]
    assert union([], []) == []


def test_union_three():
    assert union([0, 1, 2, 3, 4, 5], [0, 2, 10], [0, 1, 11]) == [0, 1, 2, 3, 4, 5, 10, 11]
    assert union([0, 1, 2, 3, 4, 5], [6, 7], [8, 9]) == list(range(10))
    assert union([0, 1, 2, 3, 4, 5], [], []) == [0, 1, 2, 3, 4, 5]
    assert union([0, 1, 2], [0, 1, 2], [0, 1, 2]) == [0, 1, 2]
    assert union([], [], []) == []


def test_union_preserves_type():
    result = union(ALL_STRINGS, ALL_STRINGS)
    assert type(result) is MyStrings
    assert result == ["", "foo", "bar"]


def test_without():
    assert without([0, 2, 10], 0, 1, 2, 3, 4, 5) == [10]
    assert without([0, 7], 0, 1, 2, 3, 4, 5) == [7]
    assert without([], 0, 1, 2, 3, 4, 5) == []
    assert without([0, 1, 2], 0, 1, 2) == []
    assert without([]) == []


def test_without_preserves_type():
    result = without(ALL_STRINGS, "")
    assert type(result) is MyStrings
    assert result == ["foo", "bar"]


@dataclass
class User:
    name: str = ""
    age: int = 0


def test_without_by():
    result = without_by(
        [User(name="nick"), User(name="peter")], lambda u: u.name, "nick", "lily"
    )
    assert result == [User(name="peter")]
    assert without_by([], lambda u: u.age, 1, 2, 3) == []
    assert without_by([], lambda u: u.name) == []


def test_without_empty():
    assert without_empty([0, 1, 2]) == [1, 2]
    assert without_empty([1, 2]) == [1, 2]
    assert without_empty([]) == []
    assert without_empty([None, "a", "", False, 3]) == ["a", 3]


def test_without_empty_preserves_type():
    result = without_empty(ALL_STRINGS)
    assert type(result) is MyStrings
    assert result == ["foo", "bar"]


def test_without_nth():
    assert without_nth([5, 6, 7], 1, 0) == [7]
    assert without_nth([1, 2]) == [1, 2]
    assert without_nth([]) == []
    assert without_nth([0, 1, 2, 3], -1, 4) == [0, 1, 2, 3]


def test_without_nth_preserves_type():
    result = without_nth(ALL_STRINGS)
    assert type(result) is MyStrings
    assert result == ["", "foo", "bar"]
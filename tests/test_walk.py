from dataclasses import dataclass
from typing import NamedTuple

import pytest

from firststeps.walk import walk


@dataclass
class Profile:
    age: int
    city: str


@dataclass
class Person:
    name: str
    profile: Profile


@dataclass
class OneName:
    name: str


@dataclass
class NameAndCity:
    name: str
    city: str


@dataclass
class NameAndAge:
    name: str
    age: int


class ProfileTuple(NamedTuple):
    age: int
    city: str


def collect(value):
    calls = []
    walk(value, calls.append)
    return calls


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (OneName("Livia"), ["Livia"]),
        (NameAndCity("Livia", "Niterói"), ["Livia", "Niterói"]),
        (NameAndAge("Livia", 22), ["Livia"]),
        (Person("Livia", Profile(22, "Niterói")), ["Livia", "Niterói"]),
        (
            [Profile(22, "Niterói"), Profile(23, "Porto Alegre")],
            ["Niterói", "Porto Alegre"],
        ),
        (
            (Profile(22, "Niterói"), Profile(23, "Porto Alegre")),
            ["Niterói", "Porto Alegre"],
        ),
        (ProfileTuple(22, "Niterói"), ["Niterói"]),
    ],
    ids=[
        "struct-one-string",
        "struct-two-strings",
        "struct-without-string",
        "nested",
        "slices",
        "arrays",
        "named-tuple",
    ],
)
def test_walk(value, expected):
    assert collect(value) == expected


def test_walk_maps():
    result = collect({"Foo": "Bar", "Baz": "Boz"})
    assert "Bar" in result
    assert "Boz" in result
    assert len(result) == 2


def test_walk_ignores_non_strings():
    assert collect(42) == []
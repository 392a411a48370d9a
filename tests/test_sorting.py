import random

import pytest

from algo.sorting import (
    Person,
    bubble_sort,
    bubble_sort_people,
    insertion_sort,
    insertion_sort_people,
)

_RNG = random.Random(20231)


def _perm(n):
    return _RNG.sample(range(n), n)


def _random_words():
    alphabet = "abcdefghijklmnopqrstuvwxyz"
    words = []
    for _ in range(1000):
        chars = []
        for _ in range(20):
            chars.append(_RNG.choice(alphabet))
            if _RNG.randrange(3) == 0:
                break
        words.append("".join(chars))
    return words


INT_CASES = {
    "sorted": [1, 2, 3, 4],
    "reverse": [10, 9, 8, 7, 6, 5, 4, 3, 2, 1],
    "duplicates": [3, 5, 3, 5, 3, 5],
    "random-len10": _perm(10),
    "random-len20": _perm(20),
    "random-len50": _perm(50),
    "random-len100": _perm(100),
    "random-len1000": _perm(1000),
    "empty": [],
}

STRING_CASES = {
    "sorted": ["apple", "banana", "cat", "dog"],
    "reverse": ["dog", "cat", "ball", "alphabet"],
    "duplicates": ["alphabet", "ball", "cat", "alphabet", "ball", "cat"],
    "similar": ["apple", "app", "alligator", "all", "all-in", "alphabet", "apoplexy", "apology", "apologize"],
    "random-1000-20": _random_words(),
}

PEOPLE_CASES = {
    "sorted": [
        Person(12, "Billy", "Tables"),
        Person(12, "Bobby", "Tables"),
        Person(12, "Jordan", "Tables"),
        Person(12, "Alex", "Zero"),
        Person(21, "Frank", "Smith"),
        Person(33, "Bob", "Smilesalot"),
        Person(45, "Johnny", "Testuser"),
        Person(65, "Harry", "Hippo"),
        Person(71, "Thomas", "Train"),
        Person(53, "Percy", "Engine"),
    ],
    "reverse": [
        Person(71, "Thomas", "Train"),
        Person(65, "Harry", "Hippo"),
        Person(53, "Percy", "Engine"),
        Person(45, "Johnny", "Testuser"),
        Person(33, "Bob", "Smilesalot"),
        Person(21, "Frank", "Smith"),
        Person(12, "Alex", "Zero"),
        Person(12, "Jordan", "Tables"),
        Person(12, "Bobby", "Tables"),
        Person(12, "Billy", "Tables"),
    ],
    "duplicates": [
        Person(53, "Percy", "Engine"),
        Person(45, "Johnny", "Testuser"),
        Person(12, "Billy", "Tables"),
        Person(65, "Harry", "Hippo"),
        Person(33, "Bob", "Smilesalot"),
        Person(12, "Bobby", "Tables"),
        Person(12, "Alex", "Zero"),
        Person(45, "Johnny", "Testuser"),
        Person(12, "Billy", "Tables"),
        Person(21, "Frank", "Smith"),
        Person(71, "Thomas", "Train"),
        Person(21, "Frank", "Smith"),
        Person(12, "Jordan", "Tables"),
    ],
}

PEOPLE_SORTS = [bubble_sort_people, insertion_sort_people]


@pytest.mark.parametrize("name", list(INT_CASES))
def test_bubble_sort_ints(name):
    items = list(INT_CASES[name])
    want = sorted(items)
    assert bubble_sort(items) is None
    assert items == want


@pytest.mark.parametrize("name", list(INT_CASES))
def test_insertion_sort_ints(name):
    items = list(INT_CASES[name])
    want = sorted(items)
    assert insertion_sort(items) is None
    assert items == want


@pytest.mark.parametrize("name", list(STRING_CASES))
def test_bubble_sort_strings(name):
    items = list(STRING_CASES[name])
    want = sorted(items)
    bubble_sort(items)
    assert items == want


@pytest.mark.parametrize("name", list(STRING_CASES))
def test_insertion_sort_strings(name):
    items = list(STRING_CASES[name])
    want = sorted(items)
    insertion_sort(items)
    assert items == want


def test_bubble_sort_long_sorted_list():
    items = list(range(1, 10001))
    bubble_sort(items)
    assert items == list(range(1, 10001))


def test_insertion_sort_long_sorted_list():
    items = list(range(1, 10001))
    insertion_sort(items)
    assert items == list(range(1, 10001))


@pytest.mark.parametrize("sort_fn", PEOPLE_SORTS)
@pytest.mark.parametrize("name", list(PEOPLE_CASES))
def test_sort_people(sort_fn, name):
    people = list(PEOPLE_CASES[name])
    want = sorted(people, key=Person.sort_key)
    sort_fn(people)
    assert people == want


def test_people_order_by_age_then_last_then_first():
    people = [Person(12, "Alex", "Zero"), Person(12, "Bobby", "Tables"), Person(12, "Billy", "Tables")]
    bubble_sort_people(people)
    assert people == [Person(12, "Billy", "Tables"), Person(12, "Bobby", "Tables"), Person(12, "Alex", "Zero")]


def test_insertion_people_order_by_age_then_last_then_first():
    people = [Person(12, "Alex", "Zero"), Person(12, "Bobby", "Tables"), Person(12, "Billy", "Tables")]
    insertion_sort_people(people)
    assert people == [Person(12, "Billy", "Tables"), Person(12, "Bobby", "Tables"), Person(12, "Alex", "Zero")]


def test_person_sort_key():
    assert Person(33, "Bob", "Smilesalot").sort_key() == (33, "Smilesalot", "Bob")


def test_bubble_sort_with_key_is_stable():
    items = [("b", 2), ("a", 1), ("c", 2), ("d", 1)]
    bubble_sort(items, key=lambda pair: pair[1])
    assert items == [("a", 1), ("d", 1), ("b", 2), ("c", 2)]


def test_insertion_sort_with_key_is_stable():
    items = [("b", 2), ("a", 1), ("c", 2), ("d", 1)]
    insertion_sort(items, key=lambda pair: pair[1])
    assert items == [("a", 1), ("d", 1), ("b", 2), ("c", 2)]


def test_bubble_sort_keeps_same_list_object():
    items = [3, 1, 2]
    alias = items
    bubble_sort(items)
    assert alias == [1, 2, 3]


def test_insertion_sort_keeps_same_list_object():
    items = [3, 1, 2]
    alias = items
    insertion_sort(items)
    assert alias == [1, 2, 3]
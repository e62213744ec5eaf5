"""Keyword matching of answers to course lessons."""

import pytest

from modules.assistant.catalog import COURSE_TOPICS, Topic, find_topic, match_topic

CATALOG = (
    Topic("Lesson 1 - Loops", ("for", "while")),
    Topic("Lesson 2 - Strings", ("substring", "while")),
    Topic("Lesson 3 - Objects", ("prototype",)),
)


def test_title_without_prefix_matches_case_insensitively() -> None:
    assert match_topic("Here is how STRINGS work", CATALOG).title == "Lesson 2 - Strings"


def test_keyword_matches() -> None:
    assert match_topic("Every object has a Prototype.", CATALOG).title == "Lesson 3 - Objects"


def test_first_topic_in_catalog_order_wins() -> None:
    # "while" is a keyword of both lesson 1 and lesson 2
    assert match_topic("use a while", CATALOG).title == "Lesson 1 - Loops"


def test_no_match_defaults_to_first_topic() -> None:
    assert match_topic("nothing relevant here", CATALOG) is CATALOG[0]
    assert match_topic("", CATALOG) is CATALOG[0]
    assert match_topic(None, CATALOG) is CATALOG[0]


def test_empty_catalog_is_an_error() -> None:
    with pytest.raises(ValueError):
        match_topic("anything", ())


def test_topic_name_strips_lesson_prefix() -> None:
    assert COURSE_TOPICS[4].name == "Array Methods in JavaScript"
    assert Topic("lesson 12 -  Async").name == "Async"
    assert Topic("No prefix here").name == "No prefix here"


def test_find_topic_by_title_or_name() -> None:
    assert find_topic("Lesson 3 - Objects", CATALOG) is CATALOG[2]
    assert find_topic("  objects ", CATALOG) is CATALOG[2]
    assert find_topic("Lesson 9 - Unknown", CATALOG) is None
    assert find_topic(None, CATALOG) is None

"""Course structure the assistant tags answers with.

Each topic is one lesson of the course: a title and the keywords it covers.
Order matters, keyword matching returns the first topic that hits.
"""

import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class Topic:
    title: str
    keywords: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        """Title without the ``Lesson N -`` prefix."""
        return LESSON_PREFIX.sub("", self.title).strip()


LESSON_PREFIX = re.compile(r"^\s*lesson\s+\d+\s*[-–—]\s*", re.IGNORECASE)

COURSE_TOPICS: Tuple[Topic, ...] = (
    Topic(
        "Lesson 01 - Introduction to Programming",
        ("programming basics", "algorithm", "programming logic", "pseudocode"),
    ),
    Topic(
        "Lesson 02 - Variables and Data Types in JavaScript",
        ("var, let and const", "variable", "primitive type", "data type", "typeof", "operator"),
    ),
    Topic(
        "Lesson 03 - Control Structures",
        ("if/else", "else if", "switch", "for loop", "while loop", "do-while", "break", "continue"),
    ),
    Topic(
        "Lesson 04 - Functions in JavaScript",
        ("function declaration", "arrow function", "parameter", "return value", "callback"),
    ),
    Topic(
        "Lesson 05 - Array Methods in JavaScript",
        ("map()", "filter()", "reduce()", "forEach()", "find()", "findIndex()"),
    ),
)


def describe_catalog(catalog: Sequence[Topic]) -> str:
    return "\n".join(f"{t.title}: {', '.join(t.keywords)}" for t in catalog)


def find_topic(label: Optional[str], catalog: Sequence[Topic]) -> Optional[Topic]:
    """Exact (case-insensitive) lookup by full title or by the title without its prefix."""
    if not label:
        return None
    wanted = label.strip().lower()
    for topic in catalog:
        if wanted in (topic.title.lower(), topic.name.lower()):
            return topic
    return None


def match_topic(text: Optional[str], catalog: Sequence[Topic]) -> Topic:
    """Best-effort lesson for free text.

    A topic matches when its prefix-less title or any keyword occurs in
    ``text`` as a case-insensitive substring. First match in catalog order
    wins; with no match the first topic is returned.
    """
    if not catalog:
        raise ValueError("topic catalog is empty")

    haystack = (text or "").lower()
    for topic in catalog:
        needles = (topic.name,) + tuple(topic.keywords)
        if any(n and n.lower() in haystack for n in needles):
            return topic
    return catalog[0]

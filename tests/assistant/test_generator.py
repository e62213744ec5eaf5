"""AnswerGenerator against a stubbed OpenAI client."""

import json
from types import SimpleNamespace

import pytest

from modules.assistant.catalog import COURSE_TOPICS
from modules.assistant.generator import KEYWORD, STRUCTURED, AnswerGenerationError, AnswerGenerator


class StubCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.requests = []

    def create(self, **kwargs):
        self.requests.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _generator(strategy=STRUCTURED, **stub_kwargs):
    completions = StubCompletions(**stub_kwargs)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return AnswerGenerator(client=client, model="test-model", strategy=strategy), completions


def test_structured_answer_uses_emitted_lesson() -> None:
    content = json.dumps({"answer": "Use filter().", "lesson": "Lesson 05 - Array Methods in JavaScript"})
    gen, completions = _generator(content=content)

    result = gen.ask("How do I remove items from an array?", COURSE_TOPICS)

    assert result.answer == "Use filter()."
    assert result.lesson == "Lesson 05 - Array Methods in JavaScript"
    request = completions.requests[0]
    assert request["model"] == "test-model"
    assert request["response_format"] == {"type": "json_object"}
    assert request["messages"][1] == {"role": "user", "content": "How do I remove items from an array?"}
    # the catalog travels in the system prompt
    assert all(t.title in request["messages"][0]["content"] for t in COURSE_TOPICS)


def test_structured_lesson_label_is_normalized() -> None:
    content = json.dumps({"answer": "...", "lesson": "control structures"})
    gen, _ = _generator(content=content)
    assert gen.ask("When to use switch?").lesson == "Lesson 03 - Control Structures"


def test_structured_missing_lesson_falls_back_to_matching() -> None:
    content = json.dumps({"answer": "An arrow function has no own this."})
    gen, _ = _generator(content=content)
    assert gen.ask("What is =>?").lesson == "Lesson 04 - Functions in JavaScript"


def test_keyword_strategy_matches_locally() -> None:
    gen, completions = _generator(strategy=KEYWORD, content="Call reduce() with an accumulator.")

    result = gen.ask("How do I sum an array?", COURSE_TOPICS)

    assert result.answer == "Call reduce() with an accumulator."
    assert result.lesson == "Lesson 05 - Array Methods in JavaScript"
    assert "response_format" not in completions.requests[0]


@pytest.mark.parametrize(
    "stub",
    [
        {"error": RuntimeError("quota exceeded")},
        {"error": TimeoutError()},
        {"content": None},
        {"content": "   "},
        {"content": "not json"},
        {"content": json.dumps(["answer"])},
        {"content": json.dumps({"lesson": "Lesson 01 - Introduction to Programming"})},
    ],
)
def test_upstream_problems_become_one_generic_error(stub, caplog) -> None:
    gen, _ = _generator(**stub)

    with pytest.raises(AnswerGenerationError) as exc:
        gen.ask("What is X?")

    assert str(exc.value) == "Failed to process your question. Please try again later."
    assert exc.value.status_code == 500
    assert "Answer generation failed" in caplog.text


def test_single_attempt_no_retry() -> None:
    gen, completions = _generator(error=RuntimeError("boom"))
    with pytest.raises(AnswerGenerationError):
        gen.ask("What is X?")
    assert len(completions.requests) == 1


def test_unknown_strategy_rejected() -> None:
    with pytest.raises(ValueError):
        AnswerGenerator(client=object(), strategy="telepathy")


def test_from_config_reads_settings() -> None:
    gen = AnswerGenerator.from_config(
        {"OPENAI_API_KEY": "sk-test", "OPENAI_MODEL": "gpt-4o-mini", "ANSWER_STRATEGY": KEYWORD, "OPENAI_TIMEOUT": 30.0}
    )
    assert (gen.api_key, gen.model, gen.strategy, gen.timeout) == ("sk-test", "gpt-4o-mini", KEYWORD, 30.0)

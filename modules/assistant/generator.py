"""Answer generator: relays a student's question to the OpenAI chat API.

Two strategies:

- ``structured``: the model answers with JSON ``{"answer", "lesson"}`` and
  picks the lesson itself (single round trip, preferred).
- ``keyword``: the model answers in free text and the lesson is matched
  locally against the catalog keywords (see ``catalog.match_topic``).

Any upstream problem is logged here and surfaced to the caller as one generic
``AnswerGenerationError``. Nothing is retried.
"""

import json
import logging
from dataclasses import dataclass
from typing import Sequence

from openai import OpenAI

from errors import UpstreamFailure

from .catalog import COURSE_TOPICS, Topic, describe_catalog, find_topic, match_topic

logger = logging.getLogger(__name__)

STRUCTURED = "structured"
KEYWORD = "keyword"
STRATEGIES = (STRUCTURED, KEYWORD)

DEFAULT_MODEL = "gpt-4o"


class AnswerGenerationError(UpstreamFailure):
    message = "Failed to process your question. Please try again later."


@dataclass
class Answer:
    answer: str
    lesson: str


_BASE_PROMPT = """You are an assistant for a JavaScript programming course.
Answer the students' questions clearly and objectively.

Course structure:
{catalog}
"""

_STRUCTURED_PROMPT = _BASE_PROMPT + """
IMPORTANT: after answering, identify the ONE lesson of the course where this content is covered.

Reply with a JSON object with the following fields:
{{
  "answer": "your detailed answer",
  "lesson": "full title of the most relevant lesson (e.g. {example})"
}}
"""


class AnswerGenerator:
    def __init__(self, client=None, *, api_key=None, model=DEFAULT_MODEL, strategy=STRUCTURED, timeout=None):
        if strategy not in STRATEGIES:
            raise ValueError(f"unknown answer strategy: {strategy!r}")
        self._client = client
        self.api_key = api_key
        self.model = model
        self.strategy = strategy
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "AnswerGenerator":
        return cls(
            api_key=config.get("OPENAI_API_KEY") or None,
            model=config.get("OPENAI_MODEL", DEFAULT_MODEL),
            strategy=config.get("ANSWER_STRATEGY", STRUCTURED),
            timeout=config.get("OPENAI_TIMEOUT"),
        )

    @property
    def client(self):
        # built lazily: a missing API key fails the request, not app startup
        if self._client is None:
            kwargs = {"api_key": self.api_key, "max_retries": 0}
            if self.timeout:
                kwargs["timeout"] = self.timeout
            self._client = OpenAI(**kwargs)
        return self._client

    def ask(self, question: str, catalog: Sequence[Topic] = COURSE_TOPICS) -> Answer:
        try:
            if self.strategy == STRUCTURED:
                return self._ask_structured(question, catalog)
            return self._ask_free_text(question, catalog)
        except Exception:
            logger.exception("Answer generation failed (model %s, strategy %s)", self.model, self.strategy)
            raise AnswerGenerationError()

    # ---------- strategies ----------

    def _ask_structured(self, question: str, catalog: Sequence[Topic]) -> Answer:
        prompt = _STRUCTURED_PROMPT.format(catalog=describe_catalog(catalog), example=catalog[-1].title)
        content = self._complete(prompt, question, json_mode=True)

        data = json.loads(content)
        if not isinstance(data, dict):
            raise ValueError("generator returned a non-object JSON payload")
        answer = data.get("answer")
        if not isinstance(answer, str) or not answer.strip():
            raise ValueError("generator response has no answer")

        label = data.get("lesson")
        label = label.strip() if isinstance(label, str) else ""
        topic = find_topic(label, catalog)
        if topic is None:
            # label missing or outside the catalog
            topic = match_topic(f"{label}\n{answer}", catalog)
        return Answer(answer=answer, lesson=topic.title)

    def _ask_free_text(self, question: str, catalog: Sequence[Topic]) -> Answer:
        prompt = _BASE_PROMPT.format(catalog=describe_catalog(catalog))
        answer = self._complete(prompt, question, json_mode=False)
        return Answer(answer=answer, lesson=match_topic(answer, catalog).title)

    def _complete(self, system_prompt: str, question: str, json_mode: bool) -> str:
        kwargs = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": question},
            ],
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        response = self.client.chat.completions.create(**kwargs)
        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise ValueError("generator returned an empty response")
        return content

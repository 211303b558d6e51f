from __future__ import annotations

import pytest

from quickfix.fixes.parsing import (
    CompleteFix,
    PartialFix,
    UnparsedFix,
    parse_completion,
    strip_code_fences,
)
from quickfix.fixes.prompts import SYSTEM_PROMPT, compose_prompt


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('```json\n{"a": 1}\n```', '{"a": 1}'),
        ('```\n{"a": 1}\n```', '{"a": 1}'),
        ('  {"a": 1}  ', '{"a": 1}'),
        ('Here you go:\n```json\n{"a": 1}```', 'Here you go:\n{"a": 1}'),
    ],
)
def test_strip_code_fences(raw: str, expected: str):
    assert strip_code_fences(raw) == expected


def test_complete_output_keeps_all_fields():
    outcome = parse_completion(
        '{"title": "T", "summary": "S", "steps": ["a"], "tips": ["t"], '
        '"timeEstimate": "5 minutes", "difficulty": "Medium"}'
    )

    assert isinstance(outcome, CompleteFix)
    result = outcome.result
    assert result.title == "T"
    assert result.summary == "S"
    assert result.steps == ["a"]
    assert result.tips == ["t"]
    assert result.time_estimate == "5 minutes"
    assert result.difficulty == "medium"
    assert result.content is None


def test_unknown_difficulty_is_normalized():
    outcome = parse_completion(
        '{"title": "T", "summary": "S", "steps": ["a"], "difficulty": "trivial"}'
    )

    assert isinstance(outcome, CompleteFix)
    assert outcome.result.difficulty == "unknown"


def test_non_json_is_unparsed():
    outcome = parse_completion("Sure! First, turn it off and on again.")

    assert isinstance(outcome, UnparsedFix)
    assert outcome.raw_text == "Sure! First, turn it off and on again."


def test_json_array_is_unparsed():
    outcome = parse_completion('["a", "b"]')

    assert isinstance(outcome, UnparsedFix)
    assert "list" in outcome.error


def test_missing_fields_are_listed_in_order():
    raw = '{"steps": ["a"], "tips": "not a list"}'
    outcome = parse_completion(raw)

    assert isinstance(outcome, PartialFix)
    assert outcome.missing == ["title", "summary"]
    assert outcome.result.title == "QuickFix Response"
    assert outcome.result.summary == "Generated response"
    assert outcome.result.steps == ["a"]
    assert outcome.result.tips == []
    assert outcome.result.content == raw


def test_empty_or_mistyped_required_fields_count_as_missing():
    outcome = parse_completion('{"title": "", "summary": 3, "steps": {}}')

    assert isinstance(outcome, PartialFix)
    assert outcome.missing == ["title", "summary", "steps"]


def test_non_string_steps_are_coerced():
    outcome = parse_completion('{"title": "T", "summary": "S", "steps": ["a", 2]}')

    assert isinstance(outcome, CompleteFix)
    assert outcome.result.steps == ["a", "2"]


def test_payload_uses_camel_case_and_omits_empty_content():
    outcome = parse_completion('{"title": "T", "summary": "S", "steps": ["a"]}')

    assert isinstance(outcome, CompleteFix)
    assert outcome.result.to_payload() == {
        "title": "T",
        "summary": "S",
        "steps": ["a"],
        "tips": [],
        "timeEstimate": "Unknown",
        "difficulty": "unknown",
    }


def test_compose_prompt_interpolates_verbatim():
    prompt = compose_prompt('Say "hi" {literally}')

    assert prompt == f'{SYSTEM_PROMPT}\n\nUser: Say "hi" {{literally}}\nResponse:'


def test_empty_steps_list_is_complete():
    outcome = parse_completion('{"title": "T", "summary": "S", "steps": []}')

    assert isinstance(outcome, CompleteFix)
    assert outcome.result.steps == []


def test_deeply_nested_output_is_unparsed():
    raw = "[" * 200000

    outcome = parse_completion(raw)

    assert isinstance(outcome, UnparsedFix)
    assert outcome.raw_text == raw
    assert outcome.error

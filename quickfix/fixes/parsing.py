from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Union

from .schemas import (
    DEFAULT_DIFFICULTY,
    DEFAULT_SUMMARY,
    DEFAULT_TIME_ESTIMATE,
    DEFAULT_TITLE,
    Difficulty,
    FixResult,
)

REQUIRED_FIELDS = ("title", "summary", "steps")
KNOWN_DIFFICULTIES: tuple[Difficulty, ...] = ("easy", "medium", "hard")

_FENCE_RE = re.compile(r"```(?:json)?\n?")


@dataclass(slots=True)
class CompleteFix:
    result: FixResult


@dataclass(slots=True)
class PartialFix:
    result: FixResult
    missing: list[str]


@dataclass(slots=True)
class UnparsedFix:
    raw_text: str
    error: str


ParseOutcome = Union[CompleteFix, PartialFix, UnparsedFix]


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", text or "").strip()


def parse_completion(text: str) -> ParseOutcome:
    """Parse model output into a FixResult, degrading instead of failing.

    Output that is not a JSON object yields ``UnparsedFix``. An object that
    lacks any of ``title``, ``summary`` or ``steps`` (absent, of the wrong
    type, or an empty string) yields ``PartialFix`` with defaults filled in
    and the raw text attached as ``content``.
    """
    try:
        parsed = json.loads(strip_code_fences(text))
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError, oversized integer literals and runaway nesting.
        return UnparsedFix(raw_text=text, error=str(exc) or type(exc).__name__)

    if not isinstance(parsed, dict):
        return UnparsedFix(
            raw_text=text,
            error=f"Expected a JSON object, got {type(parsed).__name__}",
        )

    missing = _missing_fields(parsed)
    result = FixResult(
        title=_text_field(parsed, "title") or DEFAULT_TITLE,
        summary=_text_field(parsed, "summary") or DEFAULT_SUMMARY,
        steps=_string_list(parsed.get("steps")),
        tips=_string_list(parsed.get("tips")),
        time_estimate=_text_field(parsed, "timeEstimate") or DEFAULT_TIME_ESTIMATE,
        difficulty=_difficulty(parsed.get("difficulty")),
    )

    if missing:
        result.content = text
        return PartialFix(result=result, missing=missing)

    return CompleteFix(result=result)


def _missing_fields(parsed: dict[str, Any]) -> list[str]:
    missing = []
    for name in REQUIRED_FIELDS:
        value = parsed.get(name)
        if name == "steps":
            if not isinstance(value, list):
                missing.append(name)
        elif not isinstance(value, str) or not value:
            missing.append(name)
    return missing


def _text_field(parsed: dict[str, Any], name: str) -> str | None:
    value = parsed.get(name)
    if isinstance(value, str) and value:
        return value
    return None


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, str) else json.dumps(item) for item in value]


def _difficulty(value: Any) -> Difficulty:
    if isinstance(value, str):
        normalized = value.strip().lower()
        for known in KNOWN_DIFFICULTIES:
            if normalized == known:
                return known
    return DEFAULT_DIFFICULTY

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Difficulty = Literal["easy", "medium", "hard", "unknown"]

DEFAULT_TITLE = "QuickFix Response"
DEFAULT_SUMMARY = "Generated response"
DEFAULT_TIME_ESTIMATE = "Unknown"
DEFAULT_DIFFICULTY: Difficulty = "unknown"


class FixResult(BaseModel):
    title: str = DEFAULT_TITLE
    summary: str = DEFAULT_SUMMARY
    steps: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)
    time_estimate: str = Field(default=DEFAULT_TIME_ESTIMATE, alias="timeEstimate")
    difficulty: Difficulty = DEFAULT_DIFFICULTY
    # Raw model output, only kept when the output could not be fully validated.
    content: str | None = None

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class GeneratePayload(BaseModel):
    prompt: str | None = None

    model_config = ConfigDict(extra="allow")

from __future__ import annotations

from dataclasses import dataclass

MODEL_ID = "gemini-2.5-flash-preview-05-20"


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    model_id: str = MODEL_ID
    temperature: float = 0.1
    top_p: float = 0.8
    top_k: int = 40
    max_output_tokens: int = 1024


DEFAULT_GENERATION_CONFIG = GenerationConfig()


@dataclass(slots=True)
class RawCompletion:
    text: str
    block_reason: str | None = None


@dataclass(slots=True)
class GenerationRequest:
    method: str
    prompt: str | None
    provided_credential: str | None

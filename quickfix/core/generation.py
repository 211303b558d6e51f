from __future__ import annotations

from typing import Any

import google.generativeai as genai

from .types import GenerationConfig, RawCompletion

# Finish reasons that end a candidate without it being withheld.
NON_BLOCKING_FINISH_REASONS = frozenset(
    {"FINISH_REASON_UNSPECIFIED", "STOP", "MAX_TOKENS"}
)


async def generate_completion(
    prompt: str,
    config: GenerationConfig,
    api_key: str,
) -> RawCompletion:
    model = _create_model(config, api_key)
    response = await model.generate_content_async(prompt)

    text = _response_text(response)
    block_reason = _block_reason(response)
    if not text and block_reason is None:
        block_reason = _finish_block_reason(response)

    return RawCompletion(text=text, block_reason=block_reason)


def _create_model(config: GenerationConfig, api_key: str) -> "genai.GenerativeModel":
    genai.configure(api_key=api_key)

    return genai.GenerativeModel(
        model_name=config.model_id,
        generation_config=genai.GenerationConfig(
            temperature=config.temperature,
            top_p=config.top_p,
            top_k=config.top_k,
            max_output_tokens=config.max_output_tokens,
        ),
    )


def _response_text(response: Any) -> str:
    # The client raises ValueError when the response carries no text parts,
    # which is how blocked prompts surface.
    try:
        text = response.text
    except ValueError:
        return ""
    return text or ""


def _block_reason(response: Any) -> str | None:
    feedback = getattr(response, "prompt_feedback", None)
    reason = getattr(feedback, "block_reason", None)
    if not reason:
        return None
    return getattr(reason, "name", str(reason))


def _finish_block_reason(response: Any) -> str | None:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None

    reason = getattr(candidates[0], "finish_reason", None)
    if not reason:
        return None

    name = getattr(reason, "name", str(reason))
    if name in NON_BLOCKING_FINISH_REASONS:
        return None
    return name

"""
Quick chat LM configuration.

Uses Gemini Flash Lite through DSPy for short, low-latency answers.
"""

from typing import Optional

import dspy

from .credentials import require_api_key

CHAT_CONSTANTS = {
    "model": "gemini/gemini-2.5-flash-lite",
    "temperature": 0.7,  # Creative but factual
    "max_tokens": 100,  # Keep responses short
}

CHAT_SYSTEM_INSTRUCTION = (
    "You are a friendly, enthusiastic AI assistant that provides short, fun, "
    "and easy-to-understand facts or answers for children."
)

CHAT_FALLBACK_ANSWER = "Oops! I tried to think of a fun fact, but my wires got a bit tangled!"


def get_quick_lm(api_key: Optional[str]) -> dspy.LM:
    """
    Get the LM used for quick answers.

    Caching is off: every question goes to the model.
    """
    return dspy.LM(
        CHAT_CONSTANTS["model"],
        api_key=require_api_key(api_key),
        temperature=CHAT_CONSTANTS["temperature"],
        max_tokens=CHAT_CONSTANTS["max_tokens"],
        cache=False,
    )

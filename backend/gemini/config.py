"""
Gemini model configuration.

Catalog order is highest capability/cost first, oldest universal fallback last.
The prioritizer permutes this catalog per request; see gemini/priority.py.

Override the long/short conversation boundary via env var (e.g. in .env):
  GEMINI_CHAR_THRESHOLD=6000
"""

import os

from google.genai import types

MODEL_CATALOG = (
    "gemini-2.5-pro",           # newest, most capable
    "gemini-2.5-flash",         # newest, fastest
    "gemini-1.5-pro-latest",    # previous-gen capable fallback
    "gemini-1.5-flash-latest",  # previous-gen fast fallback
    "gemini-pro",               # oldest, always tried last
)

# Conversations longer than this (in characters) prioritize Pro models
CHAR_THRESHOLD = int(os.environ.get("GEMINI_CHAR_THRESHOLD", "4000"))

# ─── Per-attempt limits ────────────────────────────────────────────────

ATTEMPT_TIMEOUT_SECONDS = 45
RETRY_BACKOFF_SECONDS = 0.5

# ─── Generation + safety ───────────────────────────────────────────────

TEMPERATURE = 0.7
MAX_OUTPUT_TOKENS = 8192

SAFETY_SETTINGS = [
    types.SafetySetting(category=category, threshold=types.HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE)
    for category in (
        types.HarmCategory.HARM_CATEGORY_HARASSMENT,
        types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
        types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
        types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
    )
]

GENERATION_CONFIG = types.GenerateContentConfig(
    temperature=TEMPERATURE,
    max_output_tokens=MAX_OUTPUT_TOKENS,
    safety_settings=SAFETY_SETTINGS,
)

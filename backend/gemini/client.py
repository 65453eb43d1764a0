"""
Lazy google-genai client.

The client is cached per API key so a .env hot-reload picks up a new key
without restarting the process. Returns None if GOOGLE_API_KEY is not set;
callers treat that as a server configuration error.
"""

import os
from typing import Optional

from google import genai

API_KEY_ENV = "GOOGLE_API_KEY"

_client: Optional[genai.Client] = None
_configured_key: Optional[str] = None


def get_client() -> Optional[genai.Client]:
    global _client, _configured_key
    api_key = os.environ.get(API_KEY_ENV)
    if not api_key:
        return None
    if api_key != _configured_key:
        _client = genai.Client(api_key=api_key)
        _configured_key = api_key
    return _client

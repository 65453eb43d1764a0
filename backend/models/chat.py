from google.genai import types
from pydantic import BaseModel, Field, field_validator


class ChatRequest(BaseModel):
    # Gemini REST-shaped turns: {"role": "user", "parts": [{"text": "..."}]}
    messages: list[types.Content] = Field(min_length=1)

    @field_validator("messages")
    @classmethod
    def _every_message_has_parts(cls, messages: list[types.Content]) -> list[types.Content]:
        for i, message in enumerate(messages):
            if not message.parts:
                raise ValueError(f"message {i} has no parts")
        return messages

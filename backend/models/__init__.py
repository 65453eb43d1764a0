from models.chat import ChatRequest

__all__ = ["ChatRequest"]

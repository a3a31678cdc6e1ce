from .token_store import InMemoryTokenStore

__all__ = ["InMemoryTokenStore"]

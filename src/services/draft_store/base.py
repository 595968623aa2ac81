import re
from abc import ABC, abstractmethod

DRAFT_KEY = re.compile(r"^[A-Za-z0-9_-]+$")


def check_key(key: str) -> str:
    """Raise ValueError unless `key` is a safe draft identifier."""
    if not DRAFT_KEY.match(key or ""):
        raise ValueError(f"Invalid draft key: {key!r}")
    return key


class DraftStore(ABC):
    """Key-value storage for in-progress order forms."""

    @abstractmethod
    def save(self, key: str, form: dict) -> None:
        """Store a form state under `key`, replacing any previous draft."""
        ...

    @abstractmethod
    def load(self, key: str) -> dict | None:
        """Return the draft saved under `key`, or None."""
        ...

    @abstractmethod
    def clear(self, key: str) -> None:
        """Remove the draft under `key`. Clearing a missing key is a no-op."""
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        """List saved draft keys, sorted."""
        ...

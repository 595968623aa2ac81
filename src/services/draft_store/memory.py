import copy

from src.services.draft_store.base import DraftStore, check_key


class MemoryDraftStore(DraftStore):
    """In-process draft store. Captures all calls for inspection."""

    def __init__(self, drafts: dict[str, dict] | None = None):
        self._drafts: dict[str, dict] = copy.deepcopy(drafts or {})
        self._calls: list[dict] = []

    def save(self, key: str, form: dict) -> None:
        check_key(key)
        self._calls.append({"action": "save", "key": key})
        self._drafts[key] = copy.deepcopy(form)

    def load(self, key: str) -> dict | None:
        check_key(key)
        self._calls.append({"action": "load", "key": key})
        draft = self._drafts.get(key)
        return copy.deepcopy(draft) if draft is not None else None

    def clear(self, key: str) -> None:
        check_key(key)
        self._calls.append({"action": "clear", "key": key})
        self._drafts.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._drafts)

    # --- Inspection API ---

    @property
    def all_calls(self) -> list[dict]:
        return list(self._calls)

    def reset(self):
        self._calls.clear()
        self._drafts.clear()

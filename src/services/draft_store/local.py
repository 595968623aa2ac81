import json
import tempfile
from pathlib import Path

from src.services.draft_store.base import DraftStore, check_key


class LocalDraftStore(DraftStore):
    """Stores each draft as `<drafts_dir>/<key>.json`.

    The directory is created on first save.
    """

    def __init__(self, drafts_dir: str | Path):
        self._base_dir = Path(drafts_dir)

    def _path(self, key: str) -> Path:
        return self._base_dir / f"{check_key(key)}.json"

    def save(self, key: str, form: dict) -> None:
        path = self._path(key)
        self._base_dir.mkdir(parents=True, exist_ok=True)
        # Written to a temp file in the same directory, then swapped in.
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self._base_dir, suffix=".tmp", delete=False
        ) as f:
            tmp_path = Path(f.name)
            try:
                json.dump(form, f, ensure_ascii=False, indent=2)
            except Exception:
                f.close()
                tmp_path.unlink(missing_ok=True)
                raise
        tmp_path.replace(path)

    def load(self, key: str) -> dict | None:
        path = self._path(key)
        if not path.exists():
            return None
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    def clear(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def keys(self) -> list[str]:
        if not self._base_dir.exists():
            return []
        return sorted(path.stem for path in self._base_dir.glob("*.json"))

import yaml
from pathlib import Path
from typing import Optional
from src.services.label_store.base import LabelStore


class LocalLabelStore(LabelStore):
    """Loads label phrases from local YAML files organized by language.

    Directory structure:
        labels/
        ├── es/
        │   └── capture.yaml
        └── en/
            └── capture.yaml

    YAML format (each key is a block name, each value a list of phrases):
        recipient:
          - Nombre y número
          - Destinatario
        delivery:
          - Fecha y hora de entrega
    """

    def __init__(self, labels_dir: str | Path, language: str = "es", fallback_language: str = "es"):
        self._base_dir = Path(labels_dir)
        self._language = language
        self._fallback_language = fallback_language
        self._cache: dict[str, dict] = {}

        if not self._base_dir.exists():
            raise FileNotFoundError(f"Labels directory not found: {self._base_dir}")

    @property
    def language(self) -> str:
        return self._language

    @property
    def fallback_language(self) -> str:
        return self._fallback_language

    def get(self, block: str) -> list[str]:
        # Try current language first, then fallback
        for lang in [self._language, self._fallback_language]:
            data = self._load(lang)
            if data and data.get(block):
                return sorted(data[block], key=len, reverse=True)
        return []

    def list_blocks(self) -> list[str]:
        blocks = set()
        for lang in [self._language, self._fallback_language]:
            data = self._load(lang)
            if data:
                blocks.update(name for name, phrases in data.items() if phrases)
        return sorted(blocks)

    def _load(self, lang: str) -> Optional[dict]:
        if lang in self._cache:
            return self._cache[lang]

        path = self._base_dir / lang / "capture.yaml"
        if not path.exists():
            return None

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        self._cache[lang] = data
        return data

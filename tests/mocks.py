from src.services.label_store.base import LabelStore

KEYCAPS = ["1️⃣", "2️⃣", "3️⃣", "4️⃣"]

SPANISH_LABELS = {
    "recipient": ["Nombre y número"],
    "delivery": ["Fecha y hora de entrega"],
    "dedication": ["Mensaje o dedicatoria para la tarjeta"],
}


def numbered_text(*blocks: str, preamble: str = "") -> str:
    """Join blocks behind keycap markers, one per line."""
    lines = [preamble] if preamble else []
    lines += [f"{KEYCAPS[i]} {block}" for i, block in enumerate(blocks)]
    return "\n".join(lines)


class FakeLabelStore(LabelStore):
    """Serves label phrases from a dict for testing."""

    def __init__(self, labels: dict[str, list[str]] | None = None, language: str = "es"):
        self._labels = labels if labels is not None else dict(SPANISH_LABELS)
        self._language = language

    @property
    def language(self) -> str:
        return self._language

    @property
    def fallback_language(self) -> str:
        return self._language

    def get(self, block: str) -> list[str]:
        return list(self._labels.get(block, []))

    def list_blocks(self) -> list[str]:
        return sorted(self._labels)

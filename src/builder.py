"""CaptureBuilder: wires services and the parser based on AppConfig."""
from src.config import AppConfig
from src.parser import QuickCaptureParser
from src.services.label_store.base import LabelStore, LABELED_BLOCKS
from src.services.label_store.local import LocalLabelStore
from src.services.draft_store.base import DraftStore
from src.services.draft_store.local import LocalDraftStore
from src.services.draft_store.memory import MemoryDraftStore


class CaptureBuilder:
    """Builds the quick-capture parser and its services from config."""

    def __init__(self, config: AppConfig):
        self.config = config

        # Instantiate services
        self._label_store = self._build_label_store()
        self._draft_store = self._build_draft_store()

    @property
    def label_store(self) -> LabelStore:
        return self._label_store

    @property
    def draft_store(self) -> DraftStore:
        return self._draft_store

    def build(self) -> QuickCaptureParser:
        """Build a parser with the configured format, labels and timezone."""
        labels = {block: self._label_store.get(block) for block in LABELED_BLOCKS}
        return QuickCaptureParser(
            capture_format=self.config.capture_format,
            labels=labels,
            timezone=self.config.timezone,
        )

    def _build_label_store(self) -> LabelStore:
        if self.config.label_store == "local":
            return LocalLabelStore(
                labels_dir=self.config.labels_dir,
                language=self.config.label_language,
                fallback_language=self.config.label_fallback_language,
            )
        raise ValueError(f"Unknown label store: {self.config.label_store}")

    def _build_draft_store(self) -> DraftStore:
        if self.config.draft_store == "memory":
            return MemoryDraftStore()
        if self.config.draft_store == "local":
            return LocalDraftStore(self.config.drafts_dir)
        raise ValueError(f"Unknown draft store: {self.config.draft_store}")

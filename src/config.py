from pathlib import Path

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Parser
    capture_format: str = "numbered"  # "numbered" | "labeled"
    timezone: str = ""  # IANA name for the default "today"; empty = system local time

    # Label store
    label_store: str = "local"
    labels_dir: str = "labels"
    label_language: str = "es"
    label_fallback_language: str = "es"

    # Drafts
    draft_store: str = "local"  # "local" | "memory"
    drafts_dir: str = "drafts"

    # Logging
    log_level: str = "INFO"

    # Opik
    opik_workspace: str = "amore-mio"
    opik_project: str = "quick-capture"
    opik_api_key: str | None = None

    @classmethod
    def from_yaml(cls, path: str | Path) -> "AppConfig":
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    @classmethod
    def for_eval(cls) -> "AppConfig":
        """Pre-configured for evaluation: in-memory drafts, Spanish labels."""
        return cls(
            draft_store="memory",
            label_store="local",
            labels_dir="labels",
            opik_project="quick-capture-eval",
        )

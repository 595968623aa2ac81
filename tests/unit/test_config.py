"""Unit tests for AppConfig."""
from pathlib import Path

import pytest

from src.config import AppConfig

REPO_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Prevent real env vars and .env file from leaking into tests."""
    monkeypatch.chdir(tmp_path)
    for key in ("CAPTURE_FORMAT", "TIMEZONE", "DRAFT_STORE", "LABEL_LANGUAGE", "OPIK_API_KEY", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


class TestAppConfig:
    def test_creates_with_defaults(self):
        config = AppConfig()
        assert config.capture_format == "numbered"
        assert config.timezone == ""
        assert config.label_store == "local"
        assert config.labels_dir == "labels"
        assert config.label_language == "es"
        assert config.label_fallback_language == "es"
        assert config.draft_store == "local"
        assert config.drafts_dir == "drafts"
        assert config.log_level == "INFO"
        assert config.opik_project == "quick-capture"

    def test_from_yaml(self, tmp_path):
        yaml_content = """\
capture_format: labeled
timezone: America/Guayaquil
label_language: en
label_fallback_language: es
draft_store: memory
log_level: DEBUG
opik_project: my-project
"""
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text(yaml_content)

        config = AppConfig.from_yaml(yaml_file)
        assert config.capture_format == "labeled"
        assert config.timezone == "America/Guayaquil"
        assert config.label_language == "en"
        assert config.draft_store == "memory"
        assert config.log_level == "DEBUG"
        assert config.opik_project == "my-project"

    def test_from_empty_yaml_uses_defaults(self, tmp_path):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("")
        config = AppConfig.from_yaml(yaml_file)
        assert config.capture_format == "numbered"

    def test_from_yaml_with_real_config(self):
        config = AppConfig.from_yaml(REPO_ROOT / "config.yaml")
        assert config.capture_format == "numbered"
        assert config.draft_store == "local"
        assert config.timezone == "America/Guayaquil"

    def test_from_yaml_with_eval_config(self):
        config = AppConfig.from_yaml(REPO_ROOT / "config.eval.yaml")
        assert config.draft_store == "memory"
        assert config.opik_project == "quick-capture-eval"

    def test_for_eval(self):
        config = AppConfig.for_eval()
        assert config.draft_store == "memory"
        assert config.label_store == "local"
        assert config.labels_dir == "labels"

    def test_opik_api_key_defaults_to_none(self):
        assert AppConfig().opik_api_key is None

    def test_reads_capture_format_from_env(self, monkeypatch):
        monkeypatch.setenv("CAPTURE_FORMAT", "labeled")
        assert AppConfig().capture_format == "labeled"

    def test_reads_opik_api_key_from_env(self, monkeypatch):
        monkeypatch.setenv("OPIK_API_KEY", "op-test-456")
        assert AppConfig().opik_api_key == "op-test-456"

    def test_reads_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("DRAFT_STORE=memory\n")
        assert AppConfig().draft_store == "memory"

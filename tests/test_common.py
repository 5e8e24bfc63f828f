"""Tests for shared common modules — config and logging."""

import io
import logging
import tomllib
from pathlib import Path

import pytest

from src.common.config import CONTENT_DIR, PROJECT_ROOT, Settings, StoreSettings
from src.common.logging import setup_logging


class TestSettings:
    def test_defaults_when_file_missing(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CONTENT_DIR", raising=False)
        monkeypatch.delenv("CONTENT_STRICT", raising=False)
        settings = Settings.load(tmp_path / "missing.yaml")
        assert settings.store.content_dir == CONTENT_DIR
        assert settings.store.extensions == [".md", ".markdown"]
        assert settings.store.strict is True

    def test_load_from_yaml(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CONTENT_DIR", raising=False)
        monkeypatch.delenv("CONTENT_STRICT", raising=False)
        path = tmp_path / "settings.yaml"
        path.write_text(
            "store:\n  content_dir: site/content\n  strict: false\n",
            encoding="utf-8",
        )
        settings = Settings.load(path)
        assert settings.store.content_dir == Path("site/content")
        assert settings.store.strict is False

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.yaml"
        path.write_text("store:\n  content_dir: from-yaml\n", encoding="utf-8")
        monkeypatch.setenv("CONTENT_DIR", str(tmp_path / "from-env"))
        monkeypatch.setenv("CONTENT_STRICT", "no")
        settings = Settings.load(path)
        assert settings.store.content_dir == tmp_path / "from-env"
        assert settings.store.strict is False

    def test_empty_yaml_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CONTENT_DIR", raising=False)
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")
        assert Settings.load(path).store.content_dir == CONTENT_DIR

    def test_shipped_settings_file_loads(self, monkeypatch):
        monkeypatch.delenv("CONTENT_DIR", raising=False)
        monkeypatch.delenv("CONTENT_STRICT", raising=False)
        settings = Settings.load()
        assert settings.store.content_abs_dir == PROJECT_ROOT / "content"


class TestStoreSettings:
    def test_relative_dir_resolves_against_project_root(self):
        settings = StoreSettings(content_dir=Path("content"))
        assert settings.content_abs_dir == PROJECT_ROOT / "content"

    def test_absolute_dir_kept(self, tmp_path):
        settings = StoreSettings(content_dir=tmp_path)
        assert settings.content_abs_dir == tmp_path


class TestLogging:
    def test_formats_messages(self):
        stream = io.StringIO()
        logger = setup_logging(module_name="test.common.format", stream=stream)
        logger.info("hello %s", "world")
        assert "[INFO] test.common.format: hello world" in stream.getvalue()

    def test_second_call_reuses_logger(self):
        first = setup_logging(module_name="test.common.reuse")
        second = setup_logging(module_name="test.common.reuse")
        assert first is second
        assert len(second.handlers) == 1

    def test_level_by_name(self):
        logger = setup_logging(level="debug", module_name="test.common.level")
        assert logger.level == logging.DEBUG

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        logger = setup_logging(module_name="test.common.env")
        assert logger.level == logging.WARNING

    @pytest.mark.parametrize("name", ["nonsense", ""])
    def test_unknown_level_falls_back_to_info(self, name):
        logger = setup_logging(level=name, module_name=f"test.common.bad.{name or 'empty'}")
        assert logger.level == logging.INFO


class TestPackaging:
    def test_readme_exists(self, project_root):
        with open(project_root / "pyproject.toml", "rb") as f:
            project = tomllib.load(f)["project"]
        assert project["readme"] == "README.md"
        assert (project_root / project["readme"]).is_file()

    def test_documented_trees_exist(self, project_root):
        assert (project_root / "content").is_dir()
        assert not (project_root / "fixtures").exists()

"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
CONTENT_DIR = PROJECT_ROOT / "content"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")

_TRUTHY = {"1", "true", "yes", "on"}


class StoreSettings(BaseModel):
    """Settings for the content store."""
    content_dir: Path = CONTENT_DIR
    extensions: list[str] = Field(default_factory=lambda: [".md", ".markdown"])
    strict: bool = True  # reject unknown front matter keys

    @property
    def content_abs_dir(self) -> Path:
        """Resolve content dir relative to project root."""
        if self.content_dir.is_absolute():
            return self.content_dir
        return PROJECT_ROOT / self.content_dir


class Settings(BaseModel):
    """Top-level application settings."""
    store: StoreSettings = Field(default_factory=StoreSettings)

    @classmethod
    def load(cls, settings_path: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, then apply env overrides.

        Args:
            settings_path: Alternate YAML file (default config/settings.yaml).

        Returns:
            Settings instance. Defaults are used when the file is absent.
        """
        settings_path = settings_path or CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

        store = dict(data.get("store") or {})
        if content_dir := os.getenv("CONTENT_DIR"):
            store["content_dir"] = content_dir
        if strict := os.getenv("CONTENT_STRICT"):
            store["strict"] = strict.strip().lower() in _TRUTHY
        data["store"] = store

        return cls(**data)

# Common utilities and shared modules
"""
Shared components used by the content store and its CLI:
- Project configuration (Pydantic settings)
- Logging configuration
"""

from .config import CONFIG_DIR, CONTENT_DIR, PROJECT_ROOT, Settings, StoreSettings
from .logging import setup_logging

__all__ = [
    "CONFIG_DIR",
    "CONTENT_DIR",
    "PROJECT_ROOT",
    "Settings",
    "StoreSettings",
    "setup_logging",
]

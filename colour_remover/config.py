import json
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SETTINGS_PATH = os.path.join(PROJECT_ROOT, "config", "settings.json")

DEFAULT_EXTENSIONS: Tuple[str, ...] = ("bmp", "jpg", "jpeg", "gif", "png")


@dataclass(frozen=True)
class Settings:
    output_dir: str = "out"
    extensions: Tuple[str, ...] = field(default=DEFAULT_EXTENSIONS)
    extraction_suffix: str = "_s"
    mode: str = "extract"
    keep_alpha: bool = False

    def override(self, **values: Any) -> "Settings":
        """Copy with every non-None value applied (CLI flags left unset are None)."""
        return replace(self, **{k: v for k, v in values.items() if v is not None})


def _normalize_extensions(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        value = value.split(",")
    exts = tuple(str(e).strip().lower().lstrip(".") for e in value if str(e).strip())
    if not exts:
        raise ValueError("'extensions' must list at least one file extension.")
    return exts


def _settings_from_dict(data: Dict[str, Any]) -> Settings:
    values: Dict[str, Any] = {}
    if "output_dir" in data:
        values["output_dir"] = str(data["output_dir"])
    if "extensions" in data:
        values["extensions"] = _normalize_extensions(data["extensions"])
    if "extraction_suffix" in data:
        values["extraction_suffix"] = str(data["extraction_suffix"])
    if "mode" in data:
        values["mode"] = str(data["mode"])
    if "keep_alpha" in data:
        values["keep_alpha"] = bool(data["keep_alpha"])
    return Settings(**values)


def load_settings(path: Optional[str] = None) -> Settings:
    """Load settings from config/settings.json, falling back to defaults with a warning."""
    settings_path = path or SETTINGS_PATH

    if not os.path.exists(settings_path):
        print(f"Warning: settings.json not found at {settings_path}; using defaults")
        return Settings()

    try:
        with open(settings_path, "r", encoding="utf-8") as settings_file:
            data = json.load(settings_file) or {}
        if not isinstance(data, dict):
            raise ValueError("top-level value must be an object")
        return _settings_from_dict(data)
    except (OSError, ValueError) as exc:
        print(f"Warning: Could not load settings from {settings_path}: {exc}")
        return Settings()

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

_PACKAGE_DIR = Path(__file__).resolve().parent

# Load .env from project root
load_dotenv(_PACKAGE_DIR.parent / ".env")


class ConfigError(ValueError):
    """An environment setting holds a value that cannot be used."""


def _optional_int(name: str, raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class CookbookConfig:
    recipes_path: Path = _PACKAGE_DIR / "data" / "recipes.json"
    page_template_path: Path = _PACKAGE_DIR / "templates" / "index.html"
    static_dir: Path = _PACKAGE_DIR / "static"
    container_id: str = "recipes"
    search_input_id: str = "search-input"
    search_form_id: str = "search-form"
    random_seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> CookbookConfig:
        defaults = cls()
        return cls(
            recipes_path=Path(environ.get("COOKBOOK_RECIPES_PATH", str(defaults.recipes_path))),
            random_seed=_optional_int("COOKBOOK_RANDOM_SEED", environ.get("COOKBOOK_RANDOM_SEED")),
            log_level=environ.get("COOKBOOK_LOG_LEVEL", defaults.log_level).upper(),
        )


DEFAULT_CONFIG = CookbookConfig.from_env()

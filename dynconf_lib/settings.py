from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field

from dynconf_lib.storage.factory import DEFAULT_DATA_DIR

DEFAULT_SETTINGS_PATH = Path("data/config/dynconf.yml")


class Settings(BaseModel):
    """Settings read by the bootstrap layer, never by the core itself."""

    data_dir: str = DEFAULT_DATA_DIR
    # Dotted path of an alternative storage backend, e.g. `mypkg.db:DbStorage`
    storage: Optional[str] = None
    storage_options: Dict[str, Any] = Field(default_factory=dict)
    log_level: str = "WARNING"


def load_yaml_file(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from a YAML file; a missing file yields the defaults."""
    return Settings(**load_yaml_file(Path(path) if path else DEFAULT_SETTINGS_PATH))

"""Logic for loading the optional generator configuration file."""

from pathlib import Path
from typing import Any

import yaml

from api_docgen.deep_merge import deep_merge
from api_docgen.image_context import GRAPHVIZ_DEFAULT_STYLE

CONFIG_FILE = "doc_gen.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "locale": "zh",
    "labels": {},
    "graphviz_default_style": GRAPHVIZ_DEFAULT_STYLE,
    "log_level": "INFO",
}


def load_config(path: str | Path | None = CONFIG_FILE) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    A missing file is not an error; the defaults are used as is.
    """
    config = deep_merge(DEFAULT_CONFIG, {})
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration in {p} must be a mapping"
                raise ValueError(msg)
            config = deep_merge(config, user_config)
    return config

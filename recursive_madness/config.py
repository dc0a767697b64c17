"""Run configuration: pydantic model, JSON loading and default merging."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from recursive_madness.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_START_VALUE = 6
# One stack frame per step of the recursion.
MAX_START_VALUE = 500


class MadnessConfig(BaseModel):
    """Top-level configuration, optionally loaded from a JSON file."""

    start_value: int = Field(default=DEFAULT_START_VALUE, ge=0, le=MAX_START_VALUE)
    log_level: str = "WARNING"

    @property
    def level(self) -> int:
        """Numeric logging level for ``log_level``; unknown names fall back to WARNING."""
        value = logging.getLevelName(self.log_level.upper())
        return value if isinstance(value, int) else logging.WARNING


def deep_merge_config(
    user: dict[str, object],
    defaults: dict[str, object],
) -> tuple[dict[str, object], bool]:
    """Recursively merge *defaults* into *user*, preserving user values.

    Returns ``(merged_dict, changed)`` where *changed* is True when new keys were added.
    """
    result: dict[str, object] = dict(user)
    changed = False
    for key, default_val in defaults.items():
        if key not in result:
            result[key] = default_val
            changed = True
        elif isinstance(default_val, dict) and isinstance(result[key], dict):
            sub_merged, sub_changed = deep_merge_config(
                result[key],  # type: ignore[arg-type]
                default_val,
            )
            result[key] = sub_merged
            changed = changed or sub_changed
    return result, changed


def load_config(path: Path | None = None) -> MadnessConfig:
    """Load and validate the run config.

    With no *path* the pydantic defaults are used. Otherwise the JSON object at
    *path* is merged over the defaults so that partial files are accepted.
    """
    if path is None:
        return MadnessConfig()

    try:
        user_data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        msg = f"Failed to read config at {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(user_data, dict):
        msg = f"Config at {path} must be a JSON object"
        raise ConfigError(msg)

    merged, changed = deep_merge_config(user_data, MadnessConfig().model_dump(mode="json"))
    if changed:
        logger.debug("Filled missing config keys from defaults")

    try:
        config = MadnessConfig.model_validate(merged)
    except ValidationError as exc:
        msg = f"Invalid config at {path}: {exc}"
        raise ConfigError(msg) from exc
    logger.info("Loaded config from %s", path)
    return config

"""
Run configuration.

An optional YAML file may provide defaults for a run:

```yaml
on_missing_required: skip   # or "abort" (default)
context_chars: 120
encoding: utf-8
log_level: DEBUG
```

Command line flags take precedence over values read from the file.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import yaml

from .errors import Div2CsvError

KNOWN_KEYS = ("on_missing_required", "context_chars", "encoding", "log_level")


class ConfigError(Div2CsvError):
    """The configuration file is missing or malformed."""


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Read the YAML config at `config_path`; an empty dict when not given."""
    if not config_path:
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Could not read config {config_path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must be a mapping")
    unknown = sorted(set(data) - set(KNOWN_KEYS))
    if unknown:
        raise ConfigError(f"Unknown config keys in {config_path}: {', '.join(unknown)}")
    return data

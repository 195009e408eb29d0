from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

from postercrop.models.settings import OutputOptions

CONFIG_PATH = Path.home() / ".postercrop_config.json"

log = logging.getLogger("postercrop")


@dataclass
class AppConfig:
    """Persisted GUI preferences."""

    input_dir: str = ""
    output_dir: str = ""
    options: OutputOptions = field(default_factory=OutputOptions)

    @classmethod
    def load(cls, path: Path = CONFIG_PATH) -> "AppConfig":
        if not path.exists():
            return cls()
        try:
            with open(path, "r", encoding="utf-8") as f:
                cfg = json.load(f)
            known = {f.name for f in fields(OutputOptions)}
            opts = {k: v for k, v in cfg.get("options", {}).items() if k in known}
            return cls(
                input_dir=cfg.get("input_dir", ""),
                output_dir=cfg.get("output_dir", ""),
                options=OutputOptions(**opts),
            )
        except (OSError, ValueError, TypeError, AttributeError) as e:
            log.warning("Could not load config %s: %s", path, e)
            return cls()

    def save(self, path: Path = CONFIG_PATH) -> Path:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2)
        return path

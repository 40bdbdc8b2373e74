"""Top-level htmllinks configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .get_home_dir import get_home_dir
from .LinksConfig import LinksConfig
from .LogConfig import LogConfig


class HtmlLinksConfig(BaseModel):
    """Top-level configuration; every section is optional."""

    model_config = ConfigDict(extra="forbid")

    links: LinksConfig = Field(default_factory=LinksConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on HTMLLINKS_HOME or default to ~/.htmllinks."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls, path: Path | None = None) -> "HtmlLinksConfig":
        """Load and validate config from file.

        A missing file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        if path is None:
            path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="python")

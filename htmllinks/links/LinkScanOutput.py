"""Output schema of the scan command."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class LinkScanOutput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str
    base_uri: str
    links: list[dict[str, Any]]
    errors: list[str]

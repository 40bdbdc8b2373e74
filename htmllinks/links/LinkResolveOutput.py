"""Output schema of the resolve command."""

from pydantic import BaseModel, ConfigDict


class LinkResolveOutput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_uri: str
    reference: str
    status: str
    target: str | None
    errors: list[str]

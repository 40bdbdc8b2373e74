"""Link discovery configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LinksConfig(BaseModel):
    """Which attributes carry links and which schemes are never navigable."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    link_attributes: list[str] = Field(
        default_factory=lambda: ["href", "src"],
        min_length=1,
        description="Attribute names whose values are links (case-insensitive)",
    )
    pseudo_schemes: list[str] = Field(
        default_factory=lambda: ["javascript"],
        description="Schemes whose references are dropped (case-insensitive)",
    )
    honor_base_element: bool = Field(True, description="Resolve links against the first <base href>")

    @field_validator("link_attributes", "pseudo_schemes")
    @classmethod
    def _lower_case(cls, values: list[str]) -> list[str]:
        normalized = [v.strip().lower() for v in values]
        if any(not v for v in normalized):
            raise ValueError("names must be non-empty strings")
        return normalized

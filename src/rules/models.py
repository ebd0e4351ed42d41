from pydantic import BaseModel, Field, field_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class ScaleRule(BaseModel):
    threshold: float = Field(gt=0)
    suffix: str = Field(min_length=1)


def _default_scales() -> list[ScaleRule]:
    return [
        ScaleRule(threshold=1_000_000_000, suffix="B"),
        ScaleRule(threshold=1_000_000, suffix="M"),
        ScaleRule(threshold=1_000, suffix="K"),
    ]


class AbbreviateRules(BaseModel):
    scales: list[ScaleRule] = Field(default_factory=_default_scales)
    decimals: int = Field(default=1, ge=0, le=6)

    @field_validator("scales")
    @classmethod
    def validate_descending(cls, v: list[ScaleRule]) -> list[ScaleRule]:
        """Thresholds must be strictly descending so the first match wins."""
        thresholds = [scale.threshold for scale in v]
        if any(a <= b for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError("scales must be ordered by strictly descending threshold")
        return v


class SearchRules(BaseModel):
    max_json_bytes: int | None = Field(default=None, gt=0)


class Rules(BaseModel):
    project: ProjectRules
    abbreviate: AbbreviateRules = Field(default_factory=AbbreviateRules)
    search: SearchRules = Field(default_factory=SearchRules)

"""Decision comparison schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DiffItem(BaseModel):
    """A scalar field that differs between two decisions."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    label: str
    value_a: str | None
    value_b: str | None


class SetDiff(BaseModel):
    """Items present in one list but not the other, in original text and order."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    only_in_a: list[str] = Field(default_factory=list)
    only_in_b: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.only_in_a and not self.only_in_b


class DiffResult(BaseModel):
    """Meaningful differences between two decision verdicts."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    outcome: DiffItem | None = None
    confidence: DiffItem | None = None
    gains: SetDiff = Field(default_factory=SetDiff)
    losses: SetDiff = Field(default_factory=SetDiff)
    assumptions: SetDiff = Field(default_factory=SetDiff)
    has_differences: bool = False

    @classmethod
    def empty(cls) -> "DiffResult":
        """Result used when either side is not a comparable verdict."""
        return cls()

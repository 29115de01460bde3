"""Decision evaluation contracts.

A decision evaluation is exactly one of a verdict (``DecisionOutput``) or a
refusal (``RefusalOutput``). The service envelope (``DecisionResponse``)
carries one of them under ``output``.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Outcome = Literal["book", "wait", "switch", "discard"]
RefusalCode = Literal[
    "SERVICE_DEGRADED",
    "MISSING_INPUTS",
    "CONFLICTING_INPUTS",
    "GUARANTEE_REQUESTED",
]


def _none_as_empty_list(value: object) -> object:
    return [] if value is None else value


class Assumption(BaseModel):
    """Assumption the verdict depends on."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    confidence: float = 0.0


class Tradeoffs(BaseModel):
    """What the traveler gains and gives up with the verdict."""

    model_config = ConfigDict(frozen=True)

    gains: list[str] = Field(default_factory=list)
    losses: list[str] = Field(default_factory=list)

    @field_validator("gains", "losses", mode="before")
    @classmethod
    def _coerce_missing_lists(cls, value: object) -> object:
        return _none_as_empty_list(value)


class DecisionOutput(BaseModel):
    """A verdict for one decision topic."""

    model_config = ConfigDict(frozen=True)

    outcome: Outcome
    headline: str = ""
    summary: str = ""
    confidence: float = Field(ge=0.0, le=1.0)
    tradeoffs: Tradeoffs = Field(default_factory=Tradeoffs)
    assumptions: list[Assumption] = Field(default_factory=list)
    change_conditions: list[str] = Field(default_factory=list)

    @field_validator("assumptions", "change_conditions", mode="before")
    @classmethod
    def _coerce_missing_lists(cls, value: object) -> object:
        return _none_as_empty_list(value)

    @field_validator("tradeoffs", mode="before")
    @classmethod
    def _coerce_missing_tradeoffs(cls, value: object) -> object:
        return {} if value is None else value


class RefusalOutput(BaseModel):
    """The evaluator declined to give a verdict."""

    model_config = ConfigDict(frozen=True)

    code: RefusalCode | None = None
    reason: str
    missing_or_conflicting_inputs: list[str] = Field(default_factory=list)
    safe_next_step: str = ""

    @field_validator("missing_or_conflicting_inputs", mode="before")
    @classmethod
    def _coerce_missing_lists(cls, value: object) -> object:
        return _none_as_empty_list(value)


DecisionEvaluation = DecisionOutput | RefusalOutput


class ResponseOutput(BaseModel):
    """Tagged union payload: a decision or a refusal, never both."""

    model_config = ConfigDict(frozen=True)

    type: Literal["decision", "refusal"]
    decision: DecisionOutput | None = None
    refusal: RefusalOutput | None = None

    @model_validator(mode="after")
    def _exactly_one_payload(self) -> "ResponseOutput":
        if self.decision is not None and self.refusal is not None:
            raise ValueError("Response output cannot carry both a decision and a refusal.")
        if self.type == "decision" and self.refusal is not None:
            raise ValueError("Decision output cannot carry a refusal payload.")
        if self.type == "refusal" and self.decision is not None:
            raise ValueError("Refusal output cannot carry a decision payload.")
        return self


class ResponseMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    logic_version: str = ""
    ai_used: bool = False


class DecisionResponse(BaseModel):
    """Envelope returned by the decision evaluation service."""

    model_config = ConfigDict(frozen=True)

    decision_id: str
    output: ResponseOutput
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)

    @property
    def evaluation(self) -> DecisionEvaluation | None:
        """Return the carried verdict or refusal, if any."""
        if self.output.type == "decision":
            return self.output.decision
        return self.output.refusal

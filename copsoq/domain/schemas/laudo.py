from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_serializer, field_validator, model_serializer

from copsoq.config import settings
from copsoq.domain.models import (
    Direction,
    DomainScore,
    EntityMeta,
    InterpretationResult,
    ItemResponse,
    LaudoStatus,
    ReportPayload,
    RiskCategory,
    Semaphore,
)
from copsoq.utils.rounding import round_half_up

FREQUENCY_SCALE = (0, 25, 50, 75, 100)


class ItemResponseIn(BaseModel):
    """Inbound answer on the five-point frequency scale"""
    domain_id: int = Field(..., ge=1, le=10)
    value: int

    @field_validator("value")
    @classmethod
    def value_on_scale(cls, v: int) -> int:
        if v not in FREQUENCY_SCALE:
            raise ValueError(f"value must be one of {FREQUENCY_SCALE}")
        return v

    def to_domain(self) -> ItemResponse:
        return ItemResponse(domain_id=self.domain_id, value=self.value)


class DomainScoreResponse(BaseModel):
    domain_id: int
    domain_name: str
    description: str
    direction: Direction
    response_count: int
    mean: float
    std_dev: float
    mean_minus_sd: float
    mean_plus_sd: float
    risk_category: RiskCategory
    semaphore: Semaphore
    label: str
    recommended_action: str

    @field_serializer("mean", "std_dev", "mean_minus_sd", "mean_plus_sd")
    def round_score(self, v: float) -> float:
        return round_half_up(v, settings.SCORE_DECIMALS)

    @classmethod
    def from_domain(cls, score: DomainScore) -> "DomainScoreResponse":
        return cls(
            domain_id=score.domain_id,
            domain_name=score.domain_name,
            description=score.description,
            direction=score.direction,
            response_count=score.response_count,
            mean=score.mean,
            std_dev=score.std_dev,
            mean_minus_sd=score.mean_minus_sd,
            mean_plus_sd=score.mean_plus_sd,
            risk_category=score.risk_category,
            semaphore=score.semaphore,
            label=score.label,
            recommended_action=score.recommended_action,
        )


class InterpretationResponse(BaseModel):
    narrative: str
    low_risk_domains: list[DomainScoreResponse]
    medium_risk_domains: list[DomainScoreResponse]
    high_risk_domains: list[DomainScoreResponse]
    conclusion: str
    distribution: dict[RiskCategory, int]

    @classmethod
    def from_domain(cls, result: InterpretationResult) -> "InterpretationResponse":
        return cls(
            narrative=result.narrative,
            low_risk_domains=[DomainScoreResponse.from_domain(s) for s in result.low_risk_domains],
            medium_risk_domains=[DomainScoreResponse.from_domain(s) for s in result.medium_risk_domains],
            high_risk_domains=[DomainScoreResponse.from_domain(s) for s in result.high_risk_domains],
            conclusion=result.conclusion,
            distribution=result.distribution(),
        )


class EntityMetaResponse(BaseModel):
    company_name: str
    cnpj: str
    address: str
    released_on: date
    last_completed_on: date
    total_evaluations: int
    completed_evaluations: int
    completion_pct: int
    operational_sample: int
    management_sample: int

    @classmethod
    def from_domain(cls, entity: EntityMeta) -> "EntityMetaResponse":
        return cls(
            company_name=entity.company_name,
            cnpj=entity.cnpj,
            address=entity.address,
            released_on=entity.released_on,
            last_completed_on=entity.period_end,
            total_evaluations=entity.total_evaluations,
            completed_evaluations=entity.completed_evaluations,
            completion_pct=entity.completion_pct,
            operational_sample=entity.operational_sample,
            management_sample=entity.management_sample,
        )


class SignatureResponse(BaseModel):
    name: str
    title: str
    registry: str
    organization: str


class ConclusionResponse(BaseModel):
    text: str
    issue_line: str
    signature: SignatureResponse


class ReportPayloadResponse(BaseModel):
    entity: EntityMetaResponse
    domain_scores: list[DomainScoreResponse]
    interpretation: InterpretationResponse
    observations: Optional[str] = None
    conclusion: Optional[ConclusionResponse] = None
    status: LaudoStatus

    @model_serializer(mode="wrap")
    def omit_absent_observations(self, handler):
        data = handler(self)
        if self.observations is None:
            data.pop("observations", None)
        return data

    @classmethod
    def from_payload(cls, payload: ReportPayload) -> "ReportPayloadResponse":
        conclusion = None
        if payload.conclusion is not None:
            signature = payload.conclusion.signature
            conclusion = ConclusionResponse(
                text=payload.conclusion.text,
                issue_line=payload.conclusion.issue_line,
                signature=SignatureResponse(
                    name=signature.name,
                    title=signature.title,
                    registry=signature.registry,
                    organization=signature.organization,
                ),
            )

        return cls(
            entity=EntityMetaResponse.from_domain(payload.entity),
            domain_scores=[DomainScoreResponse.from_domain(s) for s in payload.domain_scores],
            interpretation=InterpretationResponse.from_domain(payload.interpretation),
            observations=payload.observations,
            conclusion=conclusion,
            status=payload.status,
        )

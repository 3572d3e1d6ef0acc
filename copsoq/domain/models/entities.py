"""
Domain Models - Entities
Pure domain objects with no infrastructure dependencies
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from copsoq.utils.rounding import percentage


class Direction(str, Enum):
    """Scale direction of a domain"""
    POSITIVE = "positiva"   # higher is better
    NEGATIVE = "negativa"   # higher is worse


class RiskCategory(str, Enum):
    """Three-tier risk classification"""
    LOW = "baixo"
    MEDIUM = "medio"
    HIGH = "alto"


class Semaphore(str, Enum):
    """Traffic-light colour mirroring the risk category"""
    GREEN = "verde"
    YELLOW = "amarelo"
    RED = "vermelho"


class LaudoStatus(str, Enum):
    """Lifecycle of an issued report"""
    DRAFT = "rascunho"
    ISSUED = "emitido"
    SENT = "enviado"


@dataclass(frozen=True)
class DomainDefinition:
    """COPSOQ domain definition - Immutable"""
    id: int
    name: str
    description: str
    direction: Direction

    def __post_init__(self):
        if not 1 <= self.id <= 10:
            raise ValueError(f"Domain id out of range: {self.id}")
        if not self.name:
            raise ValueError("Domain name cannot be empty")


@dataclass(frozen=True)
class ItemResponse:
    """A single answered item, already mapped to the 0-100 scale"""
    domain_id: int
    value: float


@dataclass(frozen=True)
class DomainStatistics:
    """Per-domain descriptive statistics before classification"""
    domain_id: int
    domain_name: str
    direction: Direction
    response_count: int
    mean: float
    std_dev: float
    mean_minus_sd: float
    mean_plus_sd: float

    @property
    def has_data(self) -> bool:
        """False for the insufficient-data sentinel"""
        return self.response_count > 0


@dataclass(frozen=True)
class RiskClassification:
    """Result of classifying a single mean"""
    category: RiskCategory
    semaphore: Semaphore


@dataclass(frozen=True)
class DomainScore:
    """Classified domain score - Immutable"""
    domain_id: int
    domain_name: str
    direction: Direction
    mean: float
    std_dev: float
    mean_minus_sd: float
    mean_plus_sd: float
    risk_category: RiskCategory
    semaphore: Semaphore
    recommended_action: str
    description: str = ""
    response_count: int = 0
    label: str = ""

    @property
    def display_name(self) -> str:
        """'<id> - <name>' as used in narratives"""
        return f"{self.domain_id} - {self.domain_name}"


@dataclass(frozen=True)
class InterpretationResult:
    """Narrative plus the three risk buckets"""
    narrative: str
    low_risk_domains: list[DomainScore] = field(default_factory=list)
    medium_risk_domains: list[DomainScore] = field(default_factory=list)
    high_risk_domains: list[DomainScore] = field(default_factory=list)
    conclusion: str = ""

    @property
    def total_domains(self) -> int:
        return (
            len(self.low_risk_domains)
            + len(self.medium_risk_domains)
            + len(self.high_risk_domains)
        )

    def distribution(self) -> dict[RiskCategory, int]:
        """
        Rounded percentage of domains per risk category.
        All zero when there are no domains.
        """
        buckets = {
            RiskCategory.LOW: self.low_risk_domains,
            RiskCategory.MEDIUM: self.medium_risk_domains,
            RiskCategory.HIGH: self.high_risk_domains,
        }
        return {
            category: percentage(len(domains), self.total_domains)
            for category, domains in buckets.items()
        }


@dataclass(frozen=True)
class EntityMeta:
    """General data about the assessed company and batch"""
    company_name: str
    cnpj: str
    address: str
    released_on: date
    total_evaluations: int
    completed_evaluations: int
    last_completed_on: Optional[date] = None
    operational_sample: int = 0
    management_sample: int = 0

    @property
    def completion_pct(self) -> int:
        """Completed evaluations as a rounded percentage"""
        return percentage(self.completed_evaluations, self.total_evaluations)

    @property
    def is_ready(self) -> bool:
        """A batch is ready for a laudo once every evaluation is complete"""
        return (
            self.total_evaluations > 0
            and self.completed_evaluations == self.total_evaluations
        )

    @property
    def period_end(self) -> date:
        return self.last_completed_on or self.released_on


@dataclass(frozen=True)
class IssuerSignature:
    """Technical lead who signs the laudo"""
    name: str
    title: str
    registry: str
    organization: str


@dataclass(frozen=True)
class ConclusionSection:
    """Closing section of the laudo"""
    text: str
    issue_line: str
    signature: IssuerSignature


@dataclass(frozen=True)
class ReportPayload:
    """
    Hand-off artifact to rendering.

    `observations` is None when the issuer provided none; an empty
    string means the issuer explicitly cleared them.
    """
    entity: EntityMeta
    domain_scores: list[DomainScore]
    interpretation: InterpretationResult
    observations: Optional[str] = None
    conclusion: Optional[ConclusionSection] = None
    status: LaudoStatus = LaudoStatus.DRAFT

    @property
    def has_observations(self) -> bool:
        return self.observations is not None

    def to_dict(self) -> dict:
        """Plain dict for renderers; absent observations are omitted"""
        data = {
            "entity": _entity_to_dict(self.entity),
            "domain_scores": [_score_to_dict(s) for s in self.domain_scores],
            "interpretation": {
                "narrative": self.interpretation.narrative,
                "low_risk_domains": [
                    _score_to_dict(s) for s in self.interpretation.low_risk_domains
                ],
                "medium_risk_domains": [
                    _score_to_dict(s) for s in self.interpretation.medium_risk_domains
                ],
                "high_risk_domains": [
                    _score_to_dict(s) for s in self.interpretation.high_risk_domains
                ],
                "conclusion": self.interpretation.conclusion,
            },
            "status": self.status.value,
        }
        if self.observations is not None:
            data["observations"] = self.observations
        if self.conclusion is not None:
            data["conclusion"] = {
                "text": self.conclusion.text,
                "issue_line": self.conclusion.issue_line,
                "signature": {
                    "name": self.conclusion.signature.name,
                    "title": self.conclusion.signature.title,
                    "registry": self.conclusion.signature.registry,
                    "organization": self.conclusion.signature.organization,
                },
            }
        return data


def _score_to_dict(score: DomainScore) -> dict:
    return {
        "domain_id": score.domain_id,
        "domain_name": score.domain_name,
        "description": score.description,
        "direction": score.direction.value,
        "response_count": score.response_count,
        "mean": score.mean,
        "std_dev": score.std_dev,
        "mean_minus_sd": score.mean_minus_sd,
        "mean_plus_sd": score.mean_plus_sd,
        "risk_category": score.risk_category.value,
        "semaphore": score.semaphore.value,
        "label": score.label,
        "recommended_action": score.recommended_action,
    }


def _entity_to_dict(entity: EntityMeta) -> dict:
    return {
        "company_name": entity.company_name,
        "cnpj": entity.cnpj,
        "address": entity.address,
        "released_on": entity.released_on.isoformat(),
        "last_completed_on": entity.period_end.isoformat(),
        "total_evaluations": entity.total_evaluations,
        "completed_evaluations": entity.completed_evaluations,
        "completion_pct": entity.completion_pct,
        "operational_sample": entity.operational_sample,
        "management_sample": entity.management_sample,
    }

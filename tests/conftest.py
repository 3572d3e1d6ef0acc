from datetime import date
from typing import Optional

import pytest

from copsoq.domain.models import (
    Direction,
    DomainScore,
    EntityMeta,
    IssuerSignature,
    ItemResponse,
    LaudoStatus,
    RiskCategory,
    Semaphore,
)


def make_score(
    domain_id: int,
    name: str,
    mean: float,
    category: RiskCategory,
    direction: Direction = Direction.POSITIVE,
) -> DomainScore:
    """Build a DomainScore by hand, bypassing aggregation"""
    semaphore = {
        RiskCategory.LOW: Semaphore.GREEN,
        RiskCategory.MEDIUM: Semaphore.YELLOW,
        RiskCategory.HIGH: Semaphore.RED,
    }[category]
    return DomainScore(
        domain_id=domain_id,
        domain_name=name,
        direction=direction,
        mean=mean,
        std_dev=10.0,
        mean_minus_sd=mean - 10.0,
        mean_plus_sd=mean + 10.0,
        risk_category=category,
        semaphore=semaphore,
        recommended_action="",
        response_count=4,
    )


@pytest.fixture
def score_factory():
    return make_score


@pytest.fixture
def sample_scores() -> list[DomainScore]:
    """Six classified domains: 3 low, 1 medium, 2 high"""
    return [
        make_score(1, "Demandas no Trabalho", 74.9, RiskCategory.LOW),
        make_score(2, "Organização e Conteúdo do Trabalho", 18.6, RiskCategory.HIGH),
        make_score(3, "Relações Sociais e Liderança", 75.4, RiskCategory.LOW),
        make_score(4, "Interface Trabalho-Indivíduo", 18.2, RiskCategory.LOW, Direction.NEGATIVE),
        make_score(5, "Valores Organizacionais", 50.0, RiskCategory.MEDIUM),
        make_score(6, "Traços de Personalidade", 18.8, RiskCategory.HIGH),
    ]


@pytest.fixture
def entity() -> EntityMeta:
    return EntityMeta(
        company_name="Empresa Teste",
        cnpj="12.345.678/0001-90",
        address="Rua A, 100 - São Paulo - SP - 01000-000",
        released_on=date(2025, 3, 1),
        total_evaluations=4,
        completed_evaluations=4,
        last_completed_on=date(2025, 3, 20),
        operational_sample=3,
        management_sample=1,
    )


@pytest.fixture
def signature() -> IssuerSignature:
    return IssuerSignature(
        name="Dra. Ana Souza",
        title="Psicóloga",
        registry="CRP 06/000001",
        organization="Clínica Exemplo",
    )


@pytest.fixture
def batch_responses() -> list[ItemResponse]:
    """Responses covering domains 1, 2 and 7 only"""
    return [
        ItemResponse(domain_id=1, value=75),
        ItemResponse(domain_id=1, value=80),
        ItemResponse(domain_id=1, value=70),
        ItemResponse(domain_id=1, value=85),
        ItemResponse(domain_id=2, value=50),
        ItemResponse(domain_id=2, value=50),
        ItemResponse(domain_id=7, value=0),
        ItemResponse(domain_id=7, value=25),
    ]


class InMemoryLaudoDataSource:
    """In-memory stand-in for the persistence layer"""

    def __init__(self):
        self.entities: dict[int, EntityMeta] = {}
        self.responses: dict[int, list[ItemResponse]] = {}
        self.observations: dict[int, Optional[str]] = {}
        self.statuses: dict[int, LaudoStatus] = {}

    def add_lote(
        self,
        lote_id: int,
        entity: EntityMeta,
        responses: list[ItemResponse],
        observations: Optional[str] = None,
        status: LaudoStatus = LaudoStatus.DRAFT,
    ):
        self.entities[lote_id] = entity
        self.responses[lote_id] = responses
        self.observations[lote_id] = observations
        self.statuses[lote_id] = status

    def get_entity_meta(self, lote_id: int) -> EntityMeta:
        if lote_id not in self.entities:
            raise ValueError(f"Lote not found: {lote_id}")
        return self.entities[lote_id]

    def get_responses(self, lote_id: int) -> list[ItemResponse]:
        return list(self.responses.get(lote_id, []))

    def get_observations(self, lote_id: int) -> Optional[str]:
        return self.observations.get(lote_id)

    def get_status(self, lote_id: int) -> LaudoStatus:
        return self.statuses.get(lote_id, LaudoStatus.DRAFT)

    def save_observations(self, lote_id: int, observations: Optional[str]):
        self.observations[lote_id] = observations


@pytest.fixture
def data_source() -> InMemoryLaudoDataSource:
    return InMemoryLaudoDataSource()

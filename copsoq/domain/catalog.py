"""
COPSOQ DOMAIN CATALOG

This file defines the fixed set of ten COPSOQ III domains assessed by the
questionnaire (core COPSOQ groups plus gambling and financial debt) and the
direction of each scale. It specifies WHAT is measured, not how scores
are computed or classified.

Rules:
- Read-only definition, built once at import
- No database imports
- Ids unique and contiguous 1..10
"""

from types import MappingProxyType
from typing import Mapping

from copsoq.domain.models import Direction, DomainDefinition

# -------------------------------------------------------------------
# Domain Registry
# -------------------------------------------------------------------

DOMAIN_CATALOG: tuple[DomainDefinition, ...] = (
    DomainDefinition(
        id=1,
        name="Demandas no Trabalho",
        description="Avaliação das exigências quantitativas e ritmo de trabalho",
        direction=Direction.NEGATIVE,
    ),
    DomainDefinition(
        id=2,
        name="Organização e Conteúdo do Trabalho",
        description="Influência, desenvolvimento de habilidades e significado do trabalho",
        direction=Direction.POSITIVE,
    ),
    DomainDefinition(
        id=3,
        name="Relações Sociais e Liderança",
        description="Apoio social, feedback e reconhecimento no trabalho",
        direction=Direction.POSITIVE,
    ),
    DomainDefinition(
        id=4,
        name="Interface Trabalho-Indivíduo",
        description="Insegurança no trabalho e conflito trabalho-família",
        direction=Direction.NEGATIVE,
    ),
    DomainDefinition(
        id=5,
        name="Valores Organizacionais",
        description="Confiança, justiça e respeito mútuo na organização",
        direction=Direction.POSITIVE,
    ),
    DomainDefinition(
        id=6,
        name="Traços de Personalidade",
        description="Autoeficácia e autoconfiança",
        direction=Direction.POSITIVE,
    ),
    DomainDefinition(
        id=7,
        name="Saúde e Bem-Estar",
        description="Avaliação de estresse, burnout e sintomas somáticos",
        direction=Direction.NEGATIVE,
    ),
    DomainDefinition(
        id=8,
        name="Comportamentos Ofensivos",
        description="Exposição a assédio e violência no trabalho",
        direction=Direction.NEGATIVE,
    ),
    DomainDefinition(
        id=9,
        name="Comportamento de Jogo",
        description="Comportamentos relacionados a jogos de azar",
        direction=Direction.NEGATIVE,
    ),
    DomainDefinition(
        id=10,
        name="Endividamento Financeiro",
        description="Nível de endividamento e estresse financeiro",
        direction=Direction.NEGATIVE,
    ),
)

_BY_ID: Mapping[int, DomainDefinition] = MappingProxyType(
    {domain.id: domain for domain in DOMAIN_CATALOG}
)

if sorted(_BY_ID) != list(range(1, len(DOMAIN_CATALOG) + 1)):
    raise RuntimeError("Domain catalog ids must be unique and contiguous from 1")

DOMAIN_IDS: tuple[int, ...] = tuple(domain.id for domain in DOMAIN_CATALOG)

# -------------------------------------------------------------------
# Helper Functions
# -------------------------------------------------------------------

def get_domain(domain_id: int) -> DomainDefinition:
    """Return the definition for a domain id or raise ValueError."""
    try:
        return _BY_ID[domain_id]
    except KeyError:
        raise ValueError(f"Domain not found: {domain_id}") from None


def is_valid_domain(domain_id: int) -> bool:
    return domain_id in _BY_ID

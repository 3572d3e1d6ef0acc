"""
INTERPRETATION COMPOSER (ENGINE-3)
Partition classified domains and write the laudo narrative

RESPONSIBILITIES:
- Stable partition of scores into LOW / MEDIUM / HIGH buckets
- Narrative with one clause per non-empty bucket
- Clause order is always low -> medium -> high

RULES:
❌ No re-sorting inside a bucket
❌ No validation of the score count
✅ Empty buckets are empty lists
✅ Deterministic output
"""

import logging
from typing import Callable, Sequence

from copsoq.domain.models import DomainScore, InterpretationResult, RiskCategory

logger = logging.getLogger(__name__)

CONCLUSION_TEXT = (
    "A amostragem acima descrita foi submetida à avaliação psicossocial para "
    "verificação de seu estado de saúde mental, como condição necessária à "
    "realização do trabalho. Durante o período da avaliação, foi possível "
    "identificar os pontos acima descritos."
)


def _domain_list(domains: Sequence[DomainScore]) -> str:
    return ", ".join(d.display_name for d in domains)


def _low_risk_clause(domains: Sequence[DomainScore]) -> str:
    return (
        f"os indicadores Excelente nos grupos {_domain_list(domains)} que são "
        "importantes fatores de proteção e devem ser valorizados e mantidos. "
    )


def _medium_risk_clause(domains: Sequence[DomainScore]) -> str:
    return (
        f"{len(domains)} dimensão(ões) classificada(s) como Atenção Necessária "
        f"({_domain_list(domains)}) onde essa(s) área(s) requer(em) atenção por "
        "parte da instituição com intervenção imediata para prevenção de riscos "
        "psicossociais. "
    )


def _high_risk_clause(domains: Sequence[DomainScore]) -> str:
    return (
        f"Além disso, apresenta {len(domains)} dimensão(ões) de alto risco "
        f"({_domain_list(domains)}) que requerem ação corretiva urgente."
    )


# Narrative order is the order of this list.
CLAUSES: tuple[tuple[RiskCategory, Callable[[Sequence[DomainScore]], str]], ...] = (
    (RiskCategory.LOW, _low_risk_clause),
    (RiskCategory.MEDIUM, _medium_risk_clause),
    (RiskCategory.HIGH, _high_risk_clause),
)


class InterpretationComposer:
    """
    Interpretation Composer
    Builds the interpretation section of the laudo
    """

    def compose(self, entity_name: str, scores: Sequence[DomainScore]) -> InterpretationResult:
        """
        Compose the interpretation for an assessed entity

        Args:
            entity_name: Company name used in the introductory phrase
            scores: Classified domain scores (normally the 10 catalog domains)

        Returns:
            InterpretationResult with narrative and the three buckets
        """
        buckets = self.partition(scores)

        narrative = self._introduction(entity_name) + "".join(
            render(buckets[category])
            for category, render in CLAUSES
            if buckets[category]
        )

        logger.debug(
            "Composed interpretation for %s: %d low, %d medium, %d high",
            entity_name,
            len(buckets[RiskCategory.LOW]),
            len(buckets[RiskCategory.MEDIUM]),
            len(buckets[RiskCategory.HIGH]),
        )

        return InterpretationResult(
            narrative=narrative,
            low_risk_domains=buckets[RiskCategory.LOW],
            medium_risk_domains=buckets[RiskCategory.MEDIUM],
            high_risk_domains=buckets[RiskCategory.HIGH],
            conclusion=CONCLUSION_TEXT,
        )

    @staticmethod
    def partition(scores: Sequence[DomainScore]) -> dict[RiskCategory, list[DomainScore]]:
        """Stable partition by risk category"""
        buckets: dict[RiskCategory, list[DomainScore]] = {
            category: [] for category, _ in CLAUSES
        }
        for score in scores:
            buckets[score.risk_category].append(score)
        return buckets

    @staticmethod
    def _introduction(entity_name: str) -> str:
        return f"A {entity_name} apresenta "


def compose(entity_name: str, scores: Sequence[DomainScore]) -> InterpretationResult:
    """Module-level shortcut for InterpretationComposer().compose."""
    return InterpretationComposer().compose(entity_name, scores)

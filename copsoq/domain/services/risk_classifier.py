"""
RISK CLASSIFIER (ENGINE-2)
Map a domain mean to a risk tier and semaphore colour

Thresholds are fixed population tertiles on the 0-100 scale, independent
of domain and sample size. 33 and 66 are inclusive members of the MEDIUM
band for both directions.

Logic:
- POSITIVE: mean > 66 LOW, 33..66 MEDIUM, mean < 33 HIGH
- NEGATIVE: mean < 33 LOW, 33..66 MEDIUM, mean > 66 HIGH

Out-of-range means are not validated; the same rule extrapolates.
"""

import logging

from copsoq.domain.catalog import get_domain
from copsoq.domain.models import (
    Direction,
    DomainScore,
    DomainStatistics,
    RiskCategory,
    RiskClassification,
    Semaphore,
)

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------
# Thresholds
# -------------------------------------------------------------------

LOWER_THRESHOLD = 33.0
UPPER_THRESHOLD = 66.0

# -------------------------------------------------------------------
# Lookup Tables
# -------------------------------------------------------------------

SEMAPHORE_BY_CATEGORY = {
    RiskCategory.LOW: Semaphore.GREEN,
    RiskCategory.MEDIUM: Semaphore.YELLOW,
    RiskCategory.HIGH: Semaphore.RED,
}

LABEL_BY_CATEGORY = {
    RiskCategory.LOW: "Excelente",
    RiskCategory.MEDIUM: "Monitorar",
    RiskCategory.HIGH: "Atenção Necessária",
}

ACTION_BY_SEMAPHORE = {
    Semaphore.GREEN: "Manter; monitorar anualmente",
    Semaphore.YELLOW: "Atenção; intervenções preventivas (treinamentos)",
    Semaphore.RED: "Ação imediata; plano de mitigação (PGR/NR-1)",
}

INSUFFICIENT_DATA_ACTION = "Dados insuficientes para avaliação"

# Zero-response domains read LOW/GREEN regardless of direction
INSUFFICIENT_DATA_CLASSIFICATION = RiskClassification(
    category=RiskCategory.LOW,
    semaphore=Semaphore.GREEN,
)


class RiskClassifier:
    """
    Risk Classifier
    Flat decision table over (mean, direction)
    """

    def classify(self, mean: float, direction: Direction) -> RiskClassification:
        """
        Classify a mean for a scale direction

        Args:
            mean: Domain mean on the 0-100 scale
            direction: Scale direction of the domain

        Returns:
            RiskClassification with category and semaphore
        """
        category = self._determine_category(mean, direction)
        return RiskClassification(
            category=category,
            semaphore=SEMAPHORE_BY_CATEGORY[category],
        )

    @staticmethod
    def _determine_category(mean: float, direction: Direction) -> RiskCategory:
        if LOWER_THRESHOLD <= mean <= UPPER_THRESHOLD:
            return RiskCategory.MEDIUM

        if direction == Direction.POSITIVE:
            return RiskCategory.LOW if mean > UPPER_THRESHOLD else RiskCategory.HIGH

        # NEGATIVE
        return RiskCategory.LOW if mean < LOWER_THRESHOLD else RiskCategory.HIGH

    def classify_domain(self, stats: DomainStatistics) -> DomainScore:
        """
        Classify aggregated statistics into a DomainScore

        Domains without responses keep mean 0 and read LOW/GREEN for either
        direction, with an insufficient-data action instead of the tier action.
        """
        if stats.has_data:
            classification = self.classify(stats.mean, stats.direction)
            action = recommended_action(classification.semaphore)
        else:
            logger.debug("Domain %s has no responses", stats.domain_id)
            classification = INSUFFICIENT_DATA_CLASSIFICATION
            action = INSUFFICIENT_DATA_ACTION

        return DomainScore(
            domain_id=stats.domain_id,
            domain_name=stats.domain_name,
            direction=stats.direction,
            mean=stats.mean,
            std_dev=stats.std_dev,
            mean_minus_sd=stats.mean_minus_sd,
            mean_plus_sd=stats.mean_plus_sd,
            risk_category=classification.category,
            semaphore=classification.semaphore,
            recommended_action=action,
            description=_describe(stats.domain_id),
            response_count=stats.response_count,
            label=category_label(classification.category),
        )

    def classify_all(self, statistics: list[DomainStatistics]) -> list[DomainScore]:
        return [self.classify_domain(stats) for stats in statistics]


def classify(mean: float, direction: Direction) -> RiskClassification:
    """Module-level shortcut for RiskClassifier().classify."""
    return RiskClassifier().classify(mean, direction)


def recommended_action(semaphore: Semaphore) -> str:
    return ACTION_BY_SEMAPHORE[semaphore]


def category_label(category: RiskCategory) -> str:
    return LABEL_BY_CATEGORY[category]


def _describe(domain_id: int) -> str:
    try:
        return get_domain(domain_id).description
    except ValueError:
        return ""

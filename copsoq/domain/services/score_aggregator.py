"""
SCORE AGGREGATOR (ENGINE-1)
Compute per-domain statistics from item responses (NOT classification)

RESPONSIBILITIES:
- Group responses by domain
- Calculate mean and population standard deviation
- Calculate the mean +/- SD band
- Always cover every catalog domain

RULES:
❌ No risk classification
❌ No clamping of the band to 0-100
❌ No I/O, no hidden state
✅ Pure calculation
✅ Deterministic output, catalog order
"""

import logging
from collections import defaultdict
from typing import Iterable, Sequence

from copsoq.domain.catalog import DOMAIN_CATALOG
from copsoq.domain.models import DomainDefinition, DomainStatistics, ItemResponse

logger = logging.getLogger(__name__)


class ScoreAggregator:
    """
    Score Aggregator
    Turns raw item responses into one DomainStatistics per domain
    """

    def __init__(self, catalog: Sequence[DomainDefinition] = DOMAIN_CATALOG):
        """Initialize with the domain catalog to cover"""
        self.catalog = tuple(catalog)

    def aggregate(self, responses: Iterable[ItemResponse]) -> list[DomainStatistics]:
        """
        Aggregate responses into per-domain statistics

        Args:
            responses: Item responses in any order, any subset of domains

        Returns:
            One DomainStatistics per catalog domain, in catalog order.
            Domains without responses carry mean = std_dev = 0.
        """
        values_by_domain = self._group_by_domain(responses)

        known_ids = {domain.id for domain in self.catalog}
        unknown = sorted(set(values_by_domain) - known_ids)
        if unknown:
            logger.debug("Ignoring responses for unknown domains: %s", unknown)

        return [
            self._domain_statistics(domain, values_by_domain.get(domain.id, []))
            for domain in self.catalog
        ]

    @staticmethod
    def _group_by_domain(responses: Iterable[ItemResponse]) -> dict[int, list[float]]:
        grouped: dict[int, list[float]] = defaultdict(list)
        for response in responses:
            grouped[response.domain_id].append(float(response.value))
        return grouped

    @classmethod
    def _domain_statistics(
        cls,
        domain: DomainDefinition,
        values: list[float]
    ) -> DomainStatistics:
        mean = cls._calculate_mean(values)
        std_dev = cls._calculate_std_dev(values, mean)

        return DomainStatistics(
            domain_id=domain.id,
            domain_name=domain.name,
            direction=domain.direction,
            response_count=len(values),
            mean=mean,
            std_dev=std_dev,
            mean_minus_sd=mean - std_dev,
            mean_plus_sd=mean + std_dev,
        )

    @staticmethod
    def _calculate_mean(values: list[float]) -> float:
        """
        Arithmetic mean

        Returns 0 for an empty list (insufficient data)
        """
        if not values:
            return 0.0
        return sum(values) / len(values)

    @staticmethod
    def _calculate_std_dev(values: list[float], mean: float) -> float:
        """
        Population standard deviation

        Formula: sqrt(sum((x - mean)^2) / n)
        """
        if not values:
            return 0.0
        var = sum((x - mean) ** 2 for x in values) / len(values)
        return var ** 0.5


def aggregate(responses: Iterable[ItemResponse]) -> list[DomainStatistics]:
    """Aggregate responses against the default COPSOQ catalog."""
    return ScoreAggregator().aggregate(responses)

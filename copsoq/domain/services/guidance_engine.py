"""
GUIDANCE ENGINE
Load, validate, and expose per-domain guidance texts

RESPONSIBILITIES:
- Load guidance YAML
- Validate that every catalog domain has every score level
- Pick the guidance text for a classified domain
- Expose explanation and management tips per domain

RULES:
❌ No defaults if guidance missing
✅ Fail fast on invalid config
✅ Read-only after load
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

import yaml

from copsoq.domain.catalog import DOMAIN_IDS, get_domain, is_valid_domain
from copsoq.domain.exceptions import GuidanceConfigError
from copsoq.domain.models import Direction, DomainScore, RiskCategory

logger = logging.getLogger(__name__)

DEFAULT_GUIDANCE_FILE = Path(__file__).resolve().parents[2] / "data" / "guidance.yml"

SCORE_LEVELS = ("baixo", "medio", "alto")

# Risk tier -> raw score level, per direction
_LEVEL_BY_RISK = {
    Direction.NEGATIVE: {
        RiskCategory.LOW: "baixo",
        RiskCategory.MEDIUM: "medio",
        RiskCategory.HIGH: "alto",
    },
    Direction.POSITIVE: {
        RiskCategory.LOW: "alto",
        RiskCategory.MEDIUM: "medio",
        RiskCategory.HIGH: "baixo",
    },
}


@dataclass(frozen=True)
class DomainGuidance:
    """Guidance texts for one domain"""
    domain_id: int
    name: str
    explanation: str
    management: str
    levels: Mapping[str, str]

    def for_level(self, level: str) -> str:
        return self.levels[level]


@dataclass(frozen=True)
class GuidanceSheet:
    """Everything the laudo shows for one classified domain"""
    domain_id: int
    name: str
    explanation: str
    management: str
    level: str
    guidance: str


class GuidanceEngine:
    """
    Guidance Engine
    Single source of truth for domain guidance texts
    """

    def __init__(self, guidance_file: Optional[Path] = None):
        """Initialize with guidance file (packaged default when None)"""
        self.guidance_file = Path(guidance_file) if guidance_file else DEFAULT_GUIDANCE_FILE
        self._guidance: Optional[Mapping[int, DomainGuidance]] = None
        self._version: Optional[str] = None

    def load(self) -> "GuidanceEngine":
        """Load and validate the guidance file"""
        if not self.guidance_file.exists():
            raise GuidanceConfigError(f"Guidance config not found: {self.guidance_file}")

        with open(self.guidance_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        entries = data.get("domains")
        if not isinstance(entries, list):
            raise GuidanceConfigError(
                f"Invalid guidance format in {self.guidance_file}. Expected a 'domains' list."
            )

        guidance = {}
        for entry in entries:
            item = self._parse_entry(entry)
            if item.domain_id in guidance:
                raise GuidanceConfigError(f"Duplicate guidance for domain {item.domain_id}")
            guidance[item.domain_id] = item

        missing = [domain_id for domain_id in DOMAIN_IDS if domain_id not in guidance]
        if missing:
            raise GuidanceConfigError(f"Guidance missing for domains: {missing}")

        self._guidance = MappingProxyType(guidance)
        self._version = str(data.get("version", ""))
        logger.info(
            "Loaded guidance for %d domains (version %s)", len(guidance), self._version or "n/a"
        )
        return self

    @staticmethod
    def _parse_entry(entry) -> DomainGuidance:
        if not isinstance(entry, dict) or "id" not in entry:
            raise GuidanceConfigError(f"Invalid guidance entry: {entry!r}")

        domain_id = entry["id"]
        if not is_valid_domain(domain_id):
            raise GuidanceConfigError(f"Guidance for unknown domain: {domain_id}")

        name = entry.get("name") or get_domain(domain_id).name
        if name != get_domain(domain_id).name:
            raise GuidanceConfigError(
                f"Guidance name for domain {domain_id} does not match catalog: {name!r}"
            )

        levels = entry.get("levels") or {}
        absent = [level for level in SCORE_LEVELS if not levels.get(level)]
        if absent:
            raise GuidanceConfigError(
                f"Guidance for domain {domain_id} missing levels: {absent}"
            )

        return DomainGuidance(
            domain_id=domain_id,
            name=name,
            explanation=entry.get("explanation", ""),
            management=entry.get("management", ""),
            levels=MappingProxyType({level: levels[level] for level in SCORE_LEVELS}),
        )

    # Public getters

    @property
    def version(self) -> str:
        if self._version is None:
            raise RuntimeError("Guidance not loaded. Call load() first")
        return self._version

    def get(self, domain_id: int) -> DomainGuidance:
        """Guidance for a domain id"""
        if self._guidance is None:
            raise RuntimeError("Guidance not loaded. Call load() first")
        try:
            return self._guidance[domain_id]
        except KeyError:
            raise ValueError(f"No guidance for domain: {domain_id}") from None

    def guidance_for(self, score: DomainScore) -> str:
        """
        Guidance text matching a classified domain

        The YAML is keyed by raw score level, so the risk tier is mapped
        through the domain direction first.
        """
        level = score_level(score.risk_category, score.direction)
        return self.get(score.domain_id).for_level(level)

    def sheet_for(self, score: DomainScore) -> GuidanceSheet:
        """Explanation, management tips and tier guidance for a classified domain"""
        level = score_level(score.risk_category, score.direction)
        guidance = self.get(score.domain_id)
        return GuidanceSheet(
            domain_id=guidance.domain_id,
            name=guidance.name,
            explanation=guidance.explanation,
            management=guidance.management,
            level=level,
            guidance=guidance.for_level(level),
        )


def score_level(category: RiskCategory, direction: Direction) -> str:
    """Raw score level ('baixo' / 'medio' / 'alto') for a risk tier"""
    return _LEVEL_BY_RISK[direction][category]

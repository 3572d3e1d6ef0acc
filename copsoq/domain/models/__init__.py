"""
Domain Models Package
Export all domain entities
"""

from .entities import (
    # Enums
    Direction,
    LaudoStatus,
    RiskCategory,
    Semaphore,

    # Entities
    ConclusionSection,
    DomainDefinition,
    DomainScore,
    DomainStatistics,
    EntityMeta,
    InterpretationResult,
    IssuerSignature,
    ItemResponse,
    ReportPayload,
    RiskClassification,
)

__all__ = [
    # Enums
    "Direction",
    "LaudoStatus",
    "RiskCategory",
    "Semaphore",

    # Entities
    "ConclusionSection",
    "DomainDefinition",
    "DomainScore",
    "DomainStatistics",
    "EntityMeta",
    "InterpretationResult",
    "IssuerSignature",
    "ItemResponse",
    "ReportPayload",
    "RiskClassification",
]

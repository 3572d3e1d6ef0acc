"""
LAUDO SERVICE
Orchestrates scoring, classification, interpretation and assembly for one
report-generation request.

Data access stays with the caller: the service either receives the data
directly (build_report) or reads it through a LaudoDataSource (generate).
"""

import logging
from datetime import date
from typing import Iterable, Optional, Protocol

from copsoq.config import settings
from copsoq.domain.exceptions import LaudoNotReadyError, ObservationsLockedError
from copsoq.domain.models import (
    DomainScore,
    EntityMeta,
    IssuerSignature,
    ItemResponse,
    LaudoStatus,
    ReportPayload,
)
from copsoq.domain.services.guidance_engine import GuidanceEngine, GuidanceSheet
from copsoq.domain.services.interpretation_composer import InterpretationComposer
from copsoq.domain.services.laudo_lifecycle import can_edit_observations
from copsoq.domain.services.report_assembler import ReportAssembler
from copsoq.domain.services.risk_classifier import RiskClassifier
from copsoq.domain.services.score_aggregator import ScoreAggregator

logger = logging.getLogger(__name__)


class LaudoDataSource(Protocol):
    """Protocol for the data a laudo is built from"""

    def get_entity_meta(self, lote_id: int) -> EntityMeta:
        """General data of the company and batch"""
        ...

    def get_responses(self, lote_id: int) -> list[ItemResponse]:
        """Responses of completed evaluations in the batch"""
        ...

    def get_observations(self, lote_id: int) -> Optional[str]:
        """Issuer observations from the laudo draft, None when absent"""
        ...

    def get_status(self, lote_id: int) -> LaudoStatus:
        """Current laudo status"""
        ...

    def save_observations(self, lote_id: int, observations: Optional[str]) -> None:
        """Persist issuer observations for the laudo draft"""
        ...


def default_signature() -> IssuerSignature:
    return IssuerSignature(
        name=settings.ISSUER_NAME,
        title=settings.ISSUER_TITLE,
        registry=settings.ISSUER_REGISTRY,
        organization=settings.ISSUER_ORGANIZATION,
    )


class LaudoService:
    """
    Laudo Service
    Wires the four engines together
    """

    def __init__(
        self,
        aggregator: Optional[ScoreAggregator] = None,
        classifier: Optional[RiskClassifier] = None,
        composer: Optional[InterpretationComposer] = None,
        assembler: Optional[ReportAssembler] = None,
        guidance: Optional[GuidanceEngine] = None,
        signature: Optional[IssuerSignature] = None,
        city: Optional[str] = None,
    ):
        self.aggregator = aggregator or ScoreAggregator()
        self.classifier = classifier or RiskClassifier()
        self.composer = composer or InterpretationComposer()
        self.assembler = assembler or ReportAssembler()
        self.guidance = guidance
        self.signature = signature or default_signature()
        self.city = city or settings.REPORT_CITY

    def score_domains(self, responses: Iterable[ItemResponse]) -> list[DomainScore]:
        """Aggregate responses and classify every catalog domain"""
        statistics = self.aggregator.aggregate(responses)
        return self.classifier.classify_all(statistics)

    def build_report(
        self,
        entity: EntityMeta,
        responses: Iterable[ItemResponse],
        observations: Optional[str] = None,
        issued_on: Optional[date] = None,
        status: LaudoStatus = LaudoStatus.DRAFT,
    ) -> ReportPayload:
        """
        Full pipeline for one entity

        Args:
            entity: General data about the company and batch
            responses: Responses of completed evaluations
            observations: Issuer observations as stored, None when absent.
                Rendering an issued or sent laudo keeps them; changing them
                goes through edit_observations.
            issued_on: Date on the issue line (today when None)
            status: Current laudo status

        Raises:
            LaudoNotReadyError: if the batch still has incomplete evaluations
        """
        if not entity.is_ready:
            raise LaudoNotReadyError(
                f"Batch for {entity.company_name} is not ready: "
                f"{entity.completed_evaluations}/{entity.total_evaluations} evaluations complete"
            )

        scores = self.score_domains(responses)
        interpretation = self.composer.compose(entity.company_name, scores)
        conclusion = self.assembler.build_conclusion(
            issued_on=issued_on or date.today(),
            city=self.city,
            signature=self.signature,
        )

        payload = self.assembler.assemble(
            entity,
            scores,
            interpretation,
            observations,
            conclusion=conclusion,
            status=status,
        )

        logger.info(
            "Laudo built for %s: %d low, %d medium, %d high risk domains",
            entity.company_name,
            len(interpretation.low_risk_domains),
            len(interpretation.medium_risk_domains),
            len(interpretation.high_risk_domains),
        )
        return payload

    def generate(self, source: LaudoDataSource, lote_id: int, issued_on: Optional[date] = None) -> ReportPayload:
        """Read everything for a batch from the data source and build the laudo"""
        entity = source.get_entity_meta(lote_id)
        return self.build_report(
            entity,
            source.get_responses(lote_id),
            observations=source.get_observations(lote_id),
            issued_on=issued_on,
            status=source.get_status(lote_id),
        )

    def edit_observations(self, source: LaudoDataSource, lote_id: int, observations: Optional[str]) -> None:
        """
        Store new issuer observations for a batch

        Raises:
            ObservationsLockedError: if the laudo is no longer a draft
        """
        status = source.get_status(lote_id)
        if not can_edit_observations(status):
            raise ObservationsLockedError(
                f"Observations of lote {lote_id} cannot be edited in status {status.value}"
            )
        source.save_observations(lote_id, observations)
        logger.info("Observations updated for lote %s", lote_id)

    def guidance_for(self, score: DomainScore) -> str:
        """Guidance text for a classified domain"""
        return self._guidance_engine().guidance_for(score)

    def guidance_sheet(self, score: DomainScore) -> GuidanceSheet:
        """Explanation, management tips and guidance text for a classified domain"""
        return self._guidance_engine().sheet_for(score)

    def _guidance_engine(self) -> GuidanceEngine:
        # Loaded on first use
        if self.guidance is None:
            self.guidance = GuidanceEngine(settings.GUIDANCE_FILE).load()
        return self.guidance

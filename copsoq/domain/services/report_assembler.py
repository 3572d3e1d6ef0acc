"""
REPORT DATA ASSEMBLER (ENGINE-4)
Merge entity data, scores and interpretation into a laudo payload

RULES:
❌ No recomputation of scores or classification
❌ No consistency check between scores and interpretation
❌ No I/O
✅ Absent observations stay absent (None), empty stays empty
"""

from datetime import date
from typing import Iterable, Optional, Sequence

from copsoq.domain.models import (
    ConclusionSection,
    DomainScore,
    EntityMeta,
    InterpretationResult,
    IssuerSignature,
    LaudoStatus,
    ReportPayload,
)

DISCLAIMER_TEXT = (
    "Este laudo, por si só, não pode diagnosticar uma patologia, mas pode "
    "indicar a presença de sintomas, do ponto de vista coletivo.\n"
    "Um diagnóstico clínico de cada avaliado somente pode ser feito pelo seu "
    "psicólogo, médico do trabalho, psiquiatra ou outro profissional de saúde "
    "qualificado.\n\n"
    "Declaro que os dados são estritamente agregados e anônimos, em "
    "conformidade com a LGPD e o Código de Ética Profissional do Psicólogo."
)

MONTHS_PT_BR = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)


class ReportAssembler:
    """
    Report Data Assembler
    Pure merge of already computed laudo sections
    """

    def assemble(
        self,
        entity: EntityMeta,
        domain_scores: Sequence[DomainScore],
        interpretation: InterpretationResult,
        observations: Optional[str] = None,
        *,
        conclusion: Optional[ConclusionSection] = None,
        status: LaudoStatus = LaudoStatus.DRAFT,
    ) -> ReportPayload:
        """
        Assemble the report payload

        Args:
            entity: General data about the assessed company
            domain_scores: Classified scores (expected: the 10 catalog domains)
            interpretation: Output of the interpretation composer
            observations: Free text from the issuer, None when not provided
            conclusion: Closing section, when the caller has one
            status: Current laudo status

        Returns:
            ReportPayload ready for rendering
        """
        return ReportPayload(
            entity=entity,
            domain_scores=list(domain_scores),
            interpretation=interpretation,
            observations=observations,
            conclusion=conclusion,
            status=status,
        )

    @staticmethod
    def build_conclusion(
        issued_on: date,
        city: str,
        signature: IssuerSignature,
    ) -> ConclusionSection:
        """Closing section with disclaimer, issue line and signature"""
        return ConclusionSection(
            text=DISCLAIMER_TEXT,
            issue_line=f"{city}, {format_long_date(issued_on)}",
            signature=signature,
        )


def assemble(
    entity: EntityMeta,
    domain_scores: Sequence[DomainScore],
    interpretation: InterpretationResult,
    observations: Optional[str] = None,
) -> ReportPayload:
    """Module-level shortcut for ReportAssembler().assemble."""
    return ReportAssembler().assemble(entity, domain_scores, interpretation, observations)


def format_long_date(value: date) -> str:
    """
    Portuguese long date, e.g. '05 de março de 2025'

    Independent of the process locale.
    """
    return f"{value.day:02d} de {MONTHS_PT_BR[value.month - 1]} de {value.year}"


def build_address(parts: Iterable[Optional[str]]) -> str:
    """Join the non-empty address parts with ' - '"""
    return " - ".join(part.strip() for part in parts if part and part.strip())

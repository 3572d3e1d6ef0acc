"""
LAUDO LIFECYCLE
Status transitions of a laudo: rascunho -> emitido -> enviado

Persistence of the status belongs to the caller; this module only decides
whether a change is allowed.
"""

from copsoq.domain.exceptions import InvalidLaudoTransitionError
from copsoq.domain.models import LaudoStatus

ALLOWED_TRANSITIONS = {
    LaudoStatus.DRAFT: (LaudoStatus.ISSUED,),
    LaudoStatus.ISSUED: (LaudoStatus.SENT,),
    LaudoStatus.SENT: (),
}


def can_transition(current: LaudoStatus, target: LaudoStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]


def transition(current: LaudoStatus, target: LaudoStatus) -> LaudoStatus:
    """
    Validate a status change and return the new status.

    Raises:
        InvalidLaudoTransitionError: if the change skips or reverses a step
    """
    if not can_transition(current, target):
        raise InvalidLaudoTransitionError(
            f"Cannot move laudo from {current.value} to {target.value}"
        )
    return target


def can_edit_observations(status: LaudoStatus) -> bool:
    """Observations are editable only while the laudo is a draft"""
    return status == LaudoStatus.DRAFT

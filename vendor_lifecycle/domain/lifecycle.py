"""
Vendor lifecycle rules.

A small fixed state machine: which statuses may follow each status, and
which actor may drive each edge. Everything here is pure; applying a
transition to a stored company lives in
``vendor_lifecycle.app.services.lifecycle_state_machine``.
"""

from datetime import datetime
from typing import Dict, FrozenSet, List, Optional, Tuple

from pydantic import BaseModel

from vendor_lifecycle.domain import errors
from vendor_lifecycle.domain.entities import ActorRole, VendorStatus
from vendor_lifecycle.libs.result import Error

# ---------------------------------------------------------------------
# Allowed transitions: source status -> set[valid target statuses]
# ---------------------------------------------------------------------
SUCCESSORS: Dict[VendorStatus, FrozenSet[VendorStatus]] = {
    VendorStatus.profile_pending: frozenset(
        {VendorStatus.profile_approved, VendorStatus.profile_rejected}
    ),
    VendorStatus.profile_approved: frozenset(
        {VendorStatus.onboarding_in_progress, VendorStatus.suspended}
    ),
    VendorStatus.onboarding_in_progress: frozenset(
        {VendorStatus.fully_approved, VendorStatus.suspended}
    ),
    VendorStatus.fully_approved: frozenset({VendorStatus.suspended}),
    VendorStatus.profile_rejected: frozenset(),
    VendorStatus.suspended: frozenset(),
}

TERMINAL_STATUSES: FrozenSet[VendorStatus] = frozenset(
    status for status, targets in SUCCESSORS.items() if not targets
)

_ADMIN_ONLY = frozenset({ActorRole.admin})

# Edges that are not admin-only
EDGE_ACTORS: Dict[Tuple[VendorStatus, VendorStatus], FrozenSet[ActorRole]] = {
    (VendorStatus.profile_pending, VendorStatus.profile_rejected): frozenset(
        {ActorRole.admin, ActorRole.system}
    ),
    (VendorStatus.profile_approved, VendorStatus.onboarding_in_progress): frozenset(
        {ActorRole.system}
    ),
}


def successors(status: VendorStatus) -> FrozenSet[VendorStatus]:
    return SUCCESSORS.get(status, frozenset())


def is_terminal(status: VendorStatus) -> bool:
    return status in TERMINAL_STATUSES


def allowed_actors(current: VendorStatus, target: VendorStatus) -> FrozenSet[ActorRole]:
    return EDGE_ACTORS.get((current, target), _ADMIN_ONLY)


def check_transition(
    current: VendorStatus, target: VendorStatus, actor: ActorRole
) -> Optional[Error]:
    """
    Definitive transition check. Returns None when the move is legal for
    this actor, otherwise the error to hand back to the caller.

    Legality is checked before the actor so that an illegal move is always
    reported as INVALID_TRANSITION, whoever asked for it.
    """
    if target not in successors(current):
        return Error(
            errors.INVALID_TRANSITION,
            f"Cannot move from {current.value} to {target.value}",
        )
    if actor not in allowed_actors(current, target):
        return Error(
            errors.UNAUTHORIZED,
            f"{actor.value} may not move a company from {current.value} to {target.value}",
        )
    return None


def record_first_entry(
    timestamps: Optional[Dict[str, str]], status: VendorStatus, at: datetime
) -> Dict[str, str]:
    """Return a new timestamp map with ``status`` added unless already present."""
    updated = dict(timestamps or {})
    updated.setdefault(status.value, at.isoformat())
    return updated


# ---------------------------------------------------------------------
# Timeline view
# ---------------------------------------------------------------------


class TimelineStage(BaseModel):
    id: str
    title: str
    state: str  # completed | current | upcoming | rejected
    entered_at: Optional[str] = None


_STAGES: List[Tuple[str, str, VendorStatus]] = [
    ("profile_submission", "Profile Submission", VendorStatus.profile_pending),
    ("profile_review", "Profile Review", VendorStatus.profile_approved),
    ("onboarding", "Onboarding Process", VendorStatus.onboarding_in_progress),
    ("final_approval", "Final Approval", VendorStatus.fully_approved),
]

_STAGE_STATES: Dict[VendorStatus, Tuple[str, str, str, str]] = {
    VendorStatus.profile_pending: ("current", "upcoming", "upcoming", "upcoming"),
    VendorStatus.profile_approved: ("completed", "completed", "current", "upcoming"),
    VendorStatus.profile_rejected: ("completed", "rejected", "upcoming", "upcoming"),
    VendorStatus.onboarding_in_progress: ("completed", "completed", "current", "upcoming"),
    VendorStatus.fully_approved: ("completed", "completed", "completed", "completed"),
}


def build_timeline(
    status: VendorStatus, timestamps: Optional[Dict[str, str]]
) -> List[TimelineStage]:
    timestamps = timestamps or {}
    if status == VendorStatus.suspended:
        # Suspension freezes progress: stages reached stay completed
        states = tuple(
            "completed" if stage_status.value in timestamps else "upcoming"
            for _, _, stage_status in _STAGES
        )
    else:
        states = _STAGE_STATES[status]

    stages = []
    for (stage_id, title, stage_status), state in zip(_STAGES, states):
        entered_at = timestamps.get(stage_status.value)
        if stage_id == "profile_review" and state == "rejected":
            entered_at = timestamps.get(VendorStatus.profile_rejected.value)
        stages.append(
            TimelineStage(id=stage_id, title=title, state=state, entered_at=entered_at)
        )
    return stages

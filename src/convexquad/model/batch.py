"""
Batch Evaluation (Run State)
============================
Evaluates a sequence of candidate point sets and keeps the outcome of a run.

Why is this file needed?
------------------------
1. Bookkeeping: it holds the accepted quadrilaterals, the rejections and the
   malformed inputs of one run in one place, each tagged with the position
   of the candidate in the input.
2. Winner selection: the quadrilateral with the largest perimeter is a query
   over the accepted list (a left-to-right fold), never a stored entity.

Classes:
    RunOutcome: How a run ended.
    MalformedCandidate: An input block the I/O layer could not turn into points.
    AcceptedCandidate / RejectedCandidate: Per-candidate results with their index.
    BatchResult: The container for one run.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging
from typing import Iterable, Optional, Sequence

from convexquad.config import EPSILON
from convexquad.model.ordering import OrderingStrategy
from convexquad.model.quadrilateral import ConvexQuadrilateral, RawPoint, evaluate_candidate
from convexquad.model.validation import Rejection

logger = logging.getLogger(__name__)


class RunOutcome(StrEnum):
    WINNER = "winner"
    NO_VALID = "no valid quadrilateral"
    NO_CANDIDATES = "no candidates"
    ALL_MALFORMED = "all inputs malformed"


@dataclass(frozen=True)
class MalformedCandidate:
    index: int
    message: str


@dataclass(frozen=True)
class AcceptedCandidate:
    index: int
    quadrilateral: ConvexQuadrilateral


@dataclass(frozen=True)
class RejectedCandidate:
    index: int
    rejection: Rejection


def select_winner(quadrilaterals: Sequence[ConvexQuadrilateral]) -> Optional[int]:
    """
    Position of the quadrilateral with the strictly greatest perimeter.

    On an exact tie the first one encountered wins. An empty sequence has no
    winner and yields None.
    """
    best_index: Optional[int] = None
    best_perimeter = 0.0
    for i, quad in enumerate(quadrilaterals):
        if best_index is None or quad.perimeter > best_perimeter:
            best_index = i
            best_perimeter = quad.perimeter
    return best_index


@dataclass
class BatchResult:
    """
    Outcome of evaluating every candidate of one run.

    `index` fields refer to the candidate's position in the input (0-based),
    counting malformed candidates too.
    """
    accepted: list[AcceptedCandidate] = field(default_factory=list)
    rejected: list[RejectedCandidate] = field(default_factory=list)
    malformed: list[MalformedCandidate] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.accepted) + len(self.rejected) + len(self.malformed)

    @property
    def quadrilaterals(self) -> list[ConvexQuadrilateral]:
        return [a.quadrilateral for a in self.accepted]

    @property
    def winner(self) -> Optional[AcceptedCandidate]:
        position = select_winner(self.quadrilaterals)
        if position is None:
            return None
        return self.accepted[position]

    @property
    def outcome(self) -> RunOutcome:
        if self.accepted:
            return RunOutcome.WINNER
        if self.total == 0:
            return RunOutcome.NO_CANDIDATES
        if not self.rejected:
            return RunOutcome.ALL_MALFORMED
        return RunOutcome.NO_VALID

    def record(self, index: int, result: ConvexQuadrilateral | Rejection) -> None:
        if isinstance(result, ConvexQuadrilateral):
            self.accepted.append(AcceptedCandidate(index, result))
        else:
            self.rejected.append(RejectedCandidate(index, result))

    def record_malformed(self, index: int, message: str) -> None:
        self.malformed.append(MalformedCandidate(index, message))

    def results_in_order(self) -> list[AcceptedCandidate | RejectedCandidate | MalformedCandidate]:
        """All per-candidate entries sorted by input position."""
        entries: list[AcceptedCandidate | RejectedCandidate | MalformedCandidate] = [
            *self.accepted, *self.rejected, *self.malformed
        ]
        return sorted(entries, key=lambda e: e.index)


def evaluate_batch(
    candidates: Iterable[Sequence[RawPoint] | MalformedCandidate],
    strategy: OrderingStrategy = OrderingStrategy.HULL,
    eps: float = EPSILON,
) -> BatchResult:
    """
    Evaluate every candidate in input order.

    Args:
        candidates: Point sets, or MalformedCandidate placeholders produced by
                    the parser for blocks it could not read. A placeholder's
                    own index is ignored in favour of its input position.
        strategy: Vertex ordering strategy applied to every candidate.
        eps: Tolerance shared by every comparison.

    Returns:
        The BatchResult of the run. A rejection never stops the run.
    """
    batch = BatchResult()
    for index, candidate in enumerate(candidates):
        if isinstance(candidate, MalformedCandidate):
            batch.record_malformed(index, candidate.message)
            continue
        batch.record(index, evaluate_candidate(candidate, strategy=strategy, eps=eps))

    logger.info(
        f"Evaluated {batch.total} candidates: {len(batch.accepted)} accepted, "
        f"{len(batch.rejected)} rejected, {len(batch.malformed)} malformed ({batch.outcome})."
    )
    return batch

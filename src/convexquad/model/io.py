"""
Input/Output Manager (Text & JSON)
Reads candidate quadrilaterals from text and renders the outcome of a run.
"""
from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, Optional, TextIO, Union

from convexquad.config import PERIMETER_DECIMALS, VERTEX_LABELS
from convexquad.model.batch import (
    AcceptedCandidate,
    BatchResult,
    MalformedCandidate,
    RejectedCandidate,
    RunOutcome,
)
from convexquad.model.geometry_primitives import Point
from convexquad.model.validation import QUADRILATERAL_VERTEX_COUNT

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile(r"[,\s]+")

Candidate = Union[list[tuple[float, float]], MalformedCandidate]


class InputFormatError(ValueError):
    pass


def _content_lines(text: str) -> list[tuple[int, str]]:
    """Non-blank, non-comment lines with their 1-based line numbers."""
    lines = []
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if line:
            lines.append((number, line))
    return lines


def parse_pair(line: str) -> tuple[float, float]:
    """Parse 'x y' or 'x, y' into two finite floats."""
    tokens = [t for t in _SEPARATOR.split(line.strip()) if t]
    if len(tokens) != 2:
        raise ValueError(f"expected 2 coordinates, got {len(tokens)}")
    try:
        x, y = float(tokens[0]), float(tokens[1])
    except ValueError:
        raise ValueError(f"non-numeric coordinate in '{line}'") from None
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"coordinates must be finite, got '{line}'")
    return x, y


def parse_candidates(text: str) -> list[Candidate]:
    """
    Parse the quadrilateral count followed by four 'x y' lines per quadrilateral.

    Blank lines and '#' comments are skipped. A block with an unreadable
    line becomes a MalformedCandidate and parsing continues with the next
    block.

    Raises:
        InputFormatError: The count header is missing or invalid, or the text
                          ends before all announced blocks were read.
    """
    lines = _content_lines(text)
    if not lines:
        msg = "Input is empty; expected the number of quadrilaterals on the first line."
        logger.error(msg)
        raise InputFormatError(msg)

    header_number, header = lines[0]
    try:
        count = int(header)
    except ValueError:
        msg = f"Line {header_number}: expected the number of quadrilaterals, got '{header}'."
        logger.error(msg)
        raise InputFormatError(msg) from None
    if count < 0:
        msg = f"Line {header_number}: number of quadrilaterals must be non-negative, got {count}."
        logger.error(msg)
        raise InputFormatError(msg)

    body = lines[1:]
    needed = count * QUADRILATERAL_VERTEX_COUNT
    if len(body) < needed:
        msg = (f"Expected {needed} coordinate lines for {count} quadrilaterals, "
               f"found only {len(body)}.")
        logger.error(msg)
        raise InputFormatError(msg)
    if len(body) > needed:
        logger.warning(f"Ignoring {len(body) - needed} lines after the last quadrilateral.")

    candidates: list[Candidate] = []
    for index in range(count):
        block = body[index * QUADRILATERAL_VERTEX_COUNT:(index + 1) * QUADRILATERAL_VERTEX_COUNT]
        pairs = []
        for label, (number, line) in zip(VERTEX_LABELS, block):
            try:
                pairs.append(parse_pair(line))
            except ValueError as e:
                message = f"line {number}, vertex {label}: {e}"
                logger.warning(f"Quadrilateral #{index + 1} is malformed: {message}")
                candidates.append(MalformedCandidate(index, message))
                break
        else:
            candidates.append(pairs)

    logger.debug(f"Parsed {len(candidates)} candidate quadrilaterals.")
    return candidates


def read_candidates(source: Union[str, TextIO]) -> list[Candidate]:
    """Parse candidates from a file path or an open text stream."""
    if isinstance(source, str):
        logger.info(f"Reading quadrilaterals from: {source}")
        with open(source, "r", encoding="utf-8") as f:
            return parse_candidates(f.read())
    return parse_candidates(source.read())


# ------------------------------------------------------------------------------
# Reports
# ------------------------------------------------------------------------------
def _fmt(value: float, decimals: int = PERIMETER_DECIMALS) -> str:
    return f"{value:.{decimals}f}"


def format_report(batch: BatchResult, decimals: int = PERIMETER_DECIMALS) -> str:
    lines = []
    for entry in batch.results_in_order():
        prefix = f"Quadrilateral #{entry.index + 1}"
        if isinstance(entry, AcceptedCandidate):
            lines.append(f"{prefix}: perimeter = {_fmt(entry.quadrilateral.perimeter, decimals)}")
        elif isinstance(entry, RejectedCandidate):
            lines.append(f"{prefix}: rejected ({entry.rejection})")
        else:
            lines.append(f"{prefix}: malformed input ({entry.message})")

    winner = batch.winner
    lines.append("")
    if winner is None:
        lines.append("No valid quadrilateral.")
        if batch.outcome != RunOutcome.NO_VALID:
            lines.append(f"Reason: {batch.outcome}.")
    else:
        lines.append(f"Largest perimeter: quadrilateral #{winner.index + 1}")
        lines.append(winner.quadrilateral.describe())
        lines.append(f"Maximum perimeter = {_fmt(winner.quadrilateral.perimeter, decimals)}")
    return "\n".join(lines)


def _point_to_dict(point: Point) -> dict[str, float]:
    return {"x": point.x, "y": point.y}


def report_to_dict(batch: BatchResult) -> dict[str, Any]:
    winner = batch.winner
    winner_index: Optional[int] = winner.index if winner is not None else None
    return {
        "outcome": batch.outcome.value,
        "accepted": [
            {
                "index": a.index,
                "vertices": [_point_to_dict(p) for p in a.quadrilateral.vertices],
                "perimeter": a.quadrilateral.perimeter,
                "orientation": a.quadrilateral.orientation.value,
            }
            for a in batch.accepted
        ],
        "rejected": [
            {"index": r.index, "reason": r.rejection.reason.value, "detail": r.rejection.detail}
            for r in batch.rejected
        ],
        "malformed": [{"index": m.index, "message": m.message} for m in batch.malformed],
        "winner": winner_index,
    }


def report_to_json(batch: BatchResult) -> str:
    return json.dumps(report_to_dict(batch), indent=2)

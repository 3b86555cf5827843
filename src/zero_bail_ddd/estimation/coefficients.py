"""Event-study coefficient extraction.

pyfixest labels ``i(var, inter)`` coefficients as text. Depending on the
version the label reads ``var::level:inter`` or
``C(var, contr.treatment(base=ref))[T.level]:inter``. ``parse_term``
turns either form into a structured ``(factor, level, interaction)``
triple; everything downstream works on that.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

import pandas as pd

from ..visualization._style import get_z

logger = logging.getLogger(__name__)

_NUMBER = r"-?\d+(?:\.\d+)?"
_TERM_PATTERNS = (
    re.compile(rf"^(?P<factor>\w+)::(?P<level>{_NUMBER}):(?P<interaction>\w+)$"),
    re.compile(rf"^C\((?P<factor>\w+)[^\[]*\)\[T\.(?P<level>{_NUMBER})\]:(?P<interaction>\w+)$"),
)


class EventStudyExtractionError(ValueError):
    """No event-time × eligibility terms were found in a coefficient table."""


class ParsedTerm(NamedTuple):
    factor: str
    level: int
    interaction: str


def parse_term(term: str) -> ParsedTerm | None:
    """Parse a numeric-level interaction label, or return None."""
    for pattern in _TERM_PATTERNS:
        m = pattern.match(term)
        if m:
            return ParsedTerm(m["factor"], int(float(m["level"])), m["interaction"])
    return None


def extract_event_study(
    coefs: pd.DataFrame,
    event_time_col: str,
    interaction_col: str = "zb_eligible",
    ci: float = 0.95,
    reference: int | None = None,
) -> pd.DataFrame:
    """Select event-time × eligibility terms and attach confidence intervals.

    Parameters
    ----------
    coefs : pd.DataFrame
        Table with ``term``, ``estimate`` and ``std_error`` (see
        ``coefficient_table``).
    event_time_col : str
        Event-time variable used in the formula.
    interaction_col : str
        Eligibility variable the event time is interacted with.
    ci : float
        Confidence level (0.80, 0.90, 0.95 or 0.99).
    reference : int, optional
        If given, add a zero row for the omitted event-time level.

    Returns
    -------
    pd.DataFrame
        ``event_time``, ``estimate``, ``ci_low``, ``ci_high`` sorted by
        ``event_time``.

    Raises
    ------
    EventStudyExtractionError
        If no term matches.
    """
    missing = [col for col in ("term", "estimate", "std_error") if col not in coefs.columns]
    if missing:
        raise ValueError(
            f"Missing required columns: {missing}. "
            f"Available: {sorted(coefs.columns.tolist())}"
        )

    z = get_z(ci)
    rows = []
    for term, estimate, se in coefs[["term", "estimate", "std_error"]].itertuples(index=False):
        parsed = parse_term(str(term))
        if parsed is None:
            continue
        if parsed.factor != event_time_col or parsed.interaction != interaction_col:
            continue
        rows.append({
            "event_time": parsed.level,
            "estimate": float(estimate),
            "ci_low": float(estimate) - z * float(se),
            "ci_high": float(estimate) + z * float(se),
        })

    if not rows:
        raise EventStudyExtractionError(
            f"No '{event_time_col} x {interaction_col}' terms among {len(coefs)} coefficients; "
            "check the formula and the event-time column"
        )

    if reference is not None and reference not in {r["event_time"] for r in rows}:
        rows.append({"event_time": reference, "estimate": 0.0, "ci_low": 0.0, "ci_high": 0.0})

    out = pd.DataFrame(rows).sort_values("event_time").reset_index(drop=True)
    out["event_time"] = out["event_time"].astype(int)
    logger.info("Extracted %s event-study coefficients for %s", len(out), event_time_col)
    return out

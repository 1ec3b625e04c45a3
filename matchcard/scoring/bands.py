from __future__ import annotations

from matchcard import config
from .types import Band


def clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


def ratio(score: float, scale: float) -> float:
    """
    Fraction of the scale achieved, clamped to [0, 1].
    A non-positive scale yields 0.0 rather than dividing by zero.
    """
    if scale <= 0:
        return 0.0
    return clamp01(score / scale)


def rescale_to_overall(score: float, scale: float) -> float:
    """
    Express a score on the 12-point overall scale so one set of cut points
    applies to every sub-score and to the total.
    """
    if scale <= 0:
        return 0.0
    # Multiply before dividing so exact cut points (e.g. 4/6 -> 8) stay exact.
    rescaled = score * config.MAX_MATCH_SCORE / scale
    return min(float(config.MAX_MATCH_SCORE), max(0.0, rescaled))


def percent(score: float, scale: float) -> float:
    return round(ratio(score, scale) * 100.0, 2)


def classify(score: float, scale: float = config.MAX_MATCH_SCORE) -> Band:
    equivalent = rescale_to_overall(score, scale)
    if equivalent >= config.EXCELLENT_CUTOFF:
        return Band.EXCELLENT
    if equivalent >= config.GOOD_CUTOFF:
        return Band.GOOD
    if equivalent >= config.FAIR_CUTOFF:
        return Band.FAIR
    return Band.NEEDS_IMPROVEMENT

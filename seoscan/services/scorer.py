"""
Weighted page score.

Each scored check carries a weight reflecting its SEO impact. The score is
normalized to 0-100:

    score = earned_points / max_possible_points * 100

The weights do not sum to a fixed total; max_possible_points only counts
the checks that were emitted for the page. A pass earns the full weight, a warn 60% of it and a fail nothing. Checks
without a weight (the content-structure checks) are reported but never
scored.
"""

import math
from dataclasses import dataclass, asdict

from seoscan.services.rule_engine import CheckResult, PASS, WARN

WARN_CREDIT = 0.6

WEIGHTS: dict[str, int] = {
    # On-page
    "title-exists": 15,
    "title-length": 5,
    "meta-desc-exists": 15,
    "meta-desc-length": 5,
    "canonical-exists": 15,
    "canonical-host-match": 5,
    "meta-robots-noindex": 15,
    # Social preview
    "og-title": 5,
    "og-description": 5,
    "og-image": 10,
    "twitter-card": 3,
    "twitter-title": 3,
    "twitter-image": 4,
    # Discovery
    "robots-reachable": 10,
    "sitemap-declared": 5,
    "sitemap-fetchable": 5,
}


@dataclass
class ScoreResult:
    score: int
    max: int
    total: int

    def to_dict(self) -> dict:
        return asdict(self)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_score(checks: list[CheckResult]) -> ScoreResult:
    earned = 0.0
    max_points = 0

    for check in checks:
        weight = WEIGHTS.get(check.id)
        if not weight:
            continue

        max_points += weight
        if check.status == PASS:
            earned += weight
        elif check.status == WARN:
            earned += weight * WARN_CREDIT

    score = round_half_up(earned / max_points * 100) if max_points > 0 else 0

    return ScoreResult(score=score, max=max_points, total=round_half_up(earned))

"""Venue recommendation engine."""

from rich.console import Console

from vibefinder.models import AnswerSet, Recommendation, ScoredResult, Venue

from .bands import DEFAULT_BANDS
from .base import BaseBand, ScoringConfig, build_haystack, round_half_up
from .explain import DEFAULT_LOCALE, explain

console = Console()


class RecommendationEngine:
    """Additive band scoring over a venue catalog.

    Scoring is pure: the same venue and answers always give the same score,
    and the catalog is never modified.
    """

    def __init__(
        self,
        config: ScoringConfig | None = None,
        bands: list[BaseBand] | None = None,
        verbose: bool = False,
    ):
        self.config = config or ScoringConfig()
        self.bands = bands if bands is not None else [band(self.config) for band in DEFAULT_BANDS]
        self.verbose = verbose

    @property
    def ceiling(self) -> int:
        return self.config.ceiling

    def score_breakdown(self, venue: Venue, answers: AnswerSet) -> dict[str, int]:
        """Points per band, keyed by band name."""
        haystack = build_haystack(venue)
        return {band.name: band.score(venue, answers, haystack) for band in self.bands}

    def score(self, venue: Venue, answers: AnswerSet) -> int:
        """Total score for one venue."""
        return sum(self.score_breakdown(venue, answers).values())

    def match_percent(self, score: int) -> int:
        """Display percentage of the score against the ceiling, capped at 100."""
        if self.ceiling <= 0:
            return 0
        return min(100, round_half_up(score / self.ceiling * 100))

    def rank(
        self,
        venues: list[Venue],
        answers: AnswerSet,
        locale: str = DEFAULT_LOCALE,
    ) -> list[ScoredResult]:
        """Top-k venues by score, ties kept in catalog order.

        Ordering uses the unrounded total so a 4.7 still beats a 4.6 when
        both round to the same rating points.
        """
        scored: list[tuple[float, ScoredResult]] = []
        for venue in venues:
            haystack = build_haystack(venue)
            breakdown = {band.name: band.score(venue, answers, haystack) for band in self.bands}
            exact = sum(band.exact_score(venue, answers, haystack) for band in self.bands)
            total = sum(breakdown.values())
            if self.verbose:
                bands = ", ".join(f"{name}={points}" for name, points in breakdown.items())
                console.print(f"[dim]  {venue.name or venue.id}: {total} ({bands})[/dim]")
            result = ScoredResult(
                venue=venue,
                score=total,
                match_reason=explain(venue, answers, locale),
                match_percent=self.match_percent(total),
            )
            scored.append((exact, result))

        # list.sort is stable, so equal scores keep catalog order
        scored.sort(key=lambda pair: pair[0], reverse=True)
        return [result for _, result in scored[: self.config.top_k]]

    def recommend(
        self,
        venues: list[Venue],
        answers: AnswerSet,
        locale: str = DEFAULT_LOCALE,
    ) -> Recommendation:
        """Rank venues and wrap the shortlist with the answers that produced it."""
        return Recommendation(
            answers=answers,
            locale=locale,
            results=self.rank(venues, answers, locale),
        )

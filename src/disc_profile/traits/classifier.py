"""Trait classification from questionnaire answers."""

from typing import List, Optional, Sequence

from disc_profile.db.models import (
    TRAIT_ORDER,
    Answer,
    NarrativeBundle,
    ProfileRanking,
    Trait,
    TraitDistribution,
    TraitTally,
)
from disc_profile.traits.catalog import TraitCatalog, get_trait_catalog
from disc_profile.utils.logging import get_logger

logger = get_logger(__name__)

# Entries taken from the primary and secondary trait lists
PRIMARY_SLICE = 3
SECONDARY_SLICE = 2


class InvalidResponsesError(ValueError):
    """Raised when an answer sequence cannot be scored."""


def round_half_up(numerator: int, denominator: int) -> int:
    """Round a non-negative fraction to the nearest integer, halves going up."""
    return (2 * numerator + denominator) // (2 * denominator)


class TraitClassifier:
    """Classify an answer sequence into a DISC profile."""

    def __init__(
        self,
        catalog: Optional[TraitCatalog] = None,
        tie_break: Sequence[Trait] = TRAIT_ORDER,
    ):
        """
        Initialize trait classifier.

        Args:
            catalog: Narrative catalog (uses default if None)
            tie_break: Trait priority applied when percentages are equal
        """
        self.catalog = catalog or get_trait_catalog()
        self.tie_break = list(tie_break)

    def tally(self, answers: Sequence[Answer]) -> TraitTally:
        """Count answers per trait in a single pass."""
        tally = TraitTally()
        for answer in answers:
            tally.increment(answer.trait)
        return tally

    def normalize(self, tally: TraitTally) -> TraitDistribution:
        """
        Convert counts to integer percentages of the total.

        Raises:
            InvalidResponsesError: If the tally is empty
        """
        total = tally.total
        if total == 0:
            raise InvalidResponsesError("Cannot compute a distribution from zero answers")

        return TraitDistribution(
            **{trait.value: round_half_up(100 * tally.get(trait), total) for trait in TRAIT_ORDER}
        )

    def rank(self, distribution: TraitDistribution) -> ProfileRanking:
        """Order traits by descending percentage; ties keep tie-break order."""
        order = sorted(self.tie_break, key=lambda trait: -distribution.get(trait))
        return ProfileRanking(order=order)

    def score(self, answers: Sequence[Answer]) -> NarrativeBundle:
        """
        Score an answer sequence and build its narrative bundle.

        Args:
            answers: Ordered answers of one attempt

        Returns:
            NarrativeBundle for the resulting profile

        Raises:
            InvalidResponsesError: If no answers are given
        """
        if not answers:
            raise InvalidResponsesError("At least one answer is required to compute a profile")

        distribution = self.normalize(self.tally(answers))
        ranking = self.rank(distribution)
        primary = self.catalog.get_trait(ranking.primary)
        secondary = self.catalog.get_trait(ranking.secondary)
        combination = self.catalog.get_combination(ranking.primary, ranking.secondary)

        strengths: List[str] = (
            primary.strengths[:PRIMARY_SLICE] + secondary.strengths[:SECONDARY_SLICE]
        )
        development_areas: List[str] = (
            primary.development_areas[:PRIMARY_SLICE]
            + secondary.development_areas[:SECONDARY_SLICE]
        )

        logger.debug(
            f"Scored {len(answers)} answers: {distribution.as_dict()} -> "
            f"{ranking.primary.value}/{ranking.secondary.value}"
        )
        return NarrativeBundle(
            distribution=distribution,
            ranking=ranking,
            primary_profile=primary.name,
            secondary_profile=secondary.name,
            strengths=strengths,
            development_areas=development_areas,
            behavioral_feedback=primary.feedback,
            secondary_analysis_text=combination.analysis,
            combination_label=combination.label,
            combination_influence_points=list(combination.influence_points),
        )


def score_answers(answers: Sequence[Answer]) -> NarrativeBundle:
    """
    Convenience function to score answers with the default catalog.

    Args:
        answers: Ordered answers of one attempt

    Returns:
        NarrativeBundle for the resulting profile
    """
    classifier = TraitClassifier()
    return classifier.score(answers)

"""Narrative catalog for the DISC traits and their combinations."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel

from disc_profile.db.models import TRAIT_ORDER, Trait
from disc_profile.utils.logging import get_logger

logger = get_logger(__name__)

DATA_DIR = Path(__file__).parent


class TraitDefinition(BaseModel):
    """Narrative content for a single trait."""

    symbol: Trait
    name: str
    strengths: List[str]
    development_areas: List[str]
    feedback: str


class CombinationDefinition(BaseModel):
    """Narrative content for an ordered (primary, secondary) pair."""

    label: str
    analysis: str
    influence_points: List[str]


class TraitCatalog:
    """Static narrative tables keyed by trait and by ordered trait pair."""

    def __init__(
        self,
        traits: List[TraitDefinition],
        combinations: Dict[Tuple[Trait, Trait], CombinationDefinition],
        fallback: CombinationDefinition,
    ):
        self.traits = {t.symbol: t for t in traits}
        self.combinations = combinations
        self.fallback = fallback

        missing = [t for t in TRAIT_ORDER if t not in self.traits]
        if missing:
            raise ValueError(f"Trait catalog is missing traits: {[t.value for t in missing]}")

    @classmethod
    def load_from_file(
        cls,
        traits_path: Optional[Path] = None,
        combinations_path: Optional[Path] = None,
    ) -> "TraitCatalog":
        """Load the trait and combination tables from JSON files."""
        traits_path = traits_path or DATA_DIR / "traits_catalog.json"
        combinations_path = combinations_path or DATA_DIR / "trait_combinations.json"

        logger.debug(f"Loading trait catalog from: {traits_path}")
        with open(traits_path, "r", encoding="utf-8") as f:
            trait_data = json.load(f)

        logger.debug(f"Loading trait combinations from: {combinations_path}")
        with open(combinations_path, "r", encoding="utf-8") as f:
            combination_data = json.load(f)

        traits = [TraitDefinition(**t) for t in trait_data["traits"]]
        combinations = {
            cls._parse_pair(key): CombinationDefinition(**entry)
            for key, entry in combination_data["combinations"].items()
        }
        fallback = CombinationDefinition(**combination_data["fallback"])

        logger.debug(f"Loaded {len(traits)} traits and {len(combinations)} combinations")
        return cls(traits, combinations, fallback)

    @staticmethod
    def _parse_pair(key: str) -> Tuple[Trait, Trait]:
        """Parse a "D-I" style key into an ordered trait pair."""
        primary, secondary = key.split("-")
        return Trait(primary), Trait(secondary)

    def get_trait(self, trait: Trait) -> TraitDefinition:
        """Get the narrative content for a trait."""
        return self.traits[trait]

    def get_name(self, trait: Trait) -> str:
        """Display name of a trait."""
        return self.traits[trait].name

    def get_combination(self, primary: Trait, secondary: Trait) -> CombinationDefinition:
        """
        Get the narrative content for an ordered trait pair.

        The table is not symmetric: (D, I) and (I, D) are separate entries.
        Pairs without an entry get the generic fallback, filled in with both
        trait names.
        """
        combination = self.combinations.get((primary, secondary))
        if combination is not None:
            return combination

        logger.debug(f"No combination entry for {primary.value}-{secondary.value}, using fallback")
        names = {"primary": self.get_name(primary), "secondary": self.get_name(secondary)}
        return CombinationDefinition(
            label=self.fallback.label.format(**names),
            analysis=self.fallback.analysis.format(**names),
            influence_points=[point.format(**names) for point in self.fallback.influence_points],
        )


@lru_cache()
def get_trait_catalog() -> TraitCatalog:
    """Get cached trait catalog instance."""
    return TraitCatalog.load_from_file()

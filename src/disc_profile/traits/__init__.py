"""DISC trait classification and narrative tables."""

from disc_profile.traits.catalog import TraitCatalog, get_trait_catalog
from disc_profile.traits.classifier import (
    InvalidResponsesError,
    TraitClassifier,
    score_answers,
)

__all__ = [
    "TraitCatalog",
    "get_trait_catalog",
    "InvalidResponsesError",
    "TraitClassifier",
    "score_answers",
]

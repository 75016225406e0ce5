"""Tests for the trait narrative catalog."""

import json

import pytest

from disc_profile.db.models import Trait
from disc_profile.traits.catalog import TraitCatalog, get_trait_catalog


class TestTraitCatalog:
    """Tests for TraitCatalog."""

    def test_load_catalog(self):
        """Test loading the default catalog."""
        catalog = get_trait_catalog()
        assert set(catalog.traits) == set(Trait)

    def test_trait_names(self):
        catalog = get_trait_catalog()
        assert catalog.get_name(Trait.D) == "Dominância"
        assert catalog.get_name(Trait.I) == "Influência"
        assert catalog.get_name(Trait.S) == "Estabilidade"
        assert catalog.get_name(Trait.C) == "Conformidade"

    def test_trait_content(self):
        catalog = get_trait_catalog()
        for trait in Trait:
            definition = catalog.get_trait(trait)
            assert len(definition.strengths) >= 3
            assert len(definition.development_areas) >= 3
            assert definition.feedback

    def test_all_ordered_pairs_present(self):
        """Every ordered pair of distinct traits has its own entry."""
        catalog = get_trait_catalog()
        assert len(catalog.combinations) == 12
        for primary in Trait:
            for secondary in Trait:
                if primary != secondary:
                    assert (primary, secondary) in catalog.combinations

    def test_combinations_not_symmetric(self):
        catalog = get_trait_catalog()
        forward = catalog.get_combination(Trait.C, Trait.S)
        backward = catalog.get_combination(Trait.S, Trait.C)
        assert forward.label == "Analista Colaborativo - Conformidade com Estabilidade"
        assert backward.label == "Estabilizador Sistemático - Estabilidade com Conformidade"

    def test_fallback_for_same_trait_pair(self):
        """A pair without an entry gets the templated fallback."""
        catalog = get_trait_catalog()
        combination = catalog.get_combination(Trait.D, Trait.D)
        assert combination.label == "Dominância com Dominância"
        assert "Dominância" in combination.analysis
        assert len(combination.influence_points) == 5
        assert "{primary}" not in " ".join(combination.influence_points)

    def test_load_from_custom_files(self, tmp_path):
        """Test loading tables from explicit paths."""
        traits = {
            "traits": [
                {
                    "symbol": symbol,
                    "name": f"Name {symbol}",
                    "strengths": ["s"],
                    "development_areas": ["d"],
                    "feedback": "f",
                }
                for symbol in "DISC"
            ]
        }
        combinations = {
            "combinations": {
                "I-S": {"label": "IS", "analysis": "a", "influence_points": []}
            },
            "fallback": {"label": "{primary}/{secondary}", "analysis": "", "influence_points": []},
        }
        traits_path = tmp_path / "traits.json"
        combinations_path = tmp_path / "combinations.json"
        traits_path.write_text(json.dumps(traits), encoding="utf-8")
        combinations_path.write_text(json.dumps(combinations), encoding="utf-8")

        catalog = TraitCatalog.load_from_file(traits_path, combinations_path)

        assert catalog.get_combination(Trait.I, Trait.S).label == "IS"
        assert catalog.get_combination(Trait.S, Trait.I).label == "Name S/Name I"

    def test_missing_trait_rejected(self):
        catalog = get_trait_catalog()
        partial = [catalog.get_trait(Trait.D), catalog.get_trait(Trait.I)]
        with pytest.raises(ValueError):
            TraitCatalog(partial, {}, catalog.fallback)

# tests/test_suggestions.py
"""Tests for suggest_constraints() and the Suggestions collection."""

import json

import polars as pl
import pytest
import yaml

import catrange
from catrange import (
    CategoricalRangeRule,
    ConstraintRule,
    DataType,
    Suggestions,
    suggest_constraints,
)


@pytest.fixture
def sample_df():
    """Low-cardinality status column next to a unique id column."""
    return pl.DataFrame({
        "id": list(range(10)),
        "status": ["active"] * 6 + ["inactive"] * 3 + [None],
        "score": [1.5] * 10,
    })


class NeverRule(ConstraintRule):
    rule_description = "never applies"

    def should_be_applied(self, profile, num_records):
        return False

    def candidate(self, profile, num_records):
        raise AssertionError("candidate() called on inapplicable rule")


class TestSuggestConstraints:
    """End-to-end suggestion runs."""

    def test_from_dataframe(self, sample_df):
        """Only the categorical column gets a suggestion."""
        profiles = catrange.profile_frame(sample_df)
        suggestions = suggest_constraints(profiles, num_records=sample_df.height)

        # status: 3 bins (active, inactive, null) with one singleton -> 1/3 > 0.1
        assert len(suggestions) == 0

        loose = suggest_constraints(
            profiles,
            num_records=sample_df.height,
            rules=[CategoricalRangeRule(max_unique_ratio=0.5)],
        )
        assert len(loose) == 1
        s = loose[0]
        assert s.column == "status"
        assert s.sample_values == ("active", "inactive")
        assert s.constraint.condition == "`status` IN ('active', 'inactive')"

    def test_default_rules(self, profile_factory):
        profiles = [
            profile_factory({"A": 5, "B": 3, "C": 2}, column="grade"),
            profile_factory({f"v{i}": 1 for i in range(20)}, column="uid"),
            profile_factory({"1.5": 4}, data_type=DataType.FRACTIONAL, column="f"),
        ]
        suggestions = suggest_constraints(profiles, num_records=10)
        assert [s.column for s in suggestions] == ["grade"]
        assert isinstance(suggestions[0].rule, CategoricalRangeRule)

    def test_inapplicable_rule_never_builds(self, profile_factory):
        """candidate() is only invoked after a positive applicability test."""
        profiles = [profile_factory({"A": 5})]
        assert len(suggest_constraints(profiles, 5, rules=[NeverRule()])) == 0

    def test_rule_order_preserved(self, profile_factory):
        profiles = [profile_factory({"b": 2, "a": 2})]
        rules = [CategoricalRangeRule(), CategoricalRangeRule(category_sorter=catrange.by_category)]
        suggestions = suggest_constraints(profiles, 4, rules=rules)
        assert [s.sample_values for s in suggestions] == [("b", "a"), ("a", "b")]

    def test_negative_records_rejected(self):
        with pytest.raises(ValueError):
            suggest_constraints([], num_records=-1)

    def test_env_threshold_on_default_path(self, profile_factory, monkeypatch):
        """CATRANGE_MAX_UNIQUE_RATIO applies when no rules are passed."""
        profiles = [profile_factory({"A": 1, "B": 9})]
        assert len(suggest_constraints(profiles, 10)) == 0

        monkeypatch.setenv("CATRANGE_MAX_UNIQUE_RATIO", "0.6")
        suggestions = suggest_constraints(profiles, 10)
        assert len(suggestions) == 1
        assert suggestions[0].rule.max_unique_ratio == 0.6

    def test_default_rules_from_settings(self):
        settings = catrange.SuggestionSettings(
            categorical_range=catrange.RuleSettings(max_unique_ratio=0.3)
        )
        (rule,) = catrange.default_rules(settings)
        assert rule.max_unique_ratio == 0.3


class TestSuggestionsExport:
    """Serialization of suggestions."""

    @pytest.fixture
    def suggestions(self, profile_factory):
        profiles = [
            profile_factory({"O'Brien": 4, "Smith": 2}, column="surname"),
            profile_factory({"1": 3, "2": 3}, data_type=DataType.INTEGRAL, column="tier"),
        ]
        return suggest_constraints(profiles, 6, source="people.parquet")

    def test_repr(self, suggestions):
        assert repr(suggestions) == "Suggestions(2 constraints from people.parquet)"

    def test_to_dict(self, suggestions):
        d = suggestions.to_dict()[0]
        assert d["column"] == "surname"
        assert d["current_value"] == "Compliance: 1"
        assert d["sample_values"] == ["O'Brien", "Smith"]
        assert d["rule_description"] == CategoricalRangeRule.rule_description
        assert d["constraint"]["condition"] == "`surname` IN ('O''Brien', 'Smith')"
        assert d["constraint"]["assertion"] == "is_one"
        assert d["constraint"]["columns"] == ["surname"]

    def test_to_json(self, suggestions):
        data = json.loads(suggestions.to_json())
        assert [d["column"] for d in data] == ["surname", "tier"]

    def test_to_yaml(self, suggestions):
        doc = yaml.safe_load(suggestions.to_yaml())
        assert doc["dataset"] == "people.parquet"
        assert doc["suggestions"][1]["code_hint"] == '.isContainedIn("tier", ["1", "2"])'

    def test_to_rules(self, suggestions):
        rules = suggestions.to_rules(severity="warning")
        assert rules[0] == {
            "name": "allowed_values",
            "params": {"column": "surname", "values": ["O'Brien", "Smith"]},
            "severity": "warning",
        }

    def test_to_rule_with_id(self, suggestions):
        rule = suggestions[1].to_rule(id="tier_allowed")
        assert rule["id"] == "tier_allowed"
        assert rule["severity"] == "blocking"
        assert rule["params"] == {"column": "tier", "values": ["1", "2"]}
        assert "id" not in suggestions[1].to_rule()

    def test_owns_its_list(self, profile_factory):
        """Later changes to the caller's list do not leak into the collection."""
        source = list(suggest_constraints([profile_factory({"a": 2})], 2))
        suggestions = Suggestions(source)
        source.clear()
        assert len(suggestions) == 1
        assert suggestions.filter()._suggestions is not suggestions._suggestions

    def test_filter(self, suggestions):
        assert len(suggestions.filter(column="tier")) == 1
        assert len(suggestions.filter(rule=CategoricalRangeRule)) == 2
        assert len(suggestions.filter(rule=NeverRule)) == 0
        assert suggestions.filter(column="tier").source == "people.parquet"

    def test_save(self, suggestions, tmp_path):
        out = tmp_path / "nested" / "suggestions.yml"
        suggestions.save(out)
        doc = yaml.safe_load(out.read_text())
        assert len(doc["suggestions"]) == 2

    def test_iteration(self, suggestions):
        assert [s.column for s in suggestions] == ["surname", "tier"]
        assert isinstance(suggestions, Suggestions)

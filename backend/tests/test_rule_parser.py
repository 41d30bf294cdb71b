import pytest

from domain.health_plan.core.exceptions import ConfigurationError
from rules.parser import (
    KeywordCategory,
    SubstitutionRule,
    load_keyword_table,
    load_substitution_rules,
    parse_keyword_table,
    parse_substitution_rules,
)


def test_bundled_keyword_table():
    categories = load_keyword_table()
    by_flag = {c.flag: c for c in categories}
    assert set(by_flag) == {
        "heart_condition",
        "diabetic",
        "hypertensive",
        "lactose_intolerant",
        "gluten_intolerant",
        "vegetarian",
    }
    assert all(isinstance(c, KeywordCategory) for c in categories)
    assert by_flag["heart_condition"].field == "conditions"
    assert "stent" in by_flag["heart_condition"].keywords
    assert by_flag["vegetarian"].field == "restrictions"


def test_bundled_rules_order():
    rules = load_substitution_rules()
    assert all(isinstance(r, SubstitutionRule) for r in rules)
    assert [r.when for r in rules] == [
        "vegetarian",
        "lactose_intolerant",
        "gluten_intolerant",
        "diabetic",
    ]
    glycemic = rules[-1]
    rw = glycemic.rewrite_for("Tapioca")
    assert rw is not None
    assert rw.to_key == "Aveia"
    assert rw.qty == 3


def test_priority_ordering_and_stable_ties():
    yaml_text = """
rules:
  - id: late
    priority: 50
    when: diabetic
    rewrites: [{ from: A, to: B, qty: 1 }]
  - id: first_tie
    priority: 10
    when: vegetarian
    rewrites: [{ from: C, to: D, qty: 1 }]
  - id: second_tie
    priority: 10
    when: gluten_intolerant
    rewrites: [{ from: E, to: F, qty: 1 }]
"""
    rules = parse_substitution_rules(yaml_text)
    assert [r.id for r in rules] == ["first_tie", "second_tie", "late"]


def test_disabled_rules_are_skipped():
    yaml_text = """
rules:
  - id: "off"
    enabled: false
    when: diabetic
    rewrites: [{ from: A, to: B, qty: 1 }]
  - id: "on"
    when: diabetic
    rewrites: [{ from: C, to: D, qty: 1 }]
"""
    rules = parse_substitution_rules(yaml_text)
    assert [r.id for r in rules] == ["on"]


def test_unquoted_boolean_id_error():
    yaml_text = """
rules:
  - id: off
    when: diabetic
    rewrites: [{ from: A, to: B, qty: 1 }]
"""
    with pytest.raises(ConfigurationError, match="Rule id must be a string"):
        parse_substitution_rules(yaml_text)


def test_enabled_must_be_boolean():
    yaml_text = """
rules:
  - id: quoted_flag
    enabled: "false"
    when: diabetic
    rewrites: [{ from: A, to: B, qty: 1 }]
"""
    with pytest.raises(ConfigurationError, match="enabled must be true or false"):
        parse_substitution_rules(yaml_text)


def test_non_numeric_quantity_error():
    yaml_text = """
rules:
  - id: words
    when: diabetic
    rewrites: [{ from: A, to: B, qty: yes }]
"""
    with pytest.raises(ConfigurationError, match="rewrite qty must be a number"):
        parse_substitution_rules(yaml_text)


def test_duplicate_rule_ids_error():
    yaml_text = """
rules:
  - id: dup
    when: diabetic
    rewrites: [{ from: A, to: B, qty: 1 }]
  - id: dup
    when: vegetarian
    rewrites: [{ from: C, to: D, qty: 1 }]
"""
    with pytest.raises(ConfigurationError, match="Duplicate rule ids"):
        parse_substitution_rules(yaml_text)


def test_unknown_flag_error():
    yaml_text = """
rules:
  - id: bad
    when: pregnant
    rewrites: [{ from: A, to: B, qty: 1 }]
"""
    with pytest.raises(ConfigurationError, match="unknown flag"):
        parse_substitution_rules(yaml_text)


def test_rule_without_rewrites_error():
    yaml_text = """
rules:
  - id: empty
    when: diabetic
"""
    with pytest.raises(ConfigurationError, match="no rewrites"):
        parse_substitution_rules(yaml_text)


def test_non_positive_quantity_error():
    yaml_text = """
rules:
  - id: zero
    when: diabetic
    rewrites: [{ from: A, to: B, qty: 0 }]
"""
    with pytest.raises(ConfigurationError, match="qty must be > 0"):
        parse_substitution_rules(yaml_text)


def test_malformed_yaml_error():
    with pytest.raises(ConfigurationError):
        parse_substitution_rules("rules: [ {id: x, when: diabetic")


def test_missing_rules_key_error():
    with pytest.raises(ConfigurationError, match="'rules' list"):
        parse_substitution_rules("something: else")


def test_keyword_table_unknown_field():
    yaml_text = """
categories:
  - flag: diabetic
    field: medications
    keywords: [insulina]
"""
    with pytest.raises(ConfigurationError, match="unsupported field"):
        parse_keyword_table(yaml_text)


def test_keyword_table_empty_keywords():
    yaml_text = """
categories:
  - flag: diabetic
    field: conditions
    keywords: []
"""
    with pytest.raises(ConfigurationError, match="no keywords"):
        parse_keyword_table(yaml_text)


def test_keyword_table_duplicate_categories():
    yaml_text = """
categories:
  - flag: diabetic
    field: conditions
    keywords: [diabete]
  - flag: diabetic
    field: conditions
    keywords: [glicose]
"""
    with pytest.raises(ConfigurationError, match="Duplicate"):
        parse_keyword_table(yaml_text)


def test_missing_file_error(tmp_path):
    with pytest.raises(ConfigurationError, match="Cannot read"):
        load_substitution_rules(tmp_path / "missing.yaml")

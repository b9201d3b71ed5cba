"""Unit tests for RedactionRule / RedactionRuleSet."""
from __future__ import annotations

import json

import pytest

from ironclad.application.masking import MaskConfig, RedactionRule, RedactionRuleSet, Sensitivity
from ironclad.kernel.errors import FileReadError, InvalidInputError, SerializationError

CARD = r"\d{4}-\d{4}-\d{4}-\d{4}"
EMAIL = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"


class TestFromMapping:
    def test_preserves_order(self):
        rules = RedactionRuleSet.from_mapping({EMAIL: {}, CARD: {}})
        assert rules.patterns == (EMAIL, CARD)

    def test_wire_options_become_config(self):
        rules = RedactionRuleSet.from_mapping({CARD: {"visibleStart": 4, "visibleEnd": 4}})
        (rule,) = list(rules)
        assert rule.config == MaskConfig(visible_start=4, visible_end=4)

    def test_none_options_use_defaults(self):
        (rule,) = list(RedactionRuleSet.from_mapping({CARD: None}))
        assert rule.config == MaskConfig()

    def test_mask_config_values_kept(self):
        config = MaskConfig(sensitivity="high")
        (rule,) = list(RedactionRuleSet.from_mapping({CARD: config}))
        assert rule.config is config

    @pytest.mark.parametrize("options", ["high", 4, ["visibleStart"], None])
    def test_non_mapping_options_use_defaults(self, options):
        (rule,) = RedactionRuleSet.from_mapping({CARD: options})
        assert rule.pattern == CARD
        assert rule.config == MaskConfig()

    def test_non_mapping_rules_rejected(self):
        with pytest.raises(InvalidInputError):
            RedactionRuleSet.from_mapping([CARD])  # type: ignore[arg-type]

    def test_non_string_pattern_rejected(self):
        with pytest.raises(InvalidInputError):
            RedactionRuleSet.from_mapping({42: {}})  # type: ignore[dict-item]

    def test_rule_set_passes_through(self):
        rules = RedactionRuleSet.from_mapping({CARD: {}})
        assert RedactionRuleSet.from_mapping(rules) is rules


class TestFromJson:
    def test_parses_object(self):
        payload = json.dumps({CARD: {"visibleStart": 4}, EMAIL: {"sensitivity": "high"}})
        rules = RedactionRuleSet.from_json(payload)
        assert rules.patterns == (CARD, EMAIL)
        assert list(rules)[1].config.sensitivity is Sensitivity.HIGH

    def test_invalid_json(self):
        with pytest.raises(SerializationError) as exc_info:
            RedactionRuleSet.from_json("{not json")
        assert exc_info.value.payload_type == "json"
        assert "Invalid redaction rules JSON" in exc_info.value.message

    def test_array_rejected(self):
        with pytest.raises(SerializationError):
            RedactionRuleSet.from_json("[1, 2]")

    def test_non_object_rule_body_uses_defaults(self):
        rules = RedactionRuleSet.from_json(json.dumps({CARD: 4, EMAIL: {"sensitivity": "high"}}))
        assert rules.patterns == (CARD, EMAIL)
        assert rules.to_dict()[CARD] == MaskConfig().to_dict()
        assert rules.to_dict()[EMAIL]["sensitivity"] == "high"


class TestFromFile:
    def test_reads_json_file(self, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({CARD: {"visibleStart": 4, "visibleEnd": 4}}), encoding="utf-8")
        assert RedactionRuleSet.from_file(path).patterns == (CARD,)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileReadError) as exc_info:
            RedactionRuleSet.from_file(tmp_path / "missing.json")
        assert exc_info.value.path == tmp_path / "missing.json"


class TestRuleSet:
    def test_empty(self):
        rules = RedactionRuleSet()
        assert len(rules) == 0
        assert not rules
        assert list(rules) == []

    def test_repeated_pattern_keeps_first_position_latest_config(self):
        rules = RedactionRuleSet([
            RedactionRule("a"),
            RedactionRule("b"),
            RedactionRule("a", MaskConfig(visible_start=0)),
        ])
        assert rules.patterns == ("a", "b")
        assert list(rules)[0].config.visible_start == 0

    def test_rejects_non_rules(self):
        with pytest.raises(InvalidInputError):
            RedactionRuleSet(["a"])  # type: ignore[list-item]

    def test_equality(self):
        assert RedactionRuleSet.from_mapping({CARD: {}}) == RedactionRuleSet([RedactionRule(CARD)])

    def test_to_dict(self):
        rules = RedactionRuleSet.from_mapping({CARD: {"visibleStart": 4}})
        assert rules.to_dict() == {
            CARD: {"visible_start": 4, "visible_end": 2, "mask_char": "*", "sensitivity": "medium"}
        }

    def test_rule_default_config(self):
        assert RedactionRule(CARD).config == MaskConfig()

"""Tests for validation constraints on option definition models."""

import sys

import pytest
from pydantic import TypeAdapter, ValidationError

from vim_options.config.domain.config import OptionsConfig
from vim_options.config.domain.definition import (
    BooleanDefinition,
    ListDefinition,
    NumberDefinition,
    OptionDefinition,
    StringDefinition,
)

_ADAPTER: TypeAdapter[OptionDefinition] = TypeAdapter(OptionDefinition)


# ---------------------------------------------------------------------------
# Discriminated union
# ---------------------------------------------------------------------------


class TestDefinitionDiscriminator:
    """The `kind` field selects the definition model."""

    @pytest.mark.parametrize(
        ("kind", "model"),
        [
            ("boolean", BooleanDefinition),
            ("number", NumberDefinition),
            ("string", StringDefinition),
            ("list", ListDefinition),
        ],
    )
    def test_kind_selects_model(self, kind: str, model: type) -> None:
        definition = _ADAPTER.validate_python({"kind": kind, "name": "opt"})
        assert isinstance(definition, model)

    def test_unknown_kind_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            _ADAPTER.validate_python({"kind": "float", "name": "opt"})

    def test_missing_kind_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            _ADAPTER.validate_python({"name": "opt"})


# ---------------------------------------------------------------------------
# Shared identity fields
# ---------------------------------------------------------------------------


class TestDefinitionIdentity:
    """Names must be non-empty; a missing abbreviation falls back to the name."""

    def test_empty_name_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            BooleanDefinition(kind="boolean", name="")

    def test_missing_abbreviation_defaults_to_name(self) -> None:
        definition = BooleanDefinition(kind="boolean", name="number")
        assert definition.abbreviation == "number"

    def test_empty_abbreviation_defaults_to_name(self) -> None:
        definition = BooleanDefinition(kind="boolean", name="number", abbreviation="")
        assert definition.abbreviation == "number"

    def test_explicit_abbreviation_kept(self) -> None:
        definition = BooleanDefinition(kind="boolean", name="ignorecase", abbreviation="ic")
        assert definition.abbreviation == "ic"

    def test_definitions_are_frozen(self) -> None:
        definition = BooleanDefinition(kind="boolean", name="wrap")
        with pytest.raises(ValidationError):
            definition.name = "nowrap"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Per-kind defaults and constraints
# ---------------------------------------------------------------------------


class TestNumberDefinitionConstraints:
    """NumberDefinition rejects inverted ranges."""

    def test_defaults(self) -> None:
        definition = NumberDefinition(kind="number", name="tabstop")
        assert definition.default == 0
        assert definition.minimum == 0
        assert definition.maximum == sys.maxsize

    def test_minimum_above_maximum_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            NumberDefinition(kind="number", name="tabstop", minimum=10, maximum=1)

    def test_equal_bounds_are_valid(self) -> None:
        definition = NumberDefinition(
            kind="number", name="tabstop", default=4, minimum=4, maximum=4
        )
        assert definition.minimum == definition.maximum == 4


class TestListDefinitionConstraints:
    """ListDefinition rejects uncompilable patterns and malformed defaults."""

    def test_defaults(self) -> None:
        definition = ListDefinition(kind="list", name="matchpairs")
        assert definition.default == []
        assert definition.pattern is None

    def test_invalid_pattern_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            ListDefinition(kind="list", name="matchpairs", pattern="(")

    @pytest.mark.parametrize("default", [["a,b"], [""], ["a", "a"]])
    def test_default_items_must_be_distinct_single_items(
        self, default: list[str]
    ) -> None:
        with pytest.raises(ValidationError):
            ListDefinition(kind="list", name="matchpairs", default=default)

    def test_valid_pattern_accepted(self) -> None:
        definition = ListDefinition(kind="list", name="matchpairs", pattern=".:.")
        assert definition.pattern == ".:."


class TestSimpleDefinitionDefaults:
    """Boolean and string definitions default to off and empty."""

    def test_boolean_defaults_to_false(self) -> None:
        assert BooleanDefinition(kind="boolean", name="wrap").default is False

    def test_string_defaults_to_empty(self) -> None:
        assert StringDefinition(kind="string", name="selection").default == ""


# ---------------------------------------------------------------------------
# OptionsConfig
# ---------------------------------------------------------------------------


class TestOptionsConfigConstraints:
    """OptionsConfig rejects an empty name and repeated option names."""

    def test_empty_name_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            OptionsConfig(name="", options=[])

    def test_options_default_to_empty(self) -> None:
        cfg = OptionsConfig(name="empty")
        assert cfg.options == []

    def test_duplicate_option_names_raise_validation_error(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            OptionsConfig.model_validate(
                {
                    "name": "dupes",
                    "options": [
                        {"kind": "boolean", "name": "wrap"},
                        {"kind": "number", "name": "wrap"},
                    ],
                }
            )
        assert "wrap" in str(exc_info.value)

    def test_mixed_definitions_accepted(self) -> None:
        cfg = OptionsConfig.model_validate(
            {
                "name": "mixed",
                "options": [
                    {"kind": "boolean", "name": "wrap", "default": True},
                    {"kind": "number", "name": "tabstop", "abbreviation": "ts", "default": 8},
                ],
            }
        )
        assert isinstance(cfg.options[0], BooleanDefinition)
        assert isinstance(cfg.options[1], NumberDefinition)
        assert cfg.options[1].abbreviation == "ts"

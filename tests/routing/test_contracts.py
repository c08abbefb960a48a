"""Tests for TierInputs construction and boundary validation."""

import pytest

from crud_conductor.routing.contracts import Scale, TierInputs
from crud_conductor.routing.errors import InvalidInput
from crud_conductor.routing.validator import validate_answers


class TestTierInputsConstruction:
    """Invariants enforced when building TierInputs directly."""

    def test_valid_inputs_construct(self) -> None:
        inputs = TierInputs(entity_count=4, integration_count=1, scale=Scale.SMALL)

        assert inputs.has_compliance is False
        assert inputs.is_multi_region is False
        assert inputs.has_real_time is False

    @pytest.mark.parametrize("field", ["entity_count", "integration_count"])
    def test_negative_count_rejected(self, field: str) -> None:
        values = {"entity_count": 1, "integration_count": 1, "scale": Scale.SMALL, field: -1}

        with pytest.raises(InvalidInput) as exc_info:
            TierInputs(**values)

        assert exc_info.value.field == field
        assert field in str(exc_info.value)

    def test_bool_count_rejected(self) -> None:
        with pytest.raises(InvalidInput, match="entity_count"):
            TierInputs(entity_count=True, integration_count=0, scale=Scale.SMALL)

    def test_string_scale_rejected(self) -> None:
        with pytest.raises(InvalidInput, match="scale"):
            TierInputs(entity_count=1, integration_count=0, scale="small")

    def test_non_bool_flag_rejected(self) -> None:
        with pytest.raises(InvalidInput, match="has_real_time"):
            TierInputs(entity_count=1, integration_count=0, scale=Scale.SMALL, has_real_time=1)

    def test_inputs_are_immutable(self) -> None:
        inputs = TierInputs(entity_count=1, integration_count=0, scale=Scale.SMALL)

        with pytest.raises(AttributeError):
            inputs.entity_count = 5


class TestScaleParse:
    """Scale parsing by name or value."""

    @pytest.mark.parametrize("raw", ["enterprise", "ENTERPRISE", " Enterprise "])
    def test_parse_case_insensitive(self, raw: str) -> None:
        assert Scale.parse(raw) is Scale.ENTERPRISE

    def test_parse_unknown_names_valid_scales(self) -> None:
        with pytest.raises(InvalidInput) as exc_info:
            Scale.parse("huge")

        assert exc_info.value.field == "scale"
        assert "small, medium, enterprise" in str(exc_info.value)


class TestFromDict:
    """Building TierInputs from untrusted answer data."""

    def test_snake_case_keys(self) -> None:
        inputs = TierInputs.from_dict({
            "entity_count": 12,
            "integration_count": 6,
            "scale": "enterprise",
            "has_compliance": True,
        })

        assert inputs.entity_count == 12
        assert inputs.scale is Scale.ENTERPRISE
        assert inputs.has_compliance is True

    def test_camel_case_keys(self) -> None:
        inputs = TierInputs.from_dict({
            "entityCount": 6,
            "integrationCount": 3,
            "scale": "MEDIUM",
            "isMultiRegion": "yes",
            "hasRealTime": "false",
        })

        assert inputs.integration_count == 3
        assert inputs.is_multi_region is True
        assert inputs.has_real_time is False

    def test_digit_strings_accepted(self) -> None:
        inputs = TierInputs.from_dict({"entity_count": "7", "integration_count": "0", "scale": "small"})

        assert inputs.entity_count == 7

    @pytest.mark.parametrize("missing", ["entity_count", "integration_count", "scale"])
    def test_missing_required_field(self, missing: str) -> None:
        data = {"entity_count": 1, "integration_count": 1, "scale": "small"}
        del data[missing]

        with pytest.raises(InvalidInput) as exc_info:
            TierInputs.from_dict(data)

        assert exc_info.value.field == missing

    @pytest.mark.parametrize(
        "field, value",
        [
            ("entity_count", "-2"),
            ("entity_count", 2.5),
            ("integration_count", "many"),
            ("has_compliance", "maybe"),
            ("has_real_time", 3),
        ],
    )
    def test_malformed_values_never_coerced(self, field: str, value) -> None:
        data = {"entity_count": 1, "integration_count": 1, "scale": "small", field: value}

        with pytest.raises(InvalidInput) as exc_info:
            TierInputs.from_dict(data)

        assert exc_info.value.field == field

    def test_non_dict_rejected(self) -> None:
        with pytest.raises(InvalidInput, match="answers"):
            TierInputs.from_dict(["entity_count", 1])

    def test_to_dict_uses_scale_value(self) -> None:
        inputs = TierInputs(entity_count=2, integration_count=3, scale=Scale.MEDIUM, has_compliance=True)

        assert inputs.to_dict() == {
            "entity_count": 2,
            "integration_count": 3,
            "scale": "medium",
            "has_compliance": True,
            "is_multi_region": False,
            "has_real_time": False,
        }


class TestValidateAnswers:
    """validate_answers never raises and reports every bad field."""

    def test_valid_answers(self) -> None:
        result = validate_answers({"entity_count": 3, "integration_count": 0, "scale": "small"})

        assert result.is_valid is True
        assert result.inputs is not None
        assert result.errors == []

    def test_reports_all_errors(self) -> None:
        result = validate_answers({
            "entity_count": -1,
            "scale": "gigantic",
            "has_compliance": "perhaps",
        })

        assert result.is_valid is False
        assert result.inputs is None
        assert len(result.errors) == 4
        joined = "\n".join(result.errors)
        for field in ("entity_count", "integration_count", "scale", "has_compliance"):
            assert field in joined

    def test_non_dict_is_invalid(self) -> None:
        result = validate_answers("entities=3")

        assert result.is_valid is False
        assert result.errors == ["answers: expected an object, got str"]

    @pytest.mark.parametrize("raw", ["--3", "²", "1_0", "٣", "+4", "3.0"])
    def test_non_ascii_or_malformed_count_strings_reported(self, raw: str) -> None:
        result = validate_answers({"entity_count": raw, "integration_count": 0, "scale": "small"})

        assert result.is_valid is False
        assert result.errors[0].startswith("entity_count:")

    def test_conflicting_key_spellings_reported(self) -> None:
        result = validate_answers({
            "entityCount": 3,
            "entity_count": 12,
            "integration_count": 0,
            "scale": "small",
        })

        assert result.is_valid is False
        assert result.errors == ["entity_count: given more than once (camelCase and snake_case)"]


class TestCountStrings:
    """Count strings must be plain ASCII digits."""

    @pytest.mark.parametrize("raw", ["--3", "²", "1_0", "٣", "+4", " "])
    def test_from_dict_rejects_with_field(self, raw: str) -> None:
        with pytest.raises(InvalidInput) as exc_info:
            TierInputs.from_dict({"entity_count": 1, "integration_count": raw, "scale": "small"})

        assert exc_info.value.field == "integration_count"

    def test_padded_digits_accepted(self) -> None:
        inputs = TierInputs.from_dict({"entity_count": " 11 ", "integration_count": "0", "scale": "small"})

        assert inputs.entity_count == 11

    def test_conflicting_key_spellings_rejected(self) -> None:
        with pytest.raises(InvalidInput) as exc_info:
            TierInputs.from_dict({
                "hasCompliance": True,
                "has_compliance": False,
                "entity_count": 1,
                "integration_count": 0,
                "scale": "small",
            })

        assert exc_info.value.field == "has_compliance"

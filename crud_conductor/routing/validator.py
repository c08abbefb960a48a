"""Validation function for interview answers."""

from __future__ import annotations

from .contracts import (
    Scale,
    TierInputs,
    TierValidationResult,
    normalize_keys,
    parse_count,
    parse_flag,
)
from .errors import InvalidInput


def validate_answers(data: dict) -> TierValidationResult:
    """Validate raw answers and return a structured result.

    Unlike TierInputs.from_dict(), this function never raises. Every
    offending field is reported, not just the first one.

    Args:
        data: Answer mapping with snake_case or camelCase keys.

    Returns:
        TierValidationResult with is_valid=True and populated inputs for valid
        answers, or is_valid=False and one error per offending field.
    """
    if not isinstance(data, dict):
        return TierValidationResult(
            is_valid=False,
            inputs=None,
            errors=[f"answers: expected an object, got {type(data).__name__}"],
        )

    try:
        answers = normalize_keys(data)
    except InvalidInput as e:
        return TierValidationResult(is_valid=False, inputs=None, errors=[str(e)])
    errors: list[str] = []

    for name in ("entity_count", "integration_count"):
        if answers.get(name) is None:
            errors.append(f"{name}: is required")
            continue
        _collect(errors, parse_count, name, answers[name])

    if answers.get("scale") is None:
        errors.append("scale: is required")
    else:
        try:
            Scale.parse(answers["scale"])
        except InvalidInput as e:
            errors.append(str(e))

    for name in ("has_compliance", "is_multi_region", "has_real_time"):
        if name in answers:
            _collect(errors, parse_flag, name, answers[name])

    if errors:
        return TierValidationResult(is_valid=False, inputs=None, errors=errors)

    return TierValidationResult(
        is_valid=True,
        inputs=TierInputs.from_dict(data),
        errors=[],
    )


def _collect(errors: list[str], parse, name: str, value) -> None:
    try:
        parse(name, value)
    except InvalidInput as e:
        errors.append(str(e))

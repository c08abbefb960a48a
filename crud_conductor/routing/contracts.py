"""Tier routing contracts and data structures."""

import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

from .errors import InvalidInput

_TRUE_WORDS = {"true", "yes", "y", "1"}
_FALSE_WORDS = {"false", "no", "n", "0"}
_COUNT_PATTERN = re.compile(r"-?[0-9]+")

# Interview answers arrive camelCased from the host assistant.
CAMEL_KEYS = {
    "entityCount": "entity_count",
    "integrationCount": "integration_count",
    "hasCompliance": "has_compliance",
    "isMultiRegion": "is_multi_region",
    "hasRealTime": "has_real_time",
}


class Scale(Enum):
    """Declared deployment size of the target application."""

    SMALL = "small"
    MEDIUM = "medium"
    ENTERPRISE = "enterprise"

    @property
    def rank(self) -> int:
        return list(Scale).index(self)

    @classmethod
    def parse(cls, value: "Scale | str") -> "Scale":
        """Parse a scale by member name or value, case-insensitive."""
        if isinstance(value, Scale):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for scale in cls:
                if key in (scale.value, scale.name.lower()):
                    return scale
        valid = ", ".join(s.value for s in cls)
        raise InvalidInput("scale", f"unrecognized scale {value!r}. Valid scales: {valid}")


class Tier(IntEnum):
    """Ordinal complexity tier. TIER_1 < TIER_2 < TIER_3."""

    TIER_1 = 1
    TIER_2 = 2
    TIER_3 = 3


def parse_count(name: str, value: Any) -> int:
    """Parse a non-negative integer answer, accepting digit strings."""
    if isinstance(value, bool):
        raise InvalidInput(name, f"expected a non-negative integer, got {value!r}")
    if isinstance(value, str) and _COUNT_PATTERN.fullmatch(value.strip()):
        value = int(value.strip())
    if not isinstance(value, int):
        raise InvalidInput(name, f"expected a non-negative integer, got {value!r}")
    if value < 0:
        raise InvalidInput(name, f"must be >= 0, got {value}")
    return value


def normalize_keys(data: dict) -> dict:
    """Map camelCase answer keys to snake_case. Both spellings of one key is an error."""
    answers: dict = {}
    for key, value in data.items():
        name = CAMEL_KEYS.get(key, key)
        if name in answers:
            raise InvalidInput(name, "given more than once (camelCase and snake_case)")
        answers[name] = value
    return answers


def parse_flag(name: str, value: Any) -> bool:
    """Parse a yes/no answer, accepting true/false/yes/no strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise InvalidInput(name, f"expected true/false, got {value!r}")


@dataclass(frozen=True)
class TierInputs:
    """Interview answers that drive the complexity score."""

    entity_count: int
    integration_count: int
    scale: Scale
    has_compliance: bool = False
    is_multi_region: bool = False
    has_real_time: bool = False

    def __post_init__(self) -> None:
        for name in ("entity_count", "integration_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInput(name, f"expected a non-negative integer, got {value!r}")
            if value < 0:
                raise InvalidInput(name, f"must be >= 0, got {value}")
        if not isinstance(self.scale, Scale):
            raise InvalidInput("scale", f"expected a Scale, got {self.scale!r}")
        for name in ("has_compliance", "is_multi_region", "has_real_time"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidInput(name, f"expected true/false, got {getattr(self, name)!r}")

    @classmethod
    def from_dict(cls, data: dict) -> "TierInputs":
        """Build from untrusted answer data (snake_case or camelCase keys)."""
        if not isinstance(data, dict):
            raise InvalidInput("answers", f"expected an object, got {type(data).__name__}")
        answers = normalize_keys(data)

        for required in ("entity_count", "integration_count", "scale"):
            if answers.get(required) is None:
                raise InvalidInput(required, "is required")

        return cls(
            entity_count=parse_count("entity_count", answers["entity_count"]),
            integration_count=parse_count("integration_count", answers["integration_count"]),
            scale=Scale.parse(answers["scale"]),
            has_compliance=parse_flag("has_compliance", answers.get("has_compliance", False)),
            is_multi_region=parse_flag("is_multi_region", answers.get("is_multi_region", False)),
            has_real_time=parse_flag("has_real_time", answers.get("has_real_time", False)),
        )

    def to_dict(self) -> dict:
        return {
            "entity_count": self.entity_count,
            "integration_count": self.integration_count,
            "scale": self.scale.value,
            "has_compliance": self.has_compliance,
            "is_multi_region": self.is_multi_region,
            "has_real_time": self.has_real_time,
        }


@dataclass(frozen=True)
class ScoreContribution:
    """Points one dimension added to the score."""

    dimension: str
    condition: str
    points: int


@dataclass
class TierDecision:
    """Complete routing decision for one set of answers."""

    inputs: TierInputs
    score: int
    tier: Tier
    contributions: list[ScoreContribution] = field(default_factory=list)
    modules: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """Serialize for JSON tool responses."""
        return {
            "inputs": self.inputs.to_dict(),
            "score": self.score,
            "tier": self.tier.name,
            "contributions": [
                {"dimension": c.dimension, "condition": c.condition, "points": c.points}
                for c in self.contributions
            ],
            "modules": list(self.modules),
        }

    def to_prompt_context(self) -> str:
        """Render decision as markdown for inclusion in a prompt."""
        lines = [
            f"# Complexity Tier: {self.tier.name}",
            f"Score: {self.score}",
            "",
        ]

        if self.contributions:
            lines.append("## Score Breakdown")
            for c in self.contributions:
                lines.append(f"- {c.dimension} ({c.condition}): +{c.points}")
            lines.append("")
        else:
            lines.append("No complexity factors matched.")
            lines.append("")

        lines.append("## Context Modules")
        for i, module in enumerate(self.modules, start=1):
            lines.append(f"{i}. {module}")

        return "\n".join(lines)


@dataclass
class TierValidationResult:
    """Result of validating raw interview answers."""

    is_valid: bool
    inputs: TierInputs | None
    errors: list[str]

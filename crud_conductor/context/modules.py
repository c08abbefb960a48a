"""Static tier to context-module table."""

from types import MappingProxyType

from ..routing.contracts import Tier
from ..routing.errors import InvalidInput

CORE_PRINCIPLES = "core-principles"
TECH_STACK_SPECIFIC = "tech-stack-specific"

# Load order matters: earlier modules take precedence downstream.
CONTEXT_MODULES = MappingProxyType({
    Tier.TIER_1: (
        CORE_PRINCIPLES,
        "tier1-simple-crud",
        "database-patterns",
        TECH_STACK_SPECIFIC,
    ),
    Tier.TIER_2: (
        CORE_PRINCIPLES,
        "tier2-standard-app",
        "database-patterns",
        "api-patterns",
        "security-patterns",
        "testing-patterns",
        TECH_STACK_SPECIFIC,
    ),
    Tier.TIER_3: (
        CORE_PRINCIPLES,
        "tier3-enterprise",
        "database-patterns",
        "api-patterns",
        "security-patterns",
        "testing-patterns",
        "deployment-patterns",
        TECH_STACK_SPECIFIC,
    ),
})


def context_modules_for(tier: Tier) -> tuple[str, ...]:
    """Return the ordered module identifiers to load for a tier."""
    if not isinstance(tier, Tier):
        raise InvalidInput("tier", f"expected a Tier, got {tier!r}")
    return CONTEXT_MODULES[tier]


def parse_tier(value: "Tier | int | str") -> Tier:
    """Parse a tier from 1/2/3, '2', 'TIER_2' or 'tier2'."""
    if isinstance(value, Tier):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Tier(value)
        except ValueError:
            pass
    elif isinstance(value, str):
        key = value.strip().upper().replace("-", "_")
        if key.isdigit():
            return parse_tier(int(key))
        if key.startswith("TIER") and key[4:].lstrip("_").isdigit():
            return parse_tier(int(key[4:].lstrip("_")))
    valid = ", ".join(t.name for t in Tier)
    raise InvalidInput("tier", f"unrecognized tier {value!r}. Valid tiers: {valid}")

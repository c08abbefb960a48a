"""Prompt templates for tier-routed context loading."""

from ..routing.contracts import Tier, TierDecision
from .library import ContextLibrary


class ContextPromptBuilder:
    """Builds the prompt that tells the session which guidance to load."""

    def build_prompt(self, decision: TierDecision, library: ContextLibrary | None = None) -> str:
        """
        Build the context-loading prompt for a routing decision.

        The session will:
        1. Load each context module in the listed order
        2. Apply the tier guidance when generating the application

        Args:
            decision: The routing decision to present.
            library: Optional library used to show resolved file paths.

        Returns:
            Complete prompt string for the session.
        """
        sections = [
            "# Application Generation Context",
            "",
            decision.to_prompt_context(),
            "",
            self._build_load_section(decision, library),
            "",
            self._get_tier_guidance(decision.tier),
        ]
        return "\n".join(sections)

    def _build_load_section(self, decision: TierDecision, library: ContextLibrary | None) -> str:
        """Ordered load instructions, with file paths when resolvable."""
        lines = [
            "## LOAD ORDER",
            "",
            "Load these modules in order. Earlier modules take precedence on conflict.",
            "",
        ]

        if library is None:
            for module in decision.modules:
                lines.append(f"- {module}")
            return "\n".join(lines)

        for module in library.resolve(decision.modules):
            if module.exists:
                lines.append(f"- {module.name}: `{module.path}`")
            else:
                lines.append(f"- {module.name}: (not available, skip)")
        return "\n".join(lines)

    def _get_tier_guidance(self, tier: Tier) -> str:
        """Scope guidance per tier."""
        if tier == Tier.TIER_1:
            return (
                "## SCOPE: SIMPLE CRUD\n\n"
                "Single service, one database, plain CRUD endpoints. "
                "Skip auth layers, background jobs and deployment tooling unless asked."
            )
        if tier == Tier.TIER_2:
            return (
                "## SCOPE: STANDARD APPLICATION\n\n"
                "Add authentication, input validation, pagination and error responses. "
                "Ship unit and API tests alongside each resource."
            )
        return (
            "## SCOPE: ENTERPRISE\n\n"
            "Plan for compliance, audit logging, multi-region deployment and observability. "
            "Include CI/CD and deployment manifests. Treat security patterns as mandatory."
        )

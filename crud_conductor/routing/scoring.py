"""Additive complexity score over interview answers."""

from .contracts import Scale, ScoreContribution, TierInputs

# (threshold, points), highest bracket first. Comparisons are strict.
ENTITY_BRACKETS: tuple[tuple[int, int], ...] = ((10, 3), (5, 1))
INTEGRATION_BRACKETS: tuple[tuple[int, int], ...] = ((5, 3), (2, 1))

SCALE_POINTS = {
    Scale.SMALL: 0,
    Scale.MEDIUM: 1,
    Scale.ENTERPRISE: 2,
}

COMPLIANCE_POINTS = 2
MULTI_REGION_POINTS = 1
REAL_TIME_POINTS = 1


class ScoreCalculator:
    """Computes the complexity score of a TierInputs.

    Each dimension contributes independently; within a counted dimension
    only the highest matching bracket applies.
    """

    def calculate(self, inputs: TierInputs) -> int:
        """Return the total score, always >= 0."""
        return sum(c.points for c in self.explain(inputs))

    def explain(self, inputs: TierInputs) -> list[ScoreContribution]:
        """Return the contributing dimensions in table order."""
        contributions: list[ScoreContribution] = []

        entity = self._bracket("entity_count", inputs.entity_count, ENTITY_BRACKETS)
        if entity:
            contributions.append(entity)

        integration = self._bracket("integration_count", inputs.integration_count, INTEGRATION_BRACKETS)
        if integration:
            contributions.append(integration)

        scale_points = SCALE_POINTS[inputs.scale]
        if scale_points:
            contributions.append(ScoreContribution("scale", inputs.scale.name, scale_points))

        if inputs.has_compliance:
            contributions.append(ScoreContribution("has_compliance", "true", COMPLIANCE_POINTS))
        if inputs.is_multi_region:
            contributions.append(ScoreContribution("is_multi_region", "true", MULTI_REGION_POINTS))
        if inputs.has_real_time:
            contributions.append(ScoreContribution("has_real_time", "true", REAL_TIME_POINTS))

        return contributions

    @staticmethod
    def _bracket(
        dimension: str, value: int, brackets: tuple[tuple[int, int], ...]
    ) -> ScoreContribution | None:
        for threshold, points in brackets:
            if value > threshold:
                return ScoreContribution(dimension, f"> {threshold}", points)
        return None

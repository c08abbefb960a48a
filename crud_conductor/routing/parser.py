"""Parser for markdown interview answer sheets."""

import re
from dataclasses import dataclass

from .contracts import TierInputs


@dataclass
class InterviewAnswers:
    """Parsed answer sheet: app name, scoring inputs and optional tech stack."""

    app_name: str
    inputs: TierInputs
    tech_stack: str | None = None


class AnswersParser:
    """Parses compact markdown answer sheets into InterviewAnswers.

    Expected shape:

        ## App: InventoryTracker
        - entities: 12
        - integrations: 3
        - scale: enterprise
        - compliance: yes
    """

    _HEADER_PATTERN = re.compile(r"^##\s*App:\s*(.+?)\s*$", re.MULTILINE)
    _ANSWER_PATTERN = re.compile(r"^-\s*([\w\s-]+?)\s*:\s*(.*)$")

    _KEY_ALIASES = {
        "entities": "entity_count",
        "entity_count": "entity_count",
        "integrations": "integration_count",
        "integration_count": "integration_count",
        "scale": "scale",
        "compliance": "has_compliance",
        "has_compliance": "has_compliance",
        "multi_region": "is_multi_region",
        "is_multi_region": "is_multi_region",
        "real_time": "has_real_time",
        "realtime": "has_real_time",
        "has_real_time": "has_real_time",
        "tech_stack": "tech_stack",
        "stack": "tech_stack",
    }

    def parse(self, markdown: str) -> InterviewAnswers:
        """Parse markdown answers into structured form."""
        app_name = self._parse_header(markdown)
        answers = self._extract_answers(markdown)
        tech_stack = answers.pop("tech_stack", None) or None

        return InterviewAnswers(
            app_name=app_name,
            inputs=TierInputs.from_dict(answers),
            tech_stack=tech_stack,
        )

    def _parse_header(self, content: str) -> str:
        """Extract app name from header, defaulting to 'app'."""
        match = self._HEADER_PATTERN.search(content)
        if not match:
            return "app"
        return match.group(1)

    def _extract_answers(self, content: str) -> dict[str, str]:
        """Collect '- key: value' bullets under their canonical keys."""
        answers: dict[str, str] = {}
        for line in content.split("\n"):
            line = line.strip()
            match = self._ANSWER_PATTERN.match(line)
            if not match:
                continue

            key = re.sub(r"[\s-]+", "_", match.group(1).strip().lower())
            canonical = self._KEY_ALIASES.get(key)
            if canonical is None:
                continue
            answers[canonical] = match.group(2).strip()

        return answers

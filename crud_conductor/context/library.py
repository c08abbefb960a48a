"""Resolution of context-module identifiers to markdown files."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from ..routing.errors import InvalidInput
from .modules import TECH_STACK_SPECIFIC

logger = logging.getLogger(__name__)

_TECH_STACK_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]*")


@dataclass
class ContextModule:
    """A module identifier and where its document lives, if anywhere."""

    name: str
    path: Path | None
    content: str | None = None

    @property
    def exists(self) -> bool:
        return self.path is not None and self.path.is_file()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "path": str(self.path) if self.path else None,
            "exists": self.exists,
        }


class ContextLibrary:
    """Maps module identifiers onto files under a context directory.

    `tech-stack-specific` is a placeholder resolved against
    `tech-stacks/<tech_stack>.md`; without a tech stack it stays unresolved.
    """

    TECH_STACK_DIR = "tech-stacks"

    def __init__(self, root: Path, tech_stack: str | None = None) -> None:
        if tech_stack is not None and not _is_stack_name(tech_stack):
            raise InvalidInput("tech_stack", f"must be a plain guide name, got {tech_stack!r}")
        self.root = root
        self.tech_stack = tech_stack

    def path_for(self, module: str) -> Path | None:
        if module == TECH_STACK_SPECIFIC:
            if not self.tech_stack:
                return None
            return self.root / self.TECH_STACK_DIR / f"{self.tech_stack}.md"
        return self.root / f"{module}.md"

    def resolve(self, modules: tuple[str, ...]) -> list[ContextModule]:
        """Resolve modules in load order without reading them."""
        return [ContextModule(name=m, path=self.path_for(m)) for m in modules]

    def load(self, modules: tuple[str, ...]) -> list[ContextModule]:
        """Resolve and read modules. Missing documents come back with content=None."""
        loaded = self.resolve(modules)
        for module in loaded:
            if not module.exists:
                logger.warning(f"Context module '{module.name}' not found at {module.path}")
                continue
            module.content = module.path.read_text(encoding="utf-8")
        return loaded


def _is_stack_name(value) -> bool:
    """Stack names map to one file under tech-stacks/; no separators or '..'."""
    return isinstance(value, str) and bool(_TECH_STACK_PATTERN.fullmatch(value)) and ".." not in value

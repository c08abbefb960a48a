"""Router configuration management."""

import json
from dataclasses import dataclass, asdict
from pathlib import Path

from .routing.errors import InvalidInput


@dataclass
class RouterConfig:
    context_dir: str = "context"
    tech_stack: str | None = None

    @classmethod
    def load(cls, project_path: Path) -> "RouterConfig":
        """Load .conductor/router.json, defaults when absent.

        A malformed file raises InvalidInput on `project_path`.
        """
        config_path = project_path / ".conductor" / "router.json"
        if config_path.exists():
            try:
                data = json.loads(config_path.read_text(encoding="utf-8"))
            except ValueError as e:
                raise InvalidInput("project_path", f"malformed {config_path}: {e}")
            return cls._from_dict(data, config_path)
        return cls()

    @classmethod
    def _from_dict(cls, data, config_path: Path) -> "RouterConfig":
        if not isinstance(data, dict):
            raise InvalidInput("project_path", f"{config_path} must hold a JSON object")

        context_dir = data.get("context_dir", "context")
        tech_stack = data.get("tech_stack")
        if not isinstance(context_dir, str) or not context_dir:
            raise InvalidInput("project_path", f"{config_path}: context_dir must be a non-empty string")
        if tech_stack is not None and not isinstance(tech_stack, str):
            raise InvalidInput("project_path", f"{config_path}: tech_stack must be a string")

        return cls(context_dir=context_dir, tech_stack=tech_stack)

    def context_path(self, project_path: Path) -> Path:
        path = Path(self.context_dir)
        return path if path.is_absolute() else project_path / path

    def save(self, project_path: Path) -> None:
        config_dir = project_path / ".conductor"
        config_dir.mkdir(exist_ok=True)
        config_path = config_dir / "router.json"
        config_path.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")

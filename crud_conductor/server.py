import asyncio
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .config import RouterConfig
from .context import ContextLibrary, ContextPromptBuilder, context_modules_for, parse_tier
from .routing import AnswersParser, InvalidInput, TierInputs, decide

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

ANSWER_PROPERTIES = {
    "entity_count": {
        "type": "integer",
        "minimum": 0,
        "description": "Number of domain entities the application will have"
    },
    "integration_count": {
        "type": "integer",
        "minimum": 0,
        "description": "Number of external systems to integrate"
    },
    "scale": {
        "type": "string",
        "enum": ["small", "medium", "enterprise"],
        "description": "Declared deployment size"
    },
    "has_compliance": {
        "type": "boolean",
        "description": "Regulatory requirement such as data-protection or fiscal law (default: false)"
    },
    "is_multi_region": {
        "type": "boolean",
        "description": "Deployment spans more than one region (default: false)"
    },
    "has_real_time": {
        "type": "boolean",
        "description": "Requires push or streaming features (default: false)"
    },
}


def _json(payload) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(payload, indent=2))]


def _error(e: InvalidInput) -> list[TextContent]:
    logger.warning(f"Rejected input: {e}")
    return _json({"status": "error", "field": e.field, "message": str(e)})


class TierRouterMCPServer:

    def __init__(self):
        self._server = Server("crud-conductor")
        self._answers_parser = AnswersParser()
        self._prompt_builder = ContextPromptBuilder()
        self._register_handlers()

    def _register_handlers(self):
        self._server.list_tools()(self._list_tools)
        self._server.call_tool()(self._call_tool)

    async def _list_tools(self) -> list[Tool]:
        return [
            Tool(
                name="compute_tier",
                description=(
                    "Classify a CRUD/REST-API application into TIER_1, TIER_2 or TIER_3 "
                    "from interview answers. Returns score, tier and per-dimension breakdown."
                ),
                inputSchema={
                    "type": "object",
                    "properties": ANSWER_PROPERTIES,
                    "required": ["entity_count", "integration_count", "scale"]
                }
            ),
            Tool(
                name="get_context_modules",
                description="List the context modules to load for a tier, in load order.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "tier": {
                            "type": "string",
                            "description": "Tier name or number (e.g. TIER_2 or 2)"
                        }
                    },
                    "required": ["tier"]
                }
            ),
            Tool(
                name="plan_context",
                description=(
                    "Full routing plan: tier decision, resolved context documents and the "
                    "context-loading prompt. Pass answers as fields or as answers_markdown."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        **ANSWER_PROPERTIES,
                        "answers_markdown": {
                            "type": "string",
                            "description": "Answer sheet starting with '## App: Name' and '- key: value' bullets"
                        },
                        "project_path": {
                            "type": "string",
                            "description": "Project root holding .conductor/router.json (optional)"
                        },
                        "tech_stack": {
                            "type": "string",
                            "description": "Tech stack guide to resolve tech-stack-specific (optional)"
                        }
                    }
                }
            ),
            Tool(
                name="health_check",
                description="Check server health status.",
                inputSchema={
                    "type": "object",
                    "properties": {}
                }
            ),
        ]

    async def _call_tool(self, name: str, arguments: dict) -> list[TextContent]:
        if name == "compute_tier":
            return self._handle_compute_tier(arguments)
        elif name == "get_context_modules":
            return self._handle_get_context_modules(arguments)
        elif name == "plan_context":
            return self._handle_plan_context(arguments)
        elif name == "health_check":
            return self._handle_health_check(arguments)
        else:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]

    def _handle_compute_tier(self, arguments: dict) -> list[TextContent]:
        """Handle compute_tier tool call."""
        try:
            inputs = TierInputs.from_dict(arguments)
        except InvalidInput as e:
            return _error(e)

        decision = decide(inputs)
        return _json({
            "status": "ok",
            "score": decision.score,
            "tier": decision.tier.name,
            "contributions": decision.to_dict()["contributions"],
        })

    def _handle_get_context_modules(self, arguments: dict) -> list[TextContent]:
        """Handle get_context_modules tool call."""
        try:
            tier = parse_tier(arguments.get("tier", ""))
        except InvalidInput as e:
            return _error(e)

        return _json({
            "status": "ok",
            "tier": tier.name,
            "modules": list(context_modules_for(tier)),
        })

    def _handle_plan_context(self, arguments: dict) -> list[TextContent]:
        """Handle plan_context — decision plus resolved documents and prompt."""
        app_name = None
        tech_stack = arguments.get("tech_stack")
        try:
            if arguments.get("answers_markdown"):
                answers = self._answers_parser.parse(arguments["answers_markdown"])
                inputs = answers.inputs
                app_name = answers.app_name
                tech_stack = tech_stack or answers.tech_stack
            else:
                fields = {k: v for k, v in arguments.items() if k in ANSWER_PROPERTIES}
                inputs = TierInputs.from_dict(fields)
        except InvalidInput as e:
            return _error(e)

        library = None
        if arguments.get("project_path"):
            project_path = Path(arguments["project_path"])
            if not project_path.exists():
                return [TextContent(type="text", text=f"Path does not exist: {project_path}")]
            try:
                config = RouterConfig.load(project_path)
                library = ContextLibrary(config.context_path(project_path), tech_stack or config.tech_stack)
            except InvalidInput as e:
                return _error(e)

        decision = decide(inputs)
        result = {"status": "ok", "app_name": app_name, **decision.to_dict()}
        if library is not None:
            result["resolved"] = [m.to_dict() for m in library.resolve(decision.modules)]
        result["prompt"] = self._prompt_builder.build_prompt(decision, library)
        return _json(result)

    def _handle_health_check(self, arguments: dict) -> list[TextContent]:
        """Returns server status."""
        return _json({
            "status": "ok",
            "timestamp": datetime.now().isoformat(),
            "version": VERSION
        })

    async def run(self):
        async with stdio_server() as (read_stream, write_stream):
            await self._server.run(read_stream, write_stream, self._server.create_initialization_options())


def main():
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    server = TierRouterMCPServer()
    asyncio.run(server.run())


if __name__ == "__main__":
    main()

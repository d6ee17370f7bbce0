"""Typed tool descriptors exposing the catalogs to a tool-calling client."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping

from .logging import get_logger
from .stores import CatalogStore

ToolHandler = Callable[[Mapping[str, Any]], str]


class ToolInputError(ValueError):
    """Raised when tool arguments do not satisfy the tool's input schema."""


@dataclass(frozen=True)
class ToolDescriptor:
    """A named tool with a JSON-schema style input contract and a handler."""

    name: str
    description: str
    handler: ToolHandler
    input_schema: Mapping[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}, "required": []}
    )

    def validate(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        """Return the declared arguments, dropping any key the schema does not list."""
        properties = self.input_schema.get("properties", {})
        for key in self.input_schema.get("required", []):
            if key not in arguments:
                raise ToolInputError(f"Tool '{self.name}' requires argument '{key}'")
        accepted: Dict[str, Any] = {}
        for key, value in arguments.items():
            schema = properties.get(key)
            if schema is None:
                continue
            if schema.get("type") == "string" and not isinstance(value, str):
                raise ToolInputError(f"Argument '{key}' for tool '{self.name}' must be a string")
            accepted[key] = value
        return accepted


class ToolRegistry:
    """Holds the closed set of tools and dispatches calls to them."""

    def __init__(self) -> None:
        self._tools: Dict[str, ToolDescriptor] = {}
        self.logger = get_logger("tools")

    def register(self, descriptor: ToolDescriptor) -> None:
        if descriptor.name in self._tools:
            raise ValueError(f"Tool '{descriptor.name}' is already registered")
        self._tools[descriptor.name] = descriptor

    def descriptors(self) -> List[ToolDescriptor]:
        return list(self._tools.values())

    def get(self, name: str) -> ToolDescriptor:
        try:
            return self._tools[name]
        except KeyError:
            raise KeyError(f"Unknown tool: {name}") from None

    def call(self, name: str, arguments: Mapping[str, Any] | None = None) -> str:
        descriptor = self.get(name)
        args = descriptor.validate(arguments or {})
        self.logger.debug("Calling tool %s with %s", name, sorted(args))
        return descriptor.handler(args)


def _to_text(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def build_default_registry(store: CatalogStore) -> ToolRegistry:
    """Register the catalog tools backed by an already loaded ``store``."""
    registry = ToolRegistry()

    registry.register(
        ToolDescriptor(
            name="get-interface-list",
            description="List SDK method names and their parameters.",
            handler=lambda _args: _to_text(store.interfaces()),
        )
    )

    def _interface_docs(args: Mapping[str, Any]) -> str:
        name = args["name"]
        target = store.find_interface(name)
        if target is None:
            return f"Interface not found: {name}"
        return _to_text(
            {
                "name": target.get("name"),
                "params": target.get("params", []),
                "jsdoc": target.get("jsdoc") or "",
            }
        )

    registry.register(
        ToolDescriptor(
            name="get-interface-docs",
            description="Return the documentation of one SDK method by name.",
            handler=_interface_docs,
            input_schema={
                "type": "object",
                "properties": {
                    "name": {"type": "string", "description": "Method name, e.g. getUserId"}
                },
                "required": ["name"],
            },
        )
    )

    registry.register(
        ToolDescriptor(
            name="get-event-list",
            description="List SDK event names and values.",
            handler=lambda _args: _to_text(store.events()),
        )
    )

    registry.register(
        ToolDescriptor(
            name="get-message-types",
            description="List message types ordered by content type value.",
            handler=lambda _args: _to_text(store.sorted_message_types()),
        )
    )

    return registry


__all__ = [
    "ToolDescriptor",
    "ToolInputError",
    "ToolRegistry",
    "build_default_registry",
]

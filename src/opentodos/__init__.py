"""opentodos: extract open todo items from markdown outlines."""

from opentodos.exceptions import ConfigError, OpenTodosError, SourceReadError
from opentodos.extraction import TodoOptions, extract_todos, get_todos
from opentodos.schemas import ContentGroup, OutlineNode

__all__ = [
    "ConfigError",
    "ContentGroup",
    "OpenTodosError",
    "OutlineNode",
    "SourceReadError",
    "TodoOptions",
    "extract_todos",
    "get_todos",
]

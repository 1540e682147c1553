# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (all seven tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes every operation in core/registry.py as an MCP tool.  Each tool is
#   a thin wrapper: it logs the call, forwards the parameter bag to the
#   shared registry and returns the result dict unchanged.
#
# HOW IT WORKS (the flow):
#   1. A tool-calling client lists the tools (names, descriptions, params)
#   2. It calls one by name, e.g. "unit-converter"
#   3. FastMCP validates the arguments against the typed signature below
#   4. The wrapper calls registry.dispatch(name, params)
#   5. The result dict goes back to the client; an OperationError becomes a
#      ToolError carrying the same message
#
# TOOL NAMES:
#   Tool names are the operation names (hyphenated).  The Python wrappers use
#   snake_case and are registered under the hyphenated name at the bottom of
#   this file.  unit-converter takes a parameter called "from", which is a
#   Python keyword, so its wrapper argument is renamed with ArgTransform.
#
# RUNNING THIS SERVER:
#   a) Through main.py:  python main.py   (stdio, or http via TOOLS_TRANSPORT)
#   b) Standalone:       python -m tools.mcp_server   (stdio)
# =============================================================================

import json
import logging
import sys
from typing import Annotated, Any, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool_transform import ArgTransform
from pydantic import Field

from core.errors import OperationError
from core.registry import build_registry
from tools.settings import load_settings

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: with the stdio transport, STDOUT carries the MCP JSON
# messages and anything else written there would corrupt the stream.
#
# ANSI colors in the terminal:
#   CYAN   incoming tool calls with their parameters
#   YELLOW intermediate status
#   GREEN  response JSON
#   RED    operation failures
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/progress messages
_RED = "\033[31m"      # Failures
_RESET = "\033[0m"     # Reset to default terminal color

settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result, separators=(',', ':'), ensure_ascii=False)}{_RESET}"
    )
    return result


def _log_failure(tool_name: str, exc: OperationError) -> None:
    """Log a typed operation failure in RED."""
    logging.warning(f"{_RED}  ✗ {tool_name} failed: {exc.kind}: {exc.message}{_RESET}")


# =============================================================================
# Server and registry
# =============================================================================
# One registry for the process.  Every operation is stateless, so concurrent
# tool calls can share it.
mcp = FastMCP("utility-tools")
registry = build_registry()


def _invoke(tool_name: str, **params: Any) -> dict:
    """Dispatch one tool call to the registry, logging both ends."""
    _log_request(tool_name, **params)
    try:
        result = registry.dispatch(tool_name, params)
    except OperationError as exc:
        _log_failure(tool_name, exc)
        raise ToolError(f"{exc.kind}: {exc.message}") from exc
    return _log_response(tool_name, result)


# =============================================================================
# TOOL: greeting
# =============================================================================
def greeting(
    name: Annotated[str, Field(description="Name of the person to greet")],
    language: Annotated[
        Optional[str],
        Field(description="Language for greeting: english, spanish or french (defaults to random)"),
    ] = None,
) -> dict:
    """Greet a person in English, Spanish or French.

    Returns:
        A dict with:
          - greeting: The rendered greeting
          - language: The language used (the random pick if none was given)
    """
    return _invoke("greeting", name=name, language=language)


# =============================================================================
# TOOL: todays-date
# =============================================================================
def todays_date(
    format: Annotated[
        Optional[str],
        Field(description="Date format: '%Y-%m-%d' (default), '%B %d, %Y' or '%d/%m/%Y'"),
    ] = None,
) -> dict:
    """Return today's date in the requested format.

    Returns:
        A dict with:
          - date: The formatted date
          - format: The format token used
          - timestamp: Current time in seconds since the epoch
    """
    return _invoke("todays-date", format=format)


# =============================================================================
# TOOL: random-generator
# =============================================================================
def random_generator(
    type: Annotated[str, Field(description='Type of random value: "number", "uuid", or "password"')],
    min: Annotated[Optional[int], Field(description="Minimum value for random number (default: 0)")] = None,
    max: Annotated[Optional[int], Field(description="Maximum value for random number (default: 100)")] = None,
    length: Annotated[Optional[int], Field(description="Length of generated password (default: 12)")] = None,
) -> dict:
    """Generate a random number, UUID or password.

    Returns:
        A dict with:
          - type: "number", "uuid" or "password"
          - value: The generated value
          - range: "<min>-<max>" (number only)
          - length: Password length (password only)
    """
    return _invoke("random-generator", type=type, min=min, max=max, length=length)


# =============================================================================
# TOOL: string-utility
# =============================================================================
def string_utility(
    text: Annotated[str, Field(description="The text to transform")],
    operation: Annotated[
        str,
        Field(description='Operation: "uppercase", "lowercase", "reverse", "slug", "capitalize", or "title"'),
    ],
) -> dict:
    """Transform a string.

    Returns:
        A dict with original, operation and result.
    """
    return _invoke("string-utility", text=text, operation=operation)


# =============================================================================
# TOOL: math-calculator
# =============================================================================
def math_calculator(
    operation: Annotated[str, Field(description="Math operation to perform")],
    a: Annotated[int | float, Field(description="First number")],
    b: Annotated[
        Optional[int | float],
        Field(description="Second number (required for binary operations, default: 0)"),
    ] = None,
) -> dict:
    """Perform one arithmetic operation.

    Returns:
        A dict with operation, input ({a} or {a, b}) and result.
    """
    return _invoke("math-calculator", operation=operation, a=a, b=b)


# =============================================================================
# TOOL: unit-converter
# =============================================================================
def unit_converter(
    value: Annotated[int | float, Field(description="The value to convert")],
    from_unit: Annotated[str, Field(description="Source unit")],
    to: Annotated[str, Field(description="Target unit")],
    category: Annotated[str, Field(description='Category: "temperature", "distance", or "weight"')],
) -> dict:
    """Convert a value between units of the same category.

    Returns:
        A dict with value, from, to, category and result (2 decimal places).
    """
    params = {"value": value, "from": from_unit, "to": to, "category": category}
    return _invoke("unit-converter", **params)


# =============================================================================
# TOOL: text-analyzer
# =============================================================================
def text_analyzer(
    text: Annotated[str, Field(description="The text to analyze")],
) -> dict:
    """Analyze text and report statistics.

    Returns:
        A dict with characters, charactersNoSpaces, words, sentences,
        paragraphs, averageWordLength, averageSentenceLength,
        mostCommonWords (top 5) and readingTimeMinutes.
    """
    return _invoke("text-analyzer", text=text)


# =============================================================================
# Tool registration
# =============================================================================
TOOL_FUNCTIONS = {
    "greeting": greeting,
    "todays-date": todays_date,
    "random-generator": random_generator,
    "string-utility": string_utility,
    "math-calculator": math_calculator,
    "text-analyzer": text_analyzer,
}

for _name, _func in TOOL_FUNCTIONS.items():
    mcp.add_tool(Tool.from_function(_func, name=_name, description=registry.get(_name).description))

mcp.add_tool(Tool.from_tool(
    Tool.from_function(unit_converter, name="unit-converter"),
    name="unit-converter",
    description=registry.get("unit-converter").description,
    transform_args={"from_unit": ArgTransform(name="from")},
))


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    _log_status(f"Serving {len(registry)} tools over stdio")
    mcp.run()

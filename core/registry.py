# =============================================================================
# core/registry.py  -  Operation Registry / Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps an operation name ("math-calculator", "text-analyzer", ...) to a
#   handler with one uniform signature:
#
#       handler(params: Mapping[str, Any]) -> dict
#
#   dispatch() looks the name up, calls the handler and returns its result
#   dict unchanged.  Handler errors (core/errors.py) propagate as-is: no
#   retries and no partial results.
#
# THE COMPOSITION ROOT:
#   build_registry() wires the seven operations to the engines in core/,
#   injecting the RandomSource and Clock.  It is the only place that knows
#   about every engine.
#
# PARAMETER BAGS:
#   The orchestrator has already validated parameter *types*.  dispatch()
#   checks that required parameters are present and fills in the declared
#   defaults (a None value counts as absent); handlers then only convert
#   result dataclasses into the wire shape.
# =============================================================================

import logging
from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from core import calculator, dates, greetings, randomizer, strings, text_analysis, units
from core.errors import MissingParameter, UnsupportedOperation
from core.models import OperationRequest
from core.sources import Clock, RandomSource, SystemClock, default_random_source

logger = logging.getLogger(__name__)

Handler = Callable[[Mapping[str, Any]], dict[str, Any]]


@dataclass
class Operation:
    """A named operation and its parameter contract."""

    name: str                                          # "unit-converter"
    description: str                                   # Shown to tool-calling clients
    handler: Handler
    required: tuple[str, ...] = ()                     # Parameters with no default
    optional: dict[str, Any] = field(default_factory=dict)  # name -> default (None = random)


class OperationRegistry:
    """Registry of operations, keyed by name, in registration order."""

    def __init__(self) -> None:
        self._operations: dict[str, Operation] = {}

    def register(self, operation: Operation) -> None:
        """Register an operation, replacing any earlier one with the same name."""
        self._operations[operation.name] = operation

    def get(self, name: str) -> Operation | None:
        return self._operations.get(name)

    def names(self) -> list[str]:
        return list(self._operations)

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)

    def dispatch(self, name: str, params: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        """Invoke the operation called ``name`` with a parameter bag.

        A None value counts as absent.  Absent optional parameters take the
        operation's declared defaults before the handler sees the bag.

        Raises:
            UnsupportedOperation: No operation is registered under ``name``.
            MissingParameter: A required parameter is absent.
            OperationError: Whatever the handler raised, unchanged.
        """
        operation = self._operations.get(name)
        if operation is None:
            raise UnsupportedOperation(
                f"Unsupported operation: {name}. Available: {', '.join(self._operations)}",
                value=name,
            )

        supplied = {k: v for k, v in (params or {}).items() if v is not None}
        missing = [p for p in operation.required if p not in supplied]
        if missing:
            raise MissingParameter(
                f"{name} is missing required parameter(s): {', '.join(missing)}",
                value=missing[0],
            )

        request = OperationRequest(
            name=name,
            parameters=MappingProxyType({**operation.optional, **supplied}),
        )
        logger.debug("dispatch %s %r", request.name, dict(request.parameters))
        return operation.handler(request.parameters)


# =============================================================================
# Handlers: parameter bag in, wire-shaped dict out
# =============================================================================
def _greeting_handler(source: RandomSource) -> Handler:
    def handle(params: Mapping[str, Any]) -> dict[str, Any]:
        return asdict(greetings.greet(source, params["name"], params.get("language")))
    return handle


def _todays_date_handler(clock: Clock) -> Handler:
    def handle(params: Mapping[str, Any]) -> dict[str, Any]:
        return asdict(dates.format_today(clock, params.get("format")))
    return handle


def _random_generator_handler(source: RandomSource) -> Handler:
    def handle(params: Mapping[str, Any]) -> dict[str, Any]:
        result = randomizer.generate(
            source,
            params["type"],
            minimum=params["min"],
            maximum=params["max"],
            length=params["length"],
        )
        # Only the field that applies to this type is reported.
        return {k: v for k, v in asdict(result).items() if v is not None}
    return handle


def _string_utility(params: Mapping[str, Any]) -> dict[str, Any]:
    return asdict(strings.transform(params["text"], params["operation"]))


def _math_calculator(params: Mapping[str, Any]) -> dict[str, Any]:
    return asdict(calculator.calculate(params["operation"], params["a"], params["b"]))


def _unit_converter(params: Mapping[str, Any]) -> dict[str, Any]:
    result = units.convert(params["value"], params["from"], params["to"], params["category"])
    return {
        "value": result.value,
        "from": result.from_unit,
        "to": result.to_unit,
        "category": result.category,
        "result": result.result,
    }


def _text_analyzer(params: Mapping[str, Any]) -> dict[str, Any]:
    stats = text_analysis.analyze(params["text"])
    return {
        "characters": stats.characters,
        "charactersNoSpaces": stats.characters_no_spaces,
        "words": stats.words,
        "sentences": stats.sentences,
        "paragraphs": stats.paragraphs,
        "averageWordLength": stats.average_word_length,
        "averageSentenceLength": stats.average_sentence_length,
        "mostCommonWords": [asdict(entry) for entry in stats.most_common_words],
        "readingTimeMinutes": stats.reading_time_minutes,
    }


def build_registry(
    random_source: Optional[RandomSource] = None,
    clock: Optional[Clock] = None,
) -> OperationRegistry:
    """Create a registry with all seven operations wired up.

    Args:
        random_source: Randomness for greeting and random-generator
            (defaults to an OS-entropy source).
        clock: Time source for todays-date (defaults to the system clock).
    """
    source = random_source if random_source is not None else default_random_source()
    clock = clock if clock is not None else SystemClock()

    registry = OperationRegistry()
    registry.register(Operation(
        name="greeting",
        description="Greets a person in a random language (English, Spanish, or French)",
        handler=_greeting_handler(source),
        required=("name",),
        optional={"language": None},
    ))
    registry.register(Operation(
        name="todays-date",
        description="Returns today's date in the specified format",
        handler=_todays_date_handler(clock),
        optional={"format": dates.ISO_FORMAT},
    ))
    registry.register(Operation(
        name="random-generator",
        description="Generates random values (number, UUID, or password)",
        handler=_random_generator_handler(source),
        required=("type",),
        optional={
            "min": randomizer.DEFAULT_MIN,
            "max": randomizer.DEFAULT_MAX,
            "length": randomizer.DEFAULT_PASSWORD_LENGTH,
        },
    ))
    registry.register(Operation(
        name="string-utility",
        description="Performs string operations: uppercase, lowercase, reverse, slug, capitalize, or title case",
        handler=_string_utility,
        required=("text", "operation"),
    ))
    registry.register(Operation(
        name="math-calculator",
        description=(
            "Performs mathematical operations: add, subtract, multiply, divide, "
            "power, sqrt, percentage, abs, round, floor, ceil"
        ),
        handler=_math_calculator,
        required=("operation", "a"),
        optional={"b": 0},
    ))
    registry.register(Operation(
        name="unit-converter",
        description="Converts between different units (temperature, distance, weight)",
        handler=_unit_converter,
        required=("value", "from", "to", "category"),
    ))
    registry.register(Operation(
        name="text-analyzer",
        description="Analyzes text and provides statistics (word count, character count, reading time, etc.)",
        handler=_text_analyzer,
        required=("text",),
    ))

    logger.debug("Registered operations: %s", ", ".join(registry.names()))
    return registry

# =============================================================================
# core/greetings.py  -  Greeting Selector
# =============================================================================
#
# Picks a language (randomly when the caller doesn't name one) and renders a
# fixed greeting template with the person's name.  Unknown languages get the
# English template; the result still reports the language as requested.
# =============================================================================

from typing import Optional

from core.models import GreetingResult
from core.sources import RandomSource

LANGUAGES = ("english", "spanish", "french")

_TEMPLATES: dict[str, str] = {
    "english": "Hello, {name}! How are you?",
    "spanish": "¡Hola, {name}! ¿Cómo estás?",
    "french": "Bonjour, {name}! Comment ça va?",
}


def greet(source: RandomSource, name: str, language: Optional[str] = None) -> GreetingResult:
    """Greet ``name`` in ``language``, or in a random supported language."""
    selected = language or source.choice(LANGUAGES)
    template = _TEMPLATES.get(selected.lower(), _TEMPLATES["english"])
    return GreetingResult(greeting=template.format(name=name), language=selected)

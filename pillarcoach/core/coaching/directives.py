"""
Directive compiler: coaching model in, instruction block out.

Pure lookup and formatting. The same model always yields byte-identical
text, which keeps generated prompts diffable across releases.
"""

from collections.abc import Iterable

from .lexicon import definition_of
from .models import CoachingModel, Directive

DIRECTIVE_TEMPLATE = """Du använder {name}-metoden i din coaching.

APPROACH: {approach}

FOKUSOMRÅDEN:
{focus_areas}

METODER ATT ANVÄNDA:
{methodologies}

FÖRVÄNTADE RESULTAT:
{expected_outcomes}

VIKTIGT: Anpassa alltid din coaching till individens specifika situation och behov."""


def bullet_list(items: Iterable[str]) -> str:
    """Render items as '• item' lines."""
    return "\n".join(f"• {item}" for item in items)


def compile_directive(model: CoachingModel) -> Directive:
    """Build the instruction block for a coaching model."""
    definition = definition_of(model)

    text = DIRECTIVE_TEMPLATE.format(
        name=definition.display_name,
        approach=definition.approach,
        focus_areas=bullet_list(definition.focus_areas),
        methodologies=bullet_list(definition.methodologies),
        expected_outcomes=bullet_list(definition.expected_outcomes),
    )

    return Directive(
        model=model,
        text=text,
        focus_areas=definition.focus_areas,
        methodologies=definition.methodologies,
        expected_outcomes=definition.expected_outcomes,
    )

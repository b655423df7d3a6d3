"""Plain-text rendering of conjugation results (for copying)."""

from collections import defaultdict

from models import ConjugationForm, ConjugationResult
from conjugator.forms import CATEGORY_ORDER


def format_form(form: ConjugationForm) -> str:
    """Render one form as ``kanji (hiragana) [romaji]``.

    Examples:
        >>> format_form(find_form(conjugate("書く"), "te"))
        '書いて (書いて) [書ite]'
    """
    return f"{form.kanji} ({form.hiragana}) [{form.romaji}]"


def format_result(result: ConjugationResult) -> str:
    """Render a whole result, grouped by category in catalogue order.

    The header gives the dictionary form with its romaji, the verb class and
    the stem. Each non-empty category follows as a ``=== CATEGORY ===`` block
    with one ``Name: kanji (hiragana) [romaji]`` line per form.
    """
    by_category: dict[str, list[ConjugationForm]] = defaultdict(list)
    for form in result.forms:
        by_category[form.category].append(form)

    verb = result.verb
    lines = [
        f"{verb.dictionary_form} ({verb.romaji})",
        f"Type: {verb.type}",
        f"Stem: {verb.stem}",
        "",
    ]

    for category in CATEGORY_ORDER:
        forms = by_category.get(category)
        if not forms:
            continue
        lines.append(f"=== {category.upper()} ===")
        lines.extend(f"{form.name}: {format_form(form)}" for form in forms)
        lines.append("")

    return "\n".join(lines)

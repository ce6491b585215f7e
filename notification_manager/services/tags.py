"""Placeholder tag extraction for notification templates."""

import re

# A placeholder name is any non-empty run that does not contain "}}"
TAG_PATTERN = re.compile(r"\{\{((?:(?!\}\}).)+)\}\}", re.DOTALL)


def extract_tags(template_body: str | None) -> list[str]:
    """Return the distinct ``{{name}}`` placeholders in first-seen order.

    >>> extract_tags("Hello {{name}}, your code is {{code}}. Bye {{name}}")
    ['name', 'code']
    """
    if not template_body:
        return []

    # dict preserves insertion order and drops repeats
    return list(dict.fromkeys(TAG_PATTERN.findall(template_body)))

"""Template rendering: metadata validation and placeholder substitution."""

import json
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .errors import ValidationError


@dataclass(frozen=True)
class RenderedTemplate:
    subject: str
    body: str


def stringify(value: Any) -> str:
    """Spell a metadata value the way it appeared in the JSON request."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def validate_metadata(declared_tags: Iterable[str], metadata: Mapping[str, Any] | None) -> None:
    """Raise ValidationError naming the first declared tag missing from metadata."""
    provided = metadata or {}
    for tag in declared_tags:
        if tag not in provided:
            raise ValidationError(f'"{tag}" is required in metadata object', field=tag)


def render(
    template_subject: str,
    template_body: str,
    declared_tags: Iterable[str] | None,
    metadata: Mapping[str, Any] | None,
) -> RenderedTemplate:
    """
    Fill a notification template with metadata.

    Every declared tag must be present in metadata; extra keys are allowed.
    For each metadata key only the FIRST ``{{key}}`` occurrence in the body is
    replaced, and the subject is returned untouched. Both behaviours are kept
    as-is pending product confirmation.

    With no declared tags the template is returned without validation or
    substitution.
    """
    tags = list(declared_tags or [])
    if not tags:
        return RenderedTemplate(subject=template_subject, body=template_body)

    validate_metadata(tags, metadata)

    body = template_body
    for key, value in (metadata or {}).items():
        body = body.replace(f"{{{{{key}}}}}", stringify(value), 1)

    return RenderedTemplate(subject=template_subject, body=body)

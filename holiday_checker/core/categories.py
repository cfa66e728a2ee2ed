# holiday_checker/core/categories.py
from typing import Optional, Sequence

# (substring of the first upstream tag, display category); first match wins
_RULES = [
    ('national',   'National'),
    ('local',      'Local'),
    ('observance', 'Observance'),
    ('common',     'Local'),
]


def normalize_type(type_tags: Optional[Sequence[str]]) -> str:
    """
    Display category for a holiday's upstream type tags.

    Only the first tag counts. Unrecognized tags are returned verbatim,
    an empty or missing list gives the generic "Holiday".
    """
    if not type_tags:
        return 'Holiday'
    first = type_tags[0]
    lowered = first.lower()
    for needle, category in _RULES:
        if needle in lowered:
            return category
    return first


def css_class(category: str) -> str:
    return category.lower().replace(' ', '-')

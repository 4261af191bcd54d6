"""
Localized label selection for lookup rows.
"""
from typing import Optional

from constants import Language


def label_field(lang: Optional[str]) -> str:
    """Column holding the label for `lang`; Korean is the default."""
    if lang == Language.ENGLISH.value:
        return "name"
    if lang == Language.THAI.value:
        return "thai_label"
    return "label"


def localized_label(row, lang: Optional[str], default: str = "") -> str:
    """
    Label of a lookup row (department, priority, ...) in `lang`.

    Falls back to the Korean label when the selected one is empty, and to
    `default` when there is no row at all.
    """
    if row is None:
        return default
    return getattr(row, label_field(lang), None) or row.label or default

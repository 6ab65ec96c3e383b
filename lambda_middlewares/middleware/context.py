"""Helpers for deriving per-link invocation context."""

import copy
from collections.abc import Mapping
from typing import Any


def extend_context(context: Any, **fields: Any) -> Any:
    """
    Return a copy of ``context`` with extra fields; the original is untouched.

    Mappings come back as a new dict (later keys win). Any other object is
    shallow-copied and the fields are set as attributes. ``None`` counts as
    an empty mapping.
    """
    if context is None:
        return dict(fields)
    if isinstance(context, Mapping):
        return {**context, **fields}

    extended = copy.copy(context)
    for key, value in fields.items():
        setattr(extended, key, value)
    return extended

"""Human-relative time formatting."""

from datetime import datetime
from typing import Final

import pendulum
from pendulum.helpers import format_diff

_KIB: Final = 1024


def humanize_since(moment: datetime, *, now: datetime | None = None) -> str:
    """Describe a moment relative to now, e.g. "3 days ago".

    Args:
        moment: Timezone-aware datetime to describe.
        now: Reference time. Defaults to the current time.

    Returns:
        Human-readable relative time in the default pendulum locale.
    """
    instance = pendulum.instance(moment)
    reference = pendulum.instance(now) if now is not None else pendulum.now("UTC")
    return format_diff(instance.diff(reference), is_now=True)


def human_size(size: int) -> str:
    """Format a byte count for display, e.g. "1.2 KB"."""
    if size < _KIB:
        return f"{size} bytes"
    value = size / _KIB
    for unit in ("KB", "MB"):
        if value < _KIB:
            return f"{value:.1f} {unit}"
        value /= _KIB
    return f"{value:.1f} GB"

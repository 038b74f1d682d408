"""
Unit conversion and formatting rules for the bottle inventory.

These helpers encapsulate the only two-unit system the inventory knows
about: metric millilitres and non-metric fluid ounces. Conversions
always truncate towards zero so that a 12 fl oz bottle is reported as
354 ml, never 355.

All functions are pure: they depend solely on their inputs and do
not modify any external state.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from bottles.config import DEFAULTS


def fl_oz_to_ml(fl_oz: int, factor: Optional[float] = None) -> int:
    """Convert fluid ounces to whole millilitres.

    Parameters
    ----------
    fl_oz: int
        Volume in fluid ounces.
    factor: float, optional
        Millilitres per fluid ounce. Defaults to ``DEFAULTS.ml_per_fl_oz``.

    Returns
    -------
    int
        ``fl_oz * factor`` truncated to an integer.
    """
    if factor is None:
        factor = DEFAULTS.ml_per_fl_oz
    return int(fl_oz * factor)


def size_label(size: int, is_metric: bool) -> str:
    """Return the display label of a container size, always in ml.

    Non-metric sizes are annotated with the original value, e.g.
    ``"354 ml (Converted from 12 fl oz)"``.
    """
    if is_metric:
        return f"{size} ml"
    return f"{fl_oz_to_ml(size)} ml (Converted from {size} fl oz)"


def normalize_str(x: Any) -> Optional[str]:
    """Strip ``x``; blank or ``None`` becomes ``None``."""
    if x is None:
        return None
    s = str(x).strip()
    return s or None


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Format ``moment`` (default: now) with ``DEFAULTS.date_format``."""
    moment = moment or datetime.now()
    return moment.strftime(DEFAULTS.date_format)

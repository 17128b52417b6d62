"""Timestamp helpers."""

import logging
import math
from datetime import datetime
from typing import Any

from ingress_inventory.types import Timestamp

logger = logging.getLogger(__name__)


def to_timestamp(value: Any) -> Timestamp:
    """Coerce an exported timestamp (number or numeric string) to epoch ms.

    Undecodable values become ``0``, which sorts as the oldest possible time.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Undecodable timestamp %r", value)
        return 0
    if not math.isfinite(number):
        return 0
    return int(number)


def format_local_ts(ms: Any) -> str:
    """Format epoch milliseconds in local time, e.g. ``"Mar 05, 2024, 14:07 CET"``.

    Returns an empty string for zero, missing or out-of-range values.
    """
    millis = to_timestamp(ms)
    if not millis:
        return ""
    try:
        moment = datetime.fromtimestamp(millis / 1000).astimezone()
    except (OverflowError, OSError, ValueError):
        return ""
    return moment.strftime("%b %d, %Y, %H:%M %Z").strip()

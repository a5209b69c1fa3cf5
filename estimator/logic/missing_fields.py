# logic/missing_fields.py

import math

from estimator.models import PropertyDescription


def _is_missing_number(value, minimum: float, inclusive: bool) -> bool:
    if value is None or math.isnan(value):
        return True
    return value < minimum if inclusive else value <= minimum


def find_missing_fields(details: PropertyDescription) -> list:
    """
    Returns the required fields that block submission, in form order.
    An empty list means the description may be sent for estimation.
    NaN (unparseable number input) counts as missing.
    """

    missing = []

    if not details.location or not details.location.strip():
        missing.append("location")

    if _is_missing_number(details.area, 0, inclusive=False):
        missing.append("area")

    if _is_missing_number(details.room_count, 1, inclusive=True):
        missing.append("room_count")

    return missing

# controller.py

import logging
from contextlib import contextmanager

from estimator.errors import EstimationError, ServiceError, ValidationError
from estimator.logic.missing_fields import find_missing_fields
from estimator.models import (
    PropertyCondition,
    PropertyType,
    SessionState,
    coerce_enum,
)

logger = logging.getLogger(__name__)

# Form input names -> PropertyDescription attributes
FIELD_ALIASES = {
    "type": "property_type",
    "propertyType": "property_type",
    "property_type": "property_type",
    "location": "location",
    "area": "area",
    "rooms": "room_count",
    "roomCount": "room_count",
    "room_count": "room_count",
    "condition": "condition",
    "description": "description",
}

NUMERIC_FIELDS = {"area", "room_count"}

ENUM_FIELDS = {
    "property_type": PropertyType,
    "condition": PropertyCondition,
}


def parse_number(raw) -> float:
    # Unparseable input becomes NaN and is rejected at submit time.
    try:
        return float(raw)
    except (TypeError, ValueError):
        return float("nan")


class EstimationController:
    """
    Owns the session state of one form and drives the estimator.

    Idle -> Validating -> Idle + error            (missing fields)
                       -> Loading -> Idle + result | Idle + error
    """

    def __init__(self, estimator, state: SessionState | None = None):
        self.estimator = estimator
        self.state = state or SessionState()

    # -----------------------
    # Form edits
    # -----------------------
    def update_field(self, name: str, raw_value):
        attr = FIELD_ALIASES.get(name)
        if attr is None:
            raise ValidationError(f"Невідоме поле форми: {name}")

        if attr in NUMERIC_FIELDS:
            value = parse_number(raw_value)
        elif attr in ENUM_FIELDS:
            try:
                value = coerce_enum(ENUM_FIELDS[attr], raw_value)
            except ValueError as e:
                raise ValidationError(f"Невідоме значення поля {name}: {raw_value}") from e
        else:
            value = "" if raw_value is None else str(raw_value)

        setattr(self.state.form, attr, value)

    def update_fields(self, data):
        for name in data:
            if name in FIELD_ALIASES:
                self.update_field(name, data[name])

    # -----------------------
    # Submission
    # -----------------------
    @contextmanager
    def _in_flight(self):
        self.state.error = None
        self.state.result = None
        self.state.loading = True
        try:
            yield
        finally:
            self.state.loading = False

    async def submit(self):
        if self.state.loading:
            logger.info("Submission ignored: an estimate is already in flight")
            return

        missing = find_missing_fields(self.state.form)
        if missing:
            logger.info("Submission blocked, missing fields: %s", missing)
            self.state.error = ValidationError().message
            return

        with self._in_flight():
            try:
                self.state.result = await self.estimator.estimate(self.state.form)
            except EstimationError as e:
                self.state.error = e.message
            except Exception:
                logger.exception("Unexpected failure while estimating")
                self.state.error = ServiceError().message

    # -----------------------
    # Display
    # -----------------------
    def view(self) -> str:
        if self.state.error:
            return "error"
        if self.state.loading:
            return "loading"
        if self.state.result is not None:
            return "result"
        return "empty"

# models.py

import math
from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PropertyType(str, Enum):
    APARTMENT = "Квартира"
    HOUSE = "Будинок"
    TOWNHOUSE = "Таунхаус"
    COMMERCIAL = "Комерційна нерухомість"


class PropertyCondition(str, Enum):
    NEEDS_REPAIR = "Потребує ремонту"
    RESIDENTIAL = "Житловий стан"
    COSMETIC_REPAIR = "Косметичний ремонт"
    EURO_REPAIR = "Євроремонт"
    DESIGNER_REPAIR = "Дизайнерський ремонт"
    SHELL = "Без ремонту (новобудова)"


def coerce_enum(enum_cls, raw):
    """
    Accepts an enum member, its value ("Квартира") or its name ("apartment").
    Raises ValueError for anything else.
    """
    if isinstance(raw, enum_cls):
        return raw

    text = str(raw).strip()

    try:
        return enum_cls(text)
    except ValueError:
        pass

    try:
        return enum_cls[text.upper()]
    except KeyError:
        raise ValueError(f"{text!r} is not a valid {enum_cls.__name__}")


@dataclass
class PropertyDescription:
    property_type: PropertyType = list(PropertyType)[0]
    location: str = ""
    area: float = 50.0
    room_count: float = 2.0
    condition: PropertyCondition = list(PropertyCondition)[0]
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "property_type": self.property_type.value,
            "location": self.location,
            "area": self.area,
            "room_count": self.room_count,
            "condition": self.condition.value,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PropertyDescription":
        defaults = cls()
        return cls(
            property_type=coerce_enum(
                PropertyType, data.get("property_type", defaults.property_type)
            ),
            location=data.get("location", defaults.location),
            area=float(data.get("area", defaults.area)),
            room_count=float(data.get("room_count", defaults.room_count)),
            condition=coerce_enum(
                PropertyCondition, data.get("condition", defaults.condition)
            ),
            description=data.get("description", defaults.description),
        )


def format_number(value: float) -> str:
    # 50.0 -> "50", 52.5 -> "52.5", nan stays visible
    if isinstance(value, float) and not math.isnan(value) and value.is_integer():
        return str(int(value))
    return str(value)


class EstimationResult(BaseModel):
    """Structured valuation returned by the estimation service."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    estimated_price_local: float = Field(alias="estimated_price_uah")
    price_range_local: str = Field(alias="price_range_uah")
    justification: str


@dataclass
class SessionState:
    form: PropertyDescription = field(default_factory=PropertyDescription)
    result: EstimationResult | None = None
    loading: bool = False
    error: str | None = None

    def to_dict(self) -> dict:
        return {
            "form": self.form.to_dict(),
            "result": self.result.model_dump(by_alias=True) if self.result else None,
            "loading": self.loading,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "SessionState":
        if not data:
            return cls()

        result = data.get("result")

        return cls(
            form=PropertyDescription.from_dict(data.get("form") or {}),
            result=EstimationResult.model_validate(result) if result else None,
            loading=bool(data.get("loading", False)),
            error=data.get("error"),
        )

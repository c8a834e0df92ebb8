# 📄 File: app/shared/core/care_levels.py
# 🧭 Purpose (Layman Explanation):
# The shared "rulers" used to describe both people and plants: how experienced a gardener is,
# how much water and light they can offer, and what kind of plant something is.
# 🧪 Purpose (Technical Summary):
# Ordinal IntEnums with identical backing values for user capabilities and plant requirements,
# plus pydantic Annotated field types that read names (or numbers) and write display names.
# 🔗 Dependencies:
# enum, pydantic (BeforeValidator, PlainSerializer)
# 🔄 Connected Modules / Calls From:
# plant_matching classifier, user_management and plant_catalog models, schemas and ORM models

from enum import Enum, IntEnum
from typing import Annotated, Any, Type, TypeVar

from pydantic import BeforeValidator, PlainSerializer

from app.shared.core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


class ExperienceLevel(IntEnum):
    """Gardening experience. Ordered: BEGINNER < INTERMEDIATE < EXPERT."""
    BEGINNER = 0
    INTERMEDIATE = 1
    EXPERT = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


class WaterLevel(IntEnum):
    """Water a user can provide or a plant needs. Ordered: LOW < MEDIUM < HIGH."""
    LOW = 0
    MEDIUM = 1
    HIGH = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


class LightLevel(IntEnum):
    """Luminosity available or needed. Ordered: LOW < MEDIUM < HIGH."""
    LOW = 0
    MEDIUM = 1
    HIGH = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


class PlantType(str, Enum):
    DECORATIVE = "Decorative"
    MEDICINAL = "Medicinal"
    FRUIT = "Fruit"
    VEGETABLE = "Vegetable"
    FLOWER = "Flower"
    SUCCULENT = "Succulent"

    @property
    def label(self) -> str:
        return self.value


def parse_enum(enum_cls: Type[E], value: Any) -> E:
    """
    Resolve ``value`` to a member of ``enum_cls``.

    Accepts a member, its name or display label in any case, or (for ordinal
    enums) its integer value, including as a numeric string.

    Raises:
        ValueError: If nothing matches
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip()
        if key.lstrip("-").isdigit() and issubclass(enum_cls, IntEnum):
            return enum_cls(int(key))
        for member in enum_cls:
            if key.lower() in (member.name.lower(), str(member.value).lower()):
                return member
        allowed = ", ".join(member.label for member in enum_cls)
        raise ValueError(f"'{value}' is not a valid {enum_cls.__name__}; expected one of: {allowed}")
    if isinstance(value, int) and not isinstance(value, bool):
        return enum_cls(value)
    raise ValueError(f"Invalid {enum_cls.__name__}: {value!r}")


def parse_form_value(enum_cls: Type[E], value: Any, field: str) -> E:
    """
    Parse a form or query value, reporting failures as an API validation error.

    Raises:
        ValidationError: If the value names no member of ``enum_cls``
    """
    try:
        return parse_enum(enum_cls, value)
    except ValueError as e:
        raise ValidationError(str(e), field=field, value=value) from e


def _labelled(enum_cls: Type[E]) -> Any:
    return Annotated[
        enum_cls,
        BeforeValidator(lambda value: parse_enum(enum_cls, value)),
        PlainSerializer(lambda member: member.label, return_type=str),
    ]


# Field types for API schemas: accept names/numbers, serialize as display labels
ExperienceLevelField = _labelled(ExperienceLevel)
WaterLevelField = _labelled(WaterLevel)
LightLevelField = _labelled(LightLevel)
PlantTypeField = _labelled(PlantType)

"""Workout type (category) models."""

import re
from dataclasses import dataclass

from ..config import FALLBACK_TYPE_COLOR

HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


@dataclass
class WorkoutType:
    """A named, coloured workout category.

    Workout records refer to a type by ``name`` only.
    """

    id: str
    name: str
    color: str
    icon: str | None = None
    is_default: bool = False

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Workout type name must not be empty")
        if not HEX_COLOR_RE.match(self.color):
            raise ValueError(f"Invalid colour {self.color!r}, expected #RRGGBB")

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "icon": self.icon,
            "is_default": self.is_default,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutType":
        """Create from dictionary."""
        return cls(
            id=str(data["id"]),
            name=data["name"],
            color=data["color"],
            icon=data.get("icon"),
            is_default=bool(data.get("is_default", data.get("isDefault", False))),
        )


DEFAULT_WORKOUT_TYPES = [
    WorkoutType(id="1", name="Running", color="#FF5733", is_default=True),
    WorkoutType(id="2", name="Cardio", color="#33A1FF", is_default=True),
    WorkoutType(id="3", name="Yoga", color="#33FF57", is_default=True),
    WorkoutType(id="4", name="Gym", color="#9333FF", is_default=True),
]


def find_type(types: list[WorkoutType], name: str) -> WorkoutType | None:
    """Look up a workout type by name."""
    for workout_type in types:
        if workout_type.name == name:
            return workout_type
    return None


def color_for(types: list[WorkoutType], name: str) -> str:
    """Colour for a type name, falling back when the type is gone."""
    workout_type = find_type(types, name)
    return workout_type.color if workout_type else FALLBACK_TYPE_COLOR

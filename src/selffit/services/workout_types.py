"""Workout type catalogue."""

import copy
import logging
from dataclasses import replace
from uuid import uuid4

from ..db.repositories import WorkoutTypeRepository
from ..errors import NotFoundError, PersistenceError
from ..models.workout_type import (
    DEFAULT_WORKOUT_TYPES,
    WorkoutType,
    color_for,
    find_type,
)

logger = logging.getLogger(__name__)


class WorkoutTypeService:
    """Owns the list of workout types that records refer to by name."""

    def __init__(self, repository: WorkoutTypeRepository | None = None):
        self.repository = repository
        self._types: list[WorkoutType] = copy.deepcopy(DEFAULT_WORKOUT_TYPES)

    async def load(self) -> list[WorkoutType]:
        """Load stored types; the defaults are used when none are stored."""
        if self.repository is None:
            return self.list_all()
        try:
            stored = await self.repository.list_all()
        except PersistenceError:
            logger.exception("Failed to load workout types, using defaults")
            stored = None
        self._types = stored if stored is not None else copy.deepcopy(DEFAULT_WORKOUT_TYPES)
        return self.list_all()

    def list_all(self) -> list[WorkoutType]:
        return list(self._types)

    def get(self, type_id: str) -> WorkoutType | None:
        for workout_type in self._types:
            if workout_type.id == type_id:
                return workout_type
        return None

    def get_by_name(self, name: str) -> WorkoutType | None:
        return find_type(self._types, name)

    def resolve_color(self, name: str) -> str:
        """Colour for a type name; a missing type gets the fallback colour."""
        return color_for(self._types, name)

    async def add(self, name: str, color: str, icon: str | None = None) -> WorkoutType:
        """Add a custom workout type.

        Raises:
            ValueError: If the name is taken or the colour is invalid
        """
        workout_type = WorkoutType(id=uuid4().hex, name=name.strip(), color=color, icon=icon)
        workout_type.validate()
        if self.get_by_name(workout_type.name):
            raise ValueError(f"Workout type {workout_type.name!r} already exists")

        self._types.append(workout_type)
        await self.save()
        return workout_type

    async def update(self, type_id: str, **changes) -> WorkoutType:
        """Update a workout type's name, colour or icon.

        Renaming does not touch records using the old name; they fall back
        to the default colour until edited.
        """
        existing = self.get(type_id)
        if existing is None:
            raise NotFoundError("Workout type", type_id)

        unknown = set(changes) - {"name", "color", "icon"}
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        updated = replace(existing, **changes)
        updated.validate()

        clash = self.get_by_name(updated.name)
        if clash is not None and clash.id != type_id:
            raise ValueError(f"Workout type {updated.name!r} already exists")

        self._types = [updated if t.id == type_id else t for t in self._types]
        await self.save()
        return updated

    async def delete(self, type_id: str) -> None:
        """Delete a custom workout type.

        Raises:
            NotFoundError: If no type has this id
            ValueError: If the type is one of the defaults
        """
        existing = self.get(type_id)
        if existing is None:
            raise NotFoundError("Workout type", type_id)
        if existing.is_default:
            raise ValueError("Cannot delete a default workout type")

        self._types = [t for t in self._types if t.id != type_id]
        await self.save()

    async def save(self) -> None:
        """Persist the catalogue (failures are logged)."""
        if self.repository is None:
            return
        try:
            await self.repository.save_all(self._types)
        except PersistenceError:
            logger.exception("Failed to save workout types")

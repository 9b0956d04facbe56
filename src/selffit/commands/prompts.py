"""Interactive workout entry via questionary."""

from datetime import datetime, timedelta

import questionary
from questionary import Style

from ..models.workout import WorkoutDraft
from ..services.app import SelfFitApp

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)

START_FORMAT = "%Y-%m-%d %H:%M"


def _valid_start(text: str) -> bool | str:
    try:
        datetime.strptime(text.strip(), START_FORMAT)
    except ValueError:
        return "Use YYYY-MM-DD HH:MM"
    return True


def _valid_minutes(text: str) -> bool | str:
    if text.strip().isdigit() and int(text) > 0:
        return True
    return "Enter a whole number of minutes"


class WorkoutQuestionnaire:
    """Asks for the fields of a new workout."""

    def __init__(self, app: SelfFitApp):
        self.app = app

    async def collect_draft(self) -> WorkoutDraft | None:
        """Run the questionnaire. Returns None if the user aborts."""
        title = await questionary.text(
            "Workout title:",
            validate=lambda t: bool(t.strip()) or "Title must not be empty",
            style=custom_style,
        ).ask_async()
        if title is None:
            return None

        workout_type = await questionary.select(
            "Workout type:",
            choices=[
                questionary.Choice(t.name, t.name) for t in self.app.workout_types.list_all()
            ],
            style=custom_style,
        ).ask_async()
        if workout_type is None:
            return None

        default_start = (datetime.now() + timedelta(hours=1)).replace(
            minute=0, second=0, microsecond=0
        )
        start_text = await questionary.text(
            "Start (YYYY-MM-DD HH:MM):",
            default=default_start.strftime(START_FORMAT),
            validate=_valid_start,
            style=custom_style,
        ).ask_async()
        if start_text is None:
            return None
        start = datetime.strptime(start_text.strip(), START_FORMAT)

        minutes = await questionary.text(
            "Duration (minutes):",
            default=str(self.app.settings.settings.default_workout_duration),
            validate=_valid_minutes,
            style=custom_style,
        ).ask_async()
        if minutes is None:
            return None

        location = await questionary.text(
            "Location (optional):", style=custom_style
        ).ask_async()
        notes = await questionary.text("Notes (optional):", style=custom_style).ask_async()

        return WorkoutDraft(
            title=title.strip(),
            workout_type=workout_type,
            start=start,
            end=start + timedelta(minutes=int(minutes)),
            location=location or None,
            notes=notes or None,
        )

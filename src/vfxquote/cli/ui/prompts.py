"""User confirmation prompts for the VFX Quote CLI."""

import typer


def confirm_action(message: str, default: bool = False) -> bool:
    """Ask the user to confirm an action.

    Args:
        message: The confirmation question.
        default: Default answer if user just presses Enter.

    Returns:
        True if user confirmed, False otherwise.
    """
    return typer.confirm(message, default=default)

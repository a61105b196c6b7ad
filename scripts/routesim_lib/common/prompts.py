"""
Interactive prompt utilities for the REPL.

Provides wrapper functions around prompt_toolkit for collecting
user input with validation.
"""

from typing import Optional, Callable

from prompt_toolkit import prompt

from .colors import warn


def prompt_value(
    label: str,
    validator: Optional[Callable[[str], bool]] = None,
    required: bool = True,
    default: str = "",
    error_msg: str = "Invalid format",
) -> Optional[str]:
    """
    Prompt for a value with optional validation.

    Re-prompts until the validator accepts the input.

    Args:
        label: Prompt text to display
        validator: Optional function that returns True if input is valid
        required: Re-prompt on empty input instead of returning None
        default: Default value (shown in prompt, returned if empty input)
        error_msg: Message to show if validation fails

    Returns:
        User input string, or None if cancelled (Ctrl+C/Ctrl+D) or
        left empty when not required
    """
    suffix = f" [{default}]" if default else ""
    while True:
        try:
            value = prompt(f"  {label}{suffix}: ").strip()
        except (KeyboardInterrupt, EOFError):
            return None

        if not value and default:
            value = default

        if not value:
            if required:
                warn("Value is required")
                continue
            return None

        if validator and not validator(value):
            warn(error_msg)
            continue

        return value


def prompt_int(label: str, minimum: int, maximum: int, default: Optional[int] = None) -> Optional[int]:
    """Prompt for an integer within [minimum, maximum]."""
    def in_range(value: str) -> bool:
        return value.isdecimal() and minimum <= int(value) <= maximum

    result = prompt_value(
        label,
        in_range,
        default="" if default is None else str(default),
        error_msg=f"Enter a number between {minimum} and {maximum}",
    )
    return int(result) if result is not None else None


def prompt_yes_no(question: str, default: bool = False) -> Optional[bool]:
    """
    Prompt for yes/no confirmation.

    Args:
        question: Question to ask
        default: Default answer (True=yes, False=no)

    Returns:
        True for yes, False for no, None if cancelled
    """
    hint = "Y/n" if default else "y/N"
    while True:
        try:
            answer = prompt(f"  {question} [{hint}]: ").strip().lower()
        except (KeyboardInterrupt, EOFError):
            return None
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        warn("Please answer yes or no")

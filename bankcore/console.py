"""Console screens, prompts and number input."""

from __future__ import annotations

import os
import re
import subprocess
import sys

__all__ = [
    "show_message_and_pause_then_clear",
    "show_screen_header",
    "are_you_sure",
    "pause_and_clear_screen",
    "clear_screen",
    "show_username_invalid_message",
    "show_password_invalid_message",
    "read_number",
]

_RULE = "=" * 50
_INTEGER = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _wait_for_key() -> None:
    """Block until a key (or, without a terminal, a line) is entered."""
    if os.name == "nt" and sys.stdin.isatty():
        import msvcrt

        msvcrt.getwch()
    else:
        sys.stdin.readline()


def clear_screen() -> None:
    """Clear the terminal."""
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass


def pause_and_clear_screen() -> None:
    """Wait for a key, then clear the terminal."""
    _wait_for_key()
    clear_screen()


def show_message_and_pause_then_clear(message: str) -> None:
    """Show ``message``, wait for a key, then clear the terminal."""
    print(message, end="", flush=True)
    pause_and_clear_screen()


def show_screen_header(screen_name: str) -> None:
    """Print a framed screen title."""
    print(f"\n{_RULE}\n")
    print(f"\t{screen_name}")
    print(f"\n{_RULE}\n")


def are_you_sure(message: str) -> bool:
    """Ask a yes/no question; only an answer starting with 'y' or 'Y' is yes."""
    print(message, end="", flush=True)
    for line in sys.stdin:
        answer = line.strip()
        if answer:
            return answer[0].upper() == "Y"
    return False


def show_username_invalid_message() -> None:
    """Print the username rules."""
    print("Invalid Username! Please follow the rules below:")
    print("- Must be between 4 and 20 characters")
    print("- Must start with a letter (A ~ Z or a ~ z)")
    print("- Cannot contain spaces or symbols (only '.' or '_' are allowed)")
    print("- '.' or '_' can be used, but only once in total\n")


def show_password_invalid_message() -> None:
    """Print the password rules."""
    print("Invalid Password! Your Password must meet the following requirements")
    print("At least 8 characters")
    print("At least one uppercase letter (A ~ Z)")
    print("At least one lowercase letter (a ~ z)")
    print("At least one special character (e.g. @, #, $, !)\n")


def read_number() -> int:
    """Read an integer from standard input, asking again until one is given.

    Each line is read whole; blank lines are skipped. Raises EOFError when
    input runs out before a number is read.
    """
    for line in sys.stdin:
        text = line.strip()
        if not text:
            continue
        match = _INTEGER.match(text)
        if match:
            value = int(match.group())
            if _INT_MIN <= value <= _INT_MAX:
                return value
        print("Invalid Number, Enter a Valid Number: ", end="", flush=True)
    raise EOFError("no number was entered")
"""Commands exposed to the application shell."""

from typing import Callable, Dict

from id3_retagger.retagger import RetagError, retag_file


def modify(file_path: str, export_path: str, artist: str, title: str,
           album: str) -> str:
    """
    Save a retagged copy of file_path into export_path.

    Returns:
        "Successfully saved to <path>" or "Error: <description>"
    """
    try:
        new_file = retag_file(file_path, export_path, artist, title, album)
    except RetagError as e:
        return f"Error: {e}"
    return f"Successfully saved to {new_file}"


# The UI calls the command "update_id3_tag"; "modify" is its registered name
COMMANDS: Dict[str, Callable[..., str]] = {
    "modify": modify,
    "update_id3_tag": modify,
}


def invoke(name: str, **kwargs) -> str:
    """Dispatch a command by name."""
    try:
        command = COMMANDS[name]
    except KeyError:
        raise KeyError(f"Unknown command: {name}") from None
    return command(**kwargs)

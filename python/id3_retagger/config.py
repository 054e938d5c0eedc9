"""Configuration management for ID3 Retagger."""

import os
import sys
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv


def eprint(*args, **kwargs):
    """Print to stderr."""
    print(*args, file=sys.stderr, **kwargs)


def load_config(env_file: Optional[str] = None, quiet: bool = False) -> dict:
    """
    Load configuration from .env file.

    Args:
        env_file: Path to .env file. Defaults to .env in current directory.
        quiet: Don't report where the configuration came from

    Returns:
        Dictionary of configuration values.
    """
    if env_file is None:
        env_file = ".env"

    env_path = Path(env_file)
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
        if not quiet:
            eprint(f"Loaded environment from {env_path.resolve()}")
    elif not quiet:
        eprint(
            f"Warning: .env file not found at {env_path.resolve()} "
            "- falling back to process env."
        )

    return {
        "export_dir": os.getenv("ID3_RETAGGER_EXPORT_DIR") or None,
    }


def resolve_export_dir(config: dict, source_path: str,
                       export_dir: Optional[str] = None) -> str:
    """
    Pick the folder the retagged copy is saved to.

    Args:
        config: Configuration dictionary from load_config()
        source_path: Path to the source audio file
        export_dir: Folder given on the command line, if any

    Returns:
        The explicit folder, else the configured default, else the source's folder.
    """
    if export_dir:
        return export_dir
    if config.get("export_dir"):
        return config["export_dir"]
    return str(Path(source_path).parent)

"""Round-trip text through the operator's editor."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import tempfile
from pathlib import Path
from typing import Final

from .exceptions import EditorError

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_EDITOR: Final[str] = "vim"


def editor_command(path: str) -> list[str]:
    """Build the command line that opens path in the configured editor."""
    editor = os.environ.get("EDITOR") or DEFAULT_EDITOR
    return [*shlex.split(editor), path]


def edit_in_editor(name_pattern: str, initial_content: str) -> str:
    """Let the operator edit text in their editor and return the result.

    Args:
        name_pattern: Temp file name with one ``*`` marking the random part
            (e.g. ``migratron.*.body.txt``)
        initial_content: Text the file is seeded with

    Returns:
        The file contents after the editor exits

    Raises:
        EditorError: If the temp file cannot be written or read, or the editor
            exits abnormally
    """
    prefix, _, suffix = name_pattern.partition("*")
    path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", prefix=prefix, suffix=suffix, delete=False, encoding="utf-8"
        ) as tmp:
            path = Path(tmp.name)
            _ = tmp.write(initial_content)

        command = editor_command(str(path))
        logger.debug(f"Running editor: {command}")
        # Editor inherits the terminal and blocks until the operator quits
        _ = subprocess.run(command, check=True)  # noqa: S603

        return path.read_text(encoding="utf-8")
    except subprocess.CalledProcessError as e:
        msg = f"Editor exited with status {e.returncode}"
        raise EditorError(msg) from e
    except (OSError, UnicodeError) as e:
        msg = f"Editing {name_pattern} failed: {e}"
        raise EditorError(msg) from e
    finally:
        if path is not None:
            path.unlink(missing_ok=True)

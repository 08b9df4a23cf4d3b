"""
Atomic file operations.

Whole-file rewrites go through a temp file in the target directory
followed by os.replace(), so a crash never leaves a half-written
task list or config behind.
"""

import os
import json
import tempfile
from pathlib import Path
from typing import Any, Iterable, List, Optional


class AtomicFileWriter:
    """
    Atomic file writer using temp file + atomic replace.

    Writes to a temporary file first, then atomically replaces
    the target file using os.replace().
    """

    @staticmethod
    def write_text(filepath: Path, content: str) -> None:
        """
        Atomically write text to a file.

        Args:
            filepath: Target file path
            content: Text to write (UTF-8)

        Raises:
            OSError: If write fails (temp file is cleaned up)
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        temp_path = None
        try:
            # Same directory, so the replace stays on one filesystem
            with tempfile.NamedTemporaryFile(
                mode='w',
                encoding='utf-8',
                dir=filepath.parent,
                prefix=f".{filepath.name}.",
                suffix='.tmp',
                delete=False
            ) as tmp_file:
                temp_path = Path(tmp_file.name)
                tmp_file.write(content)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())

            os.replace(temp_path, filepath)

        except Exception:
            if temp_path and temp_path.exists():
                temp_path.unlink(missing_ok=True)
            raise

    @staticmethod
    def write_lines(filepath: Path, lines: Iterable[str]) -> None:
        """Atomically write lines, each terminated by a newline."""
        content = "".join(f"{line}\n" for line in lines)
        AtomicFileWriter.write_text(filepath, content)

    @staticmethod
    def read_lines(filepath: Path) -> Optional[List[str]]:
        """
        Read a text file as a list of lines without line endings.

        Only newlines end a line; other Unicode line separators stay
        inside the line. Undecodable bytes become U+FFFD.

        Returns:
            Lines, or None if the file doesn't exist
        """
        filepath = Path(filepath)

        if not filepath.exists():
            return None

        with open(filepath, 'r', encoding='utf-8', errors='replace') as f:
            content = f.read()

        if not content:
            return []
        lines = content.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    @staticmethod
    def write_json(filepath: Path, data: Any, indent: int = 2) -> None:
        """Atomically write JSON data to a file."""
        AtomicFileWriter.write_text(filepath, json.dumps(data, indent=indent, default=str))

    @staticmethod
    def read_json(filepath: Path, default: Any = None) -> Any:
        """
        Read JSON file with safe defaults.

        Args:
            filepath: File to read
            default: Default value if file doesn't exist or is invalid

        Returns:
            Parsed JSON data or default value
        """
        filepath = Path(filepath)

        if not filepath.exists():
            return default

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (json.JSONDecodeError, IOError):
            return default

"""File system utility functions for loading subtitle files."""

import re
from pathlib import Path

_LINE_SEPARATOR = re.compile(r"\r?\n")


class FSUtil:
    """Utility class for file system operations."""

    @staticmethod
    def read_text_file(file_path: Path) -> str:
        """Read UTF-8 encoded text file.

        Args:
            file_path: Path to the text file.

        Returns:
            File contents as a string.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the path is not a file.
            UnicodeDecodeError: If the file cannot be decoded as UTF-8.
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        if not file_path.is_file():
            raise ValueError(f"Path is not a file: {file_path}")

        # newline="" keeps \r\n intact so splitting is done in one place
        with open(file_path, encoding="utf-8", newline="") as handle:
            return handle.read()

    @staticmethod
    def split_lines(content: str) -> list[str]:
        """Split text on \\n and \\r\\n boundaries.

        A trailing newline produces a final empty line, so the number of
        returned lines is always the number of separators plus one.

        Args:
            content: Text to split.

        Returns:
            List of lines without their separators.
        """
        return _LINE_SEPARATOR.split(content)

    @staticmethod
    def read_lines(file_path: Path) -> list[str]:
        """Read a UTF-8 text file and split it into lines.

        Args:
            file_path: Path to the text file.

        Returns:
            List of lines (0-based) without separators.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the path is not a file.
            UnicodeDecodeError: If the file cannot be decoded as UTF-8.
        """
        return FSUtil.split_lines(FSUtil.read_text_file(file_path))

    @staticmethod
    def get_version(file_path: Path) -> int:
        """Get the modification time of a file as a version token.

        Args:
            file_path: Path to the file.

        Returns:
            Modification time in nanoseconds.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        return file_path.stat().st_mtime_ns

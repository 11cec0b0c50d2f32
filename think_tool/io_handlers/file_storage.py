"""
File storage for think_tool.
Reads thoughts from files and writes analysis results back out.
"""
from pathlib import Path

from ..errors import StorageError


class FileStorage:
    """Reads and writes UTF-8 text files."""

    ENCODING = 'utf-8'

    def read(self, path: str) -> str:
        """
        Read a whole file.

        Args:
            path: File to read

        Returns:
            File contents

        Raises:
            StorageError: If the file cannot be read
        """
        try:
            return Path(path).read_text(encoding=self.ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"failed to read file: {e}", path=path) from e

    def write(self, path: str, content: str) -> None:
        """
        Write content to a file, replacing it.

        Raises:
            StorageError: If the file cannot be written
        """
        try:
            Path(path).write_text(content, encoding=self.ENCODING)
        except OSError as e:
            raise StorageError(f"failed to write file: {e}", path=path) from e

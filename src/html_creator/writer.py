"""File writer that persists rendered HTML."""

from pathlib import Path

from loguru import logger

from html_creator.errors import DirectoryCreationError, FileWriteError, PersistError


class FileWriter:
    """Write output files, creating parent directories as needed."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def persist(self, path: str | Path, content: str) -> Path:
        """Write content to a file.

        Args:
            path: Destination file. Missing parent directories are created.
            content: Text to write.

        Returns:
            The resolved destination path.

        Raises:
            PersistError: If no path is given.
            DirectoryCreationError: If the parent directories cannot be created.
            FileWriteError: If the file itself cannot be written.
        """
        if not path:
            msg = "A file path is required"
            raise PersistError(msg)

        fname = Path(path).expanduser().resolve()
        try:
            fname.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            msg = f"Something went wrong when creating the file: {e}"
            raise DirectoryCreationError(msg) from e

        logger.debug("Writing {!r}", str(fname))
        try:
            fname.write_text(content, encoding=self.encoding)
        except OSError as e:
            msg = f"Something went wrong when writing to the file: {e}"
            raise FileWriteError(msg) from e
        return fname

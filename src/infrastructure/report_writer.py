"""Filesystem output for the rendered dashboard."""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


class FilesystemError(Exception):
    """Raised when the output directory or file cannot be written."""
    pass


class ReportWriter:
    """Writes the dashboard document to a single file on disk."""

    DEFAULT_OUTPUT_DIR = "dist"
    DEFAULT_FILENAME = "index.html"

    def __init__(self, output_dir: Optional[str] = None, filename: Optional[str] = None):
        """
        Initialize report writer.

        Args:
            output_dir: Destination directory. If None, uses OUTPUT_DIR env var or "dist".
            filename: Output file name. Defaults to "index.html".
        """
        if output_dir is None:
            output_dir = os.getenv("OUTPUT_DIR", self.DEFAULT_OUTPUT_DIR)

        self.output_dir = output_dir
        self.filename = filename or self.DEFAULT_FILENAME

    @property
    def path(self) -> str:
        return os.path.join(self.output_dir, self.filename)

    def write(self, document: str) -> str:
        """
        Write the document, creating the output directory if needed.

        Args:
            document: Complete HTML document

        Returns:
            Path of the written file
        """
        try:
            os.makedirs(self.output_dir, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                f.write(document)
        except OSError as e:
            logger.error(f"Error writing dashboard to {self.path}: {e}")
            raise FilesystemError(f"Could not write {self.path}: {e}") from e

        logger.info(f"Wrote {len(document)} characters to {self.path}")
        return self.path

"""Output file persistence."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from .errors import WriteFailureError

logger = logging.getLogger(__name__)


def write_document(text: str, path: Path) -> None:
    """Write the rendered document to path, replacing any existing file.

    The text is encoded up front and written through a temp file in the
    target directory, then moved into place. A failure at any step leaves
    the previous file untouched. Creates parent directories if needed.
    """
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise WriteFailureError(path, f"text is not valid UTF-8: {exc.reason}") from exc

    temp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "wb",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(data)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_path, path)
    except OSError as exc:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise WriteFailureError(path, exc.strerror or str(exc)) from exc
    logger.debug("Wrote %d bytes to %s", len(data), path)

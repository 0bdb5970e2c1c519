from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from .errors import InputReadError

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def read_input(path: Optional[str] = None) -> str:
    """Return the whole input as text, from ``path`` or standard input.

    Any I/O or UTF-8 decoding failure is re-raised as :class:`InputReadError`.
    """
    try:
        if path is None or path == STDIN_MARKER:
            logger.debug("Reading puzzle input from stdin")
            data = sys.stdin.buffer.read() if hasattr(sys.stdin, "buffer") else sys.stdin.read()
        else:
            logger.debug("Reading puzzle input from %s", path)
            data = Path(path).read_bytes()
        if isinstance(data, bytes):
            data = data.decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        source = "stdin" if path in (None, STDIN_MARKER) else path
        raise InputReadError(f"Failed to read input from {source}: {exc}") from exc
    return data

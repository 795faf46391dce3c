"""Knowledge base loader.

Reads the operator-supplied reference documents from a directory and frames
them into the single text block that precedes every request.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from prompts.templates import (
    KNOWLEDGE_BEGIN,
    KNOWLEDGE_END,
    KNOWLEDGE_FAILURE,
    KNOWLEDGE_FILE_BANNER,
)

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".txt", ".md")


def load_knowledge_base(
    directory: str | Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> str:
    """Concatenate every matching file in ``directory`` under a name banner.

    Never raises: an unreadable directory or file produces a block that states
    the failure instead.
    """
    directory = Path(directory)
    suffixes = tuple(extensions)
    block = KNOWLEDGE_BEGIN
    loaded = 0

    try:
        for path in sorted(directory.iterdir(), key=lambda p: p.name):
            if path.is_symlink() or not path.is_file() or not path.name.endswith(suffixes):
                continue
            content = path.read_text(encoding="utf-8")
            block += KNOWLEDGE_FILE_BANNER.substitute(name=path.name, content=content)
            loaded += 1
            logger.debug("Loaded knowledge file %s (%d chars)", path.name, len(content))
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to load knowledge base from %s: %s", directory, e)
        return KNOWLEDGE_FAILURE.substitute(reason=str(e))

    block += KNOWLEDGE_END
    logger.info("Loaded %d knowledge files (%d chars total)", loaded, len(block))
    return block

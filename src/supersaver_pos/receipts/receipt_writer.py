"""
Receipt file writer
Writes receipts and reports in one shot through a temporary file
"""

import contextlib
import logging
from pathlib import Path
from typing import Type, Union

from supersaver_pos.exceptions import PosError, ReceiptWriteError


logger = logging.getLogger(__name__)


def write_text_atomic(
    path: Union[str, Path],
    content: str,
    error_cls: Type[PosError] = ReceiptWriteError,
) -> Path:
    """
    Write text to a file atomically

    The content goes to a sibling ``.tmp`` file which is then renamed
    over the target, so readers never observe a half-written file.

    Args:
        path: Target file path
        content: Text to write
        error_cls: Error raised on failure

    Returns:
        The target path

    Raises:
        ReceiptWriteError: (or error_cls) if the file cannot be written
    """
    target = Path(path)
    temp_path = target.with_suffix(".tmp")

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        temp_path.write_text(content, encoding="utf-8")
        temp_path.replace(target)
    except OSError as e:
        with contextlib.suppress(OSError):
            temp_path.unlink(missing_ok=True)
        logger.error("Failed to write %s: %s", target, e)
        raise error_cls(f"Failed to write {target.name}: {e}", path=target, cause=e) from e

    logger.debug("Wrote %s (%d bytes)", target, len(content))
    return target

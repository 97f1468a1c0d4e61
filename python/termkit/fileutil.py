"""File system helpers."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def delete(path: Path | str) -> bool:
    """Delete a file, or a directory and everything under it.

    Deletion is best effort: a failure is logged and the remaining
    siblings are still visited. Symbolic links are removed, never followed.

    Args:
        path: File or directory to delete.

    Returns:
        True if everything was deleted or path did not exist.
    """
    path = Path(path)
    if not path.exists() and not path.is_symlink():
        return True

    if path.is_symlink() or not path.is_dir():
        return _remove(path, path.unlink)

    all_deleted = True
    try:
        children = list(path.iterdir())
    except OSError as e:
        logger.warning("Cannot list %s: %s", path, e)
        children = []
        all_deleted = False

    for child in children:
        if not delete(child):
            all_deleted = False

    if not _remove(path, path.rmdir):
        all_deleted = False
    return all_deleted


def _remove(path: Path, remover) -> bool:
    try:
        remover()
    except OSError as e:
        logger.warning("Cannot delete %s: %s", path, e)
        return False
    logger.debug("Deleted %s", path)
    return True

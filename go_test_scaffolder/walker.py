"""Enumerate Go source files under a directory tree."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from go_test_scaffolder.config import ScaffoldConfig
from go_test_scaffolder.errors import TraversalError

logger = logging.getLogger(__name__)


def is_eligible(file_name: str, config: ScaffoldConfig) -> bool:
    """Check whether a file should get a test artifact.

    Args:
        file_name: Base name of the file
        config: Exclusion rules to apply

    Returns:
        True if no exclusion rule matches
    """
    for excluded in config.excluded_file_names:
        if excluded in file_name:
            return False

    extension = os.path.splitext(file_name)[1]
    if extension in config.excluded_extensions:
        return False
    return extension in config.source_extensions


def walk_source_files(root: Path, config: ScaffoldConfig) -> Iterator[Path]:
    """Yield eligible source files under root, depth first.

    Each directory is listed completely before its entries are yielded, so
    files created by the caller during the walk do not affect the listing.
    Symbolic links to directories are not followed.

    Args:
        root: Directory to walk
        config: Exclusion rules to apply

    Yields:
        Paths of eligible source files, in filesystem enumeration order

    Raises:
        TraversalError: If any directory cannot be read
    """
    try:
        with os.scandir(root) as it:
            entries = list(it)
    except OSError as e:
        logger.error(f"Unable to read directory {root}: {e}")
        raise TraversalError(f"unable to read directory {root}: {e}") from e

    for entry in entries:
        path = Path(root) / entry.name
        if entry.is_dir(follow_symlinks=False):
            if entry.name in config.excluded_dirs:
                logger.debug(f"Skipping excluded directory {path}")
                continue
            yield from walk_source_files(path, config)
        elif entry.is_file() and is_eligible(entry.name, config):
            yield path
        else:
            logger.debug(f"Skipping {path}")

"""Configuration for a scaffolding run."""

from dataclasses import dataclass, replace
from pathlib import Path

TEST_SUFFIX = "_test"

DEFAULT_EXCLUDED_DIRS = frozenset({".git"})

# Matched as substrings of the file name
DEFAULT_EXCLUDED_FILE_NAMES = ("go.mod", "go.sum", f"{TEST_SUFFIX}.go")

DEFAULT_EXCLUDED_EXTENSIONS: frozenset[str] = frozenset()

DEFAULT_SOURCE_EXTENSIONS = frozenset({".go"})


@dataclass(frozen=True)
class ScaffoldConfig:
    """Exclusion rules and output options for one run."""

    excluded_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS
    excluded_file_names: tuple[str, ...] = DEFAULT_EXCLUDED_FILE_NAMES
    excluded_extensions: frozenset[str] = DEFAULT_EXCLUDED_EXTENSIONS
    source_extensions: frozenset[str] = DEFAULT_SOURCE_EXTENSIONS
    test_suffix: str = TEST_SUFFIX
    template_dir: Path | None = None
    dry_run: bool = False

    def with_exclusions(
        self,
        dirs: list[str] | None = None,
        file_names: list[str] | None = None,
        extensions: list[str] | None = None,
    ) -> "ScaffoldConfig":
        """Return a copy with extra exclusions added to the current ones."""
        return replace(
            self,
            excluded_dirs=self.excluded_dirs | frozenset(dirs or ()),
            excluded_file_names=self.excluded_file_names + tuple(file_names or ()),
            excluded_extensions=self.excluded_extensions
            | frozenset(normalize_extension(ext) for ext in extensions or ()),
        )


def normalize_extension(ext: str) -> str:
    """Accept both "txt" and ".txt"."""
    return ext if ext.startswith(".") else f".{ext}"

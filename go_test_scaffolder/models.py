"""Data models for signature extraction and test scaffolding."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FunctionSignature:
    """A top-level function or method signature from a Go source file."""

    name: str
    input_types: tuple[str, ...] = ()  # literal type text, one per parameter
    output_types: tuple[str, ...] = ()  # literal type text, one per result


@dataclass
class SourceUnit:
    """All signatures declared in one source file."""

    directory_path: Path
    file_name: str
    package_name: str
    signatures: list[FunctionSignature] = field(default_factory=list)

    @property
    def path(self) -> Path:
        return self.directory_path / self.file_name


@dataclass
class Reconciliation:
    """Signatures that still need a stub in a test artifact."""

    unit: SourceUnit
    artifact_path: Path
    mode: str  # "fresh" or "append"
    signatures: list[FunctionSignature]


@dataclass
class ArtifactUpdate:
    """What was rendered into one test artifact."""

    source_path: Path
    artifact_path: Path
    mode: str
    stub_names: list[str]

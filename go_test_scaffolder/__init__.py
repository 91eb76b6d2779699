"""Generate table-driven Go test stubs for every function in a source tree."""

from go_test_scaffolder.config import ScaffoldConfig
from go_test_scaffolder.driver import scaffold_file, scaffold_tree
from go_test_scaffolder.errors import (
    ParseError,
    ScaffoldError,
    TraversalError,
    WriteError,
)
from go_test_scaffolder.extractor import extract_source_unit, parse_go_source
from go_test_scaffolder.models import (
    ArtifactUpdate,
    FunctionSignature,
    Reconciliation,
    SourceUnit,
)
from go_test_scaffolder.reconciler import artifact_path_for, reconcile, stub_name
from go_test_scaffolder.renderer import create_environment, render_stubs
from go_test_scaffolder.walker import is_eligible, walk_source_files

__all__ = [
    # Models
    "FunctionSignature",
    "SourceUnit",
    "Reconciliation",
    "ArtifactUpdate",
    # Configuration and errors
    "ScaffoldConfig",
    "ScaffoldError",
    "TraversalError",
    "ParseError",
    "WriteError",
    # Walking
    "is_eligible",
    "walk_source_files",
    # Extraction
    "parse_go_source",
    "extract_source_unit",
    # Reconciliation
    "stub_name",
    "artifact_path_for",
    "reconcile",
    # Rendering
    "create_environment",
    "render_stubs",
    # Driver
    "scaffold_file",
    "scaffold_tree",
]

"""Scaffold test files for every Go source file in a tree."""

import logging
from pathlib import Path

from jinja2 import Environment

from go_test_scaffolder.config import ScaffoldConfig
from go_test_scaffolder.extractor import extract_source_unit
from go_test_scaffolder.models import ArtifactUpdate
from go_test_scaffolder.reconciler import artifact_path_for, reconcile, stub_name
from go_test_scaffolder.renderer import create_environment, render_artifact
from go_test_scaffolder.walker import walk_source_files

logger = logging.getLogger(__name__)


def scaffold_file(
    source_path: Path, config: ScaffoldConfig, env: Environment
) -> ArtifactUpdate:
    """Extract, reconcile and render the test file for one source file.

    Args:
        source_path: Go source file
        config: Run configuration
        env: Template environment

    Returns:
        ArtifactUpdate describing the stubs that were rendered
    """
    unit = extract_source_unit(source_path)
    artifact_path = artifact_path_for(source_path, config.test_suffix)
    reconciliation = reconcile(unit, artifact_path)
    render_artifact(reconciliation, env, dry_run=config.dry_run)

    return ArtifactUpdate(
        source_path=source_path,
        artifact_path=artifact_path,
        mode=reconciliation.mode,
        stub_names=[
            stub_name(unit.package_name, signature.name)
            for signature in reconciliation.signatures
        ],
    )


def scaffold_tree(
    root: Path, config: ScaffoldConfig | None = None
) -> list[ArtifactUpdate]:
    """Generate or extend test files for all eligible files under root.

    Any error aborts the whole run; files processed before the error keep
    their updated test files.

    Args:
        root: Directory to scan
        config: Run configuration (defaults to ScaffoldConfig())

    Returns:
        One ArtifactUpdate per processed source file

    Raises:
        ScaffoldError: On the first walk, parse, render or write failure
    """
    config = config or ScaffoldConfig()
    env = create_environment(config.template_dir)
    logger.info(f"Scaffolding tests under {root}")

    updates = []
    for source_path in walk_source_files(Path(root), config):
        updates.append(scaffold_file(source_path, config, env))

    generated = sum(len(update.stub_names) for update in updates)
    logger.info(f"Processed {len(updates)} files, generated {generated} stubs")
    return updates

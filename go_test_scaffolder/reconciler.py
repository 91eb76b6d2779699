"""Work out which signatures still need a test stub."""

import logging
from pathlib import Path

from go_test_scaffolder.config import TEST_SUFFIX
from go_test_scaffolder.extractor import extract_source_unit
from go_test_scaffolder.models import FunctionSignature, Reconciliation, SourceUnit

logger = logging.getLogger(__name__)

FRESH = "fresh"
APPEND = "append"


def stub_name(package_name: str, function_name: str) -> str:
    """Name of the generated test function for a package-level function."""
    return f"Test_{package_name}_{function_name}"


def artifact_path_for(source_path: Path, suffix: str = TEST_SUFFIX) -> Path:
    """Path of the test file that accompanies a source file.

    `pkg/foo.go` becomes `pkg/foo_test.go`.
    """
    source_path = Path(source_path)
    return source_path.with_name(f"{source_path.stem}{suffix}{source_path.suffix}")


def existing_stub_names(artifact_path: Path) -> set[str]:
    """Names of all top-level functions already declared in a test file.

    Raises:
        ParseError: If the test file cannot be parsed
    """
    artifact = extract_source_unit(artifact_path)
    return {signature.name for signature in artifact.signatures}


def _unique_by_stub_name(
    package_name: str, signatures: list[FunctionSignature]
) -> list[FunctionSignature]:
    """Keep the first signature for each stub name.

    Methods with the same name on different receivers map to one stub name.
    """
    seen: set[str] = set()
    unique = []
    for signature in signatures:
        name = stub_name(package_name, signature.name)
        if name in seen:
            logger.warning(
                f"Skipping {signature.name}: stub {name} is already generated "
                "for another function with the same name"
            )
            continue
        seen.add(name)
        unique.append(signature)
    return unique


def reconcile(unit: SourceUnit, artifact_path: Path) -> Reconciliation:
    """Compare a source unit against its test artifact.

    If the artifact does not exist every signature is new and the artifact
    is rendered from scratch. Otherwise the artifact is parsed and only
    signatures whose stub is missing are kept, in declaration order.

    Args:
        unit: Freshly extracted source unit
        artifact_path: Path of its test file

    Returns:
        Reconciliation with the rendering mode and surviving signatures

    Raises:
        ParseError: If an existing artifact cannot be parsed
    """
    candidates = _unique_by_stub_name(unit.package_name, unit.signatures)

    if not Path(artifact_path).exists():
        logger.info(f"No test file at {artifact_path}, generating all stubs")
        return Reconciliation(
            unit=unit,
            artifact_path=artifact_path,
            mode=FRESH,
            signatures=candidates,
        )

    existing = existing_stub_names(artifact_path)
    missing = [
        signature
        for signature in candidates
        if stub_name(unit.package_name, signature.name) not in existing
    ]
    logger.info(
        f"{artifact_path} has {len(candidates) - len(missing)} of "
        f"{len(candidates)} stubs, appending {len(missing)}"
    )
    return Reconciliation(
        unit=unit,
        artifact_path=artifact_path,
        mode=APPEND,
        signatures=missing,
    )

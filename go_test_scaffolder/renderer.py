"""Render Go test stubs from Jinja templates and append them to test files."""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from go_test_scaffolder.errors import ScaffoldError, WriteError
from go_test_scaffolder.models import FunctionSignature, Reconciliation
from go_test_scaffolder.reconciler import APPEND, FRESH, stub_name

logger = logging.getLogger(__name__)

TEMPLATES = {
    FRESH: "test_file.go.j2",
    APPEND: "test_fragment.go.j2",
}

DEFAULT_TEMPLATE_DIR = Path(__file__).with_name("templates")


def field_type(type_text: str) -> str:
    """Struct field type for a parameter type.

    A variadic `...T` parameter is received as `[]T`.
    """
    if type_text.startswith("..."):
        return f"[]{type_text[3:]}"
    return type_text


def create_environment(template_dir: Path | None = None) -> Environment:
    """Create the Jinja environment used for rendering.

    Templates in template_dir take precedence over the bundled ones, so a
    project can override either mode's template by file name.
    """
    directories = []
    if template_dir:
        directories.append(str(template_dir))
    directories.append(str(DEFAULT_TEMPLATE_DIR))

    env = Environment(
        loader=FileSystemLoader(directories),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.globals["stub_name"] = stub_name
    env.filters["field_type"] = field_type
    return env


def render_stubs(
    package_name: str,
    signatures: list[FunctionSignature],
    mode: str,
    env: Environment,
) -> str:
    """Render stubs for the given signatures.

    Args:
        package_name: Go package of the source file
        signatures: Signatures to render, in output order
        mode: "fresh" renders a whole file, "append" only the new stubs
        env: Environment from create_environment()

    Returns:
        Rendered Go source text

    Raises:
        ScaffoldError: If the mode is unknown or the template fails
    """
    if mode not in TEMPLATES:
        raise ScaffoldError(f"unknown rendering mode: {mode}", phase="render")

    try:
        template = env.get_template(TEMPLATES[mode])
        return template.render(package_name=package_name, signatures=signatures)
    except TemplateError as e:
        logger.error(f"Template {TEMPLATES[mode]} failed: {e}")
        raise ScaffoldError(
            f"unable to render template {TEMPLATES[mode]}: {e}", phase="render"
        ) from e


def write_artifact(path: Path, text: str) -> None:
    """Append text to a test file, creating it if needed.

    Raises:
        WriteError: If the file cannot be opened or written
    """
    try:
        with open(path, "a", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        logger.error(f"Unable to write {path}: {e}")
        raise WriteError(f"unable to write test file {path}: {e}") from e
    logger.info(f"Wrote {len(text)} characters to {path}")


def render_artifact(
    reconciliation: Reconciliation, env: Environment, dry_run: bool = False
) -> str:
    """Render a reconciliation and append the result to its test file.

    The test file is never read back; the reconciliation is trusted to hold
    exactly the missing stubs.

    Returns:
        The rendered text
    """
    text = render_stubs(
        reconciliation.unit.package_name,
        reconciliation.signatures,
        reconciliation.mode,
        env,
    )
    if dry_run:
        logger.info(f"Dry run: not writing {reconciliation.artifact_path}")
    else:
        write_artifact(reconciliation.artifact_path, text)
    return text

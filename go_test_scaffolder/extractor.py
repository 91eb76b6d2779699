"""Extract function signatures from Go source files using tree-sitter."""

import logging
from pathlib import Path

import tree_sitter_go as tsgo
from tree_sitter import Language, Node, Parser

from go_test_scaffolder.errors import ParseError
from go_test_scaffolder.models import FunctionSignature, SourceUnit

logger = logging.getLogger(__name__)

GO_LANGUAGE = Language(tsgo.language())

FUNCTION_NODE_TYPES = ("function_declaration", "method_declaration")

PARAMETER_NODE_TYPES = ("parameter_declaration", "variadic_parameter_declaration")


def _text(node: Node) -> str:
    return node.text.decode("utf-8")


def _type_texts(declaration: Node) -> list[str]:
    """Render the type of a parameter declaration once per declared name.

    `a, b int` declares two parameters of type `int`; an unnamed parameter
    declares exactly one.
    """
    type_node = declaration.child_by_field_name("type")
    rendered = _text(type_node)
    if declaration.type == "variadic_parameter_declaration":
        rendered = f"...{rendered}"
    names = declaration.children_by_field_name("name")
    return [rendered] * max(len(names), 1)


def _parameter_types(parameter_list: Node | None) -> tuple[str, ...]:
    if parameter_list is None:
        return ()
    types: list[str] = []
    for child in parameter_list.named_children:
        if child.type in PARAMETER_NODE_TYPES:
            types.extend(_type_texts(child))
    return tuple(types)


def _result_types(result: Node | None) -> tuple[str, ...]:
    if result is None:
        return ()
    if result.type == "parameter_list":
        return _parameter_types(result)
    # A single unparenthesized result type
    return (_text(result),)


def _function_signature(node: Node) -> FunctionSignature:
    """Build a signature from a function or method declaration.

    A method's receiver is ignored, so a method is named after the method
    alone.
    """
    return FunctionSignature(
        name=_text(node.child_by_field_name("name")),
        input_types=_parameter_types(node.child_by_field_name("parameters")),
        output_types=_result_types(node.child_by_field_name("result")),
    )


def _package_name(node: Node) -> str | None:
    for child in node.named_children:
        if child.type == "package_identifier":
            return _text(child)
    return None


def parse_go_source(
    content: bytes, file_path: str = "<source>"
) -> tuple[str, list[FunctionSignature]]:
    """Parse Go source and extract its package name and top-level functions.

    Args:
        content: Raw Go source
        file_path: Path used in error messages

    Returns:
        Tuple of (package name, signatures in declaration order)

    Raises:
        ParseError: If the source has syntax errors or no package clause
    """
    parser = Parser(GO_LANGUAGE)
    tree = parser.parse(content)
    root = tree.root_node
    if root.has_error:
        raise ParseError(f"error parsing file {file_path}")

    package_name = None
    signatures: list[FunctionSignature] = []

    for node in root.named_children:
        if node.type == "package_clause":
            package_name = _package_name(node)
        elif node.type in FUNCTION_NODE_TYPES:
            signature = _function_signature(node)
            signatures.append(signature)
            logger.debug(
                f"Parsed function: {signature.name}"
                f"({', '.join(signature.input_types)}) "
                f"({', '.join(signature.output_types)})"
            )

    if package_name is None:
        raise ParseError(f"error parsing file {file_path}: missing package clause")

    return package_name, signatures


def extract_source_unit(path: Path) -> SourceUnit:
    """Parse a Go file into a SourceUnit.

    Args:
        path: Path to the .go file

    Returns:
        SourceUnit with the package name and signatures in declaration order

    Raises:
        ParseError: If the file cannot be read or parsed
    """
    path = Path(path)
    logger.info(f"Extracting signatures from {path}")
    try:
        content = path.read_bytes()
    except OSError as e:
        raise ParseError(f"error reading file {path}: {e}") from e

    package_name, signatures = parse_go_source(content, str(path))
    logger.info(f"Found {len(signatures)} functions in package {package_name}")
    return SourceUnit(
        directory_path=path.parent,
        file_name=path.name,
        package_name=package_name,
        signatures=signatures,
    )

"""Errors that abort a scaffolding run."""


class ScaffoldError(Exception):
    """Fatal error while scaffolding tests."""

    def __init__(self, message: str, phase: str = "scaffold"):
        super().__init__(message)
        self.phase = phase


class TraversalError(ScaffoldError):
    """A directory in the source tree could not be read."""

    def __init__(self, message: str):
        super().__init__(message, phase="walk")


class ParseError(ScaffoldError):
    """A source or test file could not be parsed."""

    def __init__(self, message: str):
        super().__init__(message, phase="parse")


class WriteError(ScaffoldError):
    """A test artifact could not be created or appended to."""

    def __init__(self, message: str):
        super().__init__(message, phase="write")

"""Exception types raised by the inline lens analyzer.

The analysis core raises these and never catches them itself. Only the CLI
turns them into diagnostics and exit codes, so library callers can always tell
"no functions found" (an empty result) apart from "could not analyze".
"""


class InlineLensError(Exception):
    """Base class for all analyzer errors."""


class ParseError(InlineLensError):
    """Raised when Go source text is not syntactically valid.

    Attributes:
        message: Description of the offending construct
        line: 1-based line of the first syntax error
        column: 1-based byte column of the first syntax error
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"{line}:{column}: {message}")
        self.message = message
        self.line = line
        self.column = column


class ConfigurationError(InlineLensError):
    """Raised when hint thresholds are malformed."""

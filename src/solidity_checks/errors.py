from typing import List, Optional, Tuple


class SolidityChecksError(Exception):
    """
    Base class of every exception raised by solidity_checks.
    """


class VocabularyError(SolidityChecksError):
    """
    Raised when a grammar vocabulary cannot be built, e.g. a malformed `.tokens` line.
    """

    def __init__(self, reason: str, line: Optional[int] = None) -> None:
        """
        Parameters
        ----------
        reason : str - What is wrong with the vocabulary input.
        line : int, optional - 1-based line of the `.tokens` input that failed to parse.
        """
        self.reason = reason
        self.line = line
        self.message = reason if line is None else f"{reason} (line {line})"
        super().__init__(self.message)


class PreconditionViolation(SolidityChecksError):
    """
    Raised when a caller skipped the guarding predicate of an operation,
    e.g. unwrapping an expression that is not parenthesized.

    This is a programming error in the calling rule, not a recoverable condition.
    """


class MissingContractError(PreconditionViolation):
    """
    Raised when a node has no enclosing contract definition.
    """

    def __init__(self, node_text: str) -> None:
        self.node_text = node_text
        self.message = f"no contract definition encloses node '{node_text}'"
        super().__init__(self.message)


class FixtureMismatchError(SolidityChecksError):
    """
    Raised when the issues reported on a fixture differ from its `// Noncompliant` annotations.
    """

    def __init__(
        self,
        missing: List[Tuple[int, str]],
        unexpected: List[Tuple[int, str]],
    ) -> None:
        """
        Parameters
        ----------
        missing : List[Tuple[int, str]] - Expected (line, message) pairs that were not reported.
        unexpected : List[Tuple[int, str]] - Reported (line, message) pairs that were not expected.
        """
        self.missing = missing
        self.unexpected = unexpected
        parts = []
        if missing:
            parts.append(
                "missing: " + ", ".join(f"{message!r} at line {line}" for line, message in missing)
            )
        if unexpected:
            parts.append(
                "unexpected: " + ", ".join(f"{message!r} at line {line}" for line, message in unexpected)
            )
        self.message = "; ".join(parts)
        super().__init__(self.message)

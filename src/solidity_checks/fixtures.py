"""
Expected-issue annotations of rule test fixtures.

A fixture line that should raise an issue ends with a comment of the form

    // Noncompliant {{<message>}}

where `<message>` is the exact text of the expected issue.
"""
import logging
from collections import Counter
from typing import Iterable, List, NamedTuple, Tuple

from .errors import FixtureMismatchError, PreconditionViolation

logger = logging.getLogger(__name__)

NONCOMPLIANT_PREFIX = "// Noncompliant {{"
NONCOMPLIANT_SUFFIX = "}}"


class ExpectedIssue(NamedTuple):
    line: int
    message: str


def is_expectation_comment(comment: str) -> bool:
    return comment.startswith(NONCOMPLIANT_PREFIX) and comment.endswith(NONCOMPLIANT_SUFFIX)


def extract_expectation_message(comment: str) -> str:
    """
    The message between the inner braces of an expectation comment, stripped.

    Raises
    ------
    PreconditionViolation - If `comment` is not an expectation comment.
    """
    if not is_expectation_comment(comment):
        raise PreconditionViolation(f"{comment!r} is not a '{NONCOMPLIANT_PREFIX}...{NONCOMPLIANT_SUFFIX}' comment")
    idx = comment.index("{")
    return comment[idx + 2:len(comment) - 2].strip()


def collect_expected_issues(source: str) -> List[ExpectedIssue]:
    """
    Scan fixture source for expectation comments.

    Parameters
    ----------
    source : str - The fixture source code.

    Returns
    -------
    List[ExpectedIssue] - One entry per annotated line, with 1-based line numbers, in source order.
    """
    issues = []
    for line_number, line in enumerate(source.splitlines(), start=1):
        idx = line.find(NONCOMPLIANT_PREFIX)
        if idx < 0:
            continue
        comment = line[idx:].rstrip()
        if is_expectation_comment(comment):
            issues.append(ExpectedIssue(line_number, extract_expectation_message(comment)))
        else:
            logger.warning("Ignoring malformed expectation comment at line %d: %s", line_number, comment)
    return issues


def verify_issues(
    expected: Iterable[Tuple[int, str]],
    actual: Iterable[Tuple[int, str]],
) -> None:
    """
    Compare the issues a rule reported on a fixture with the fixture's annotations.

    Parameters
    ----------
    expected : Iterable[Tuple[int, str]] - Expected (line, message) pairs, e.g. from `collect_expected_issues`.
    actual : Iterable[Tuple[int, str]] - (line, message) pairs reported by the rule.

    Raises
    ------
    FixtureMismatchError - If an expected issue was not reported or an issue was reported without annotation.
    """
    expected_counts = Counter((line, message) for line, message in expected)
    actual_counts = Counter((line, message) for line, message in actual)

    missing = sorted((expected_counts - actual_counts).elements())
    unexpected = sorted((actual_counts - expected_counts).elements())
    if missing or unexpected:
        raise FixtureMismatchError(missing, unexpected)
    logger.debug("Fixture verified: %d issues", sum(expected_counts.values()))

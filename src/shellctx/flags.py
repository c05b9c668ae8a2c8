"""Policy flags for execution contexts.

Flags form a small bit-set: they compose with ``|``, duplicates collapse and
order does not matter. PASS_THROUGH is the union of the three per-stream
pass-through flags, so testing for any single stream works the same whether
the caller passed the alias or the individual members.
"""

from collections.abc import Iterable
from enum import Flag as _EnumFlag
from enum import auto
from functools import reduce


class Flag(_EnumFlag):
    """Execution policy flag."""

    MUST_PANIC = auto()  # abort with the rendered error
    MUST_EXIT = auto()  # print error line, exit with status 1
    WARN = auto()  # print warning line, still return the error
    NO_ANNOTATE = auto()  # rendered error is exactly the captured stderr
    STDERR_IN_RESULT = auto()  # stderr merged into returned stdout
    PASS_THROUGH_STDOUT = auto()
    PASS_THROUGH_STDERR = auto()
    PASS_THROUGH_STDIN = auto()
    TRIM_SPACE = auto()
    FIRST_LINE = auto()
    STRICT = auto()  # set -eu -o pipefail
    VERBOSE = auto()

    PASS_THROUGH = PASS_THROUGH_STDOUT | PASS_THROUGH_STDERR | PASS_THROUGH_STDIN


NO_FLAGS = Flag(0)


def combine_flags(flags: Iterable[Flag]) -> Flag:
    """Fold any number of flags into a single value.

    Args:
        flags: Flags to combine (may be empty)

    Returns:
        The union of all flags, or NO_FLAGS for an empty iterable
    """
    return reduce(lambda acc, flag: acc | flag, flags, NO_FLAGS)

"""
Argument scanning and option resolution.

Works directly on the raw argument vector instead of going through
argparse: options may be repeated, the last single-valued occurrence
wins, and multi-valued options keep every occurrence.

The argument vector is always passed in explicitly and never mutated.
"""

from typing import List, Optional, Sequence, Tuple


OptionSpellings = Tuple[str, ...]

CONFIG: OptionSpellings = ("-c", "--config")
DIAGRAM: OptionSpellings = ("-d", "--diagram")
HELP: OptionSpellings = ("-h", "--help")
OUTPUT: OptionSpellings = ("-o", "--output")
STYLE: OptionSpellings = ("-s", "--style")
TYPESET: OptionSpellings = ("-t", "--typeset")
VERSION: OptionSpellings = ("-v", "--version")
WRITE: OptionSpellings = ("-w", "--write")


def occurrences_of(spelling: str, args: Sequence[str]) -> List[int]:
    """
    Find every position of a spelling in the argument vector.

    Example:
        >>> occurrences_of("-s", ["rho", "-s", "st1.json", "--style", "st2.json", "-s", "st3.json"])
        [1, 5]
    """
    return [idx for idx, token in enumerate(args) if token == spelling]


def any_occurrence_present(spellings: Sequence[str], args: Sequence[str]) -> bool:
    """True if at least one of the spellings appears anywhere in args."""
    return not set(spellings).isdisjoint(args)


def resolve_single(spellings: Sequence[str], args: Sequence[str]) -> Optional[str]:
    """
    Return the value of the last mention of an option.

    The last occurrence is taken across all spellings, so
    ``-d a.json --diagram b.json`` resolves to ``b.json``.

    Args:
        spellings: Equivalent spellings of one option (e.g. ("-d", "--diagram"))
        args: Argument vector

    Returns:
        Token following the last occurrence, or None if the option is
        missing or its last occurrence is the final token.
    """
    positions = [idx for spelling in spellings for idx in occurrences_of(spelling, args)]
    if not positions:
        return None

    last = max(positions)
    if last + 1 >= len(args):
        return None
    return args[last + 1]


def resolve_all(spellings: Sequence[str], args: Sequence[str]) -> List[str]:
    """
    Return the values of every mention of an option.

    Values are grouped per spelling, in the order the spellings are given,
    and left to right within each spelling. Interleaved spellings are
    therefore NOT returned in strict command-line order:

        >>> resolve_all(("-s", "--style"), ["--style", "a", "-s", "b"])
        ['b', 'a']

    Occurrences without a following token, and empty values, are dropped.
    """
    values: List[str] = []
    for spelling in spellings:
        for idx in occurrences_of(spelling, args):
            if idx + 1 < len(args) and args[idx + 1]:
                values.append(args[idx + 1])
    return values


__all__ = [
    "OptionSpellings",
    "CONFIG",
    "DIAGRAM",
    "HELP",
    "OUTPUT",
    "STYLE",
    "TYPESET",
    "VERSION",
    "WRITE",
    "occurrences_of",
    "any_occurrence_present",
    "resolve_single",
    "resolve_all",
]

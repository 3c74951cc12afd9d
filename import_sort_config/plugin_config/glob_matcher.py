"""
Glob matching of file extensions against configuration patterns.

Wildcards follow git wildmatch rules as implemented by ``pathspec``, with
the key conventions of shell globs on top: a pattern is anchored to the
whole candidate, leading ``!`` negates it, a leading ``#`` marks a comment
that never matches, and brace groups such as ``*.{js,jsx}`` are expanded
into their alternatives.
"""

from typing import List, Optional, Tuple

import pathspec

from import_sort_config.log import get_logger


def _find_brace_group(pattern: str) -> Optional[Tuple[int, int, List[str]]]:
    """
    Locate the first brace group that has at least two alternatives.

    Returns:
        (open index, close index, alternatives) or None if there is no such group
    """
    search_from = 0
    while True:
        open_idx = pattern.find("{", search_from)
        if open_idx == -1:
            return None

        depth = 0
        part_start = open_idx + 1
        alternatives: List[str] = []
        for idx in range(open_idx, len(pattern)):
            char = pattern[idx]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    if alternatives:
                        alternatives.append(pattern[part_start:idx])
                        return open_idx, idx, alternatives
                    # "{a}" is literal
                    break
            elif char == "," and depth == 1:
                alternatives.append(pattern[part_start:idx])
                part_start = idx + 1

        search_from = open_idx + 1


def expand_braces(pattern: str) -> List[str]:
    """
    Expand brace groups into the list of plain patterns they stand for.

    Args:
        pattern: Glob pattern, possibly containing (nested) brace groups

    Returns:
        Plain patterns in left-to-right order; the pattern itself if it has no group
    """
    group = _find_brace_group(pattern)
    if group is None:
        return [pattern]

    open_idx, close_idx, alternatives = group
    prefix, suffix = pattern[:open_idx], pattern[close_idx + 1:]

    expanded: List[str] = []
    for alternative in alternatives:
        expanded.extend(expand_braces(prefix + alternative + suffix))
    return expanded


def _match_plain(candidate: str, pattern: str) -> bool:
    """Match a pattern without braces or negation against the whole candidate."""
    if not pattern:
        return candidate == ""

    anchored = pattern if pattern.startswith("/") else "/" + pattern
    try:
        spec = pathspec.PathSpec.from_lines("gitwildmatch", [anchored])
    except ValueError:
        get_logger().debug("Ignoring malformed glob pattern", extra={"pattern": pattern})
        return False

    if not spec.match_file(candidate):
        return False

    # Without a globstar, wildcards never cross "/"
    if "**" not in pattern:
        return candidate.strip("/").count("/") == pattern.strip("/").count("/")
    return True


def matches(candidate: str, pattern: str) -> bool:
    """
    Check whether a candidate string matches a glob pattern.

    Args:
        candidate: String to test, typically an extension such as ``.ts``
        pattern: Glob pattern; ``!`` prefixes negate, ``#`` starts a comment

    Returns:
        True if the candidate matches; malformed patterns never match
    """
    if pattern.startswith("#"):
        return False

    negated = False
    while pattern.startswith("!"):
        negated = not negated
        pattern = pattern[1:]

    matched = any(_match_plain(candidate, alternative) for alternative in expand_braces(pattern))
    return matched != negated

from __future__ import annotations

import posixpath
import re
from collections.abc import Iterable
from functools import lru_cache

from .errors import ConfigError


def package_dir(name: str) -> str:
    """Directory part of a profile file name; '.' when there is none."""
    return posixpath.normpath(posixpath.dirname(name))


def normalize_name(name: str, root: str, packages: bool) -> str:
    """
    Map a profile file name to its report key.

    In package mode the key is the containing directory. A configured root is
    removed when the name starts with it; package keys then become
    root-relative ('./report'). Names outside the root are kept as they are.
    """
    if packages:
        name = package_dir(name)

    if not root:
        return name
    stripped = name.removeprefix(root)
    if packages:
        return "." + stripped
    return stripped


def _class_end(pattern: str, start: int) -> int:
    """Index of the ']' closing the class opened at start, or -1."""
    idx = start + 1
    if idx < len(pattern) and pattern[idx] in "!^":
        idx += 1
    if idx < len(pattern) and pattern[idx] == "]":
        idx += 1
    while idx < len(pattern) and pattern[idx] != "]":
        idx += 1
    return idx if idx < len(pattern) else -1


@lru_cache(maxsize=512)
def compile_glob_regex(pattern: str) -> re.Pattern[str]:
    """
    Compile a glob pattern into an anchored regex.

    '*' stays inside one path segment, '**' crosses segments ('**/' may also
    match no directory at all), '?' is one non-'/' character and '[...]' is a
    character class ('!' or '^' negates).
    """
    fragments: list[str] = []
    idx = 0
    while idx < len(pattern):
        char = pattern[idx]
        if char == "*":
            if pattern.startswith("**", idx):
                idx += 2
                if idx < len(pattern) and pattern[idx] == "/":
                    fragments.append("(?:.*/)?")
                    idx += 1
                else:
                    fragments.append(".*")
                continue
            fragments.append("[^/]*")
        elif char == "?":
            fragments.append("[^/]")
        elif char == "[":
            end = _class_end(pattern, idx)
            if end < 0:
                fragments.append(re.escape(char))
            else:
                body = pattern[idx + 1 : end]
                negate = body[:1] in ("!", "^")
                if negate:
                    body = body[1:]
                body = body.replace("\\", "\\\\").replace("[", "\\[")
                fragments.append("[" + ("^" if negate else "") + body + "]")
                idx = end
        else:
            fragments.append(re.escape(char))
        idx += 1
    return re.compile("".join(fragments) + r"\Z", re.DOTALL)


def matches_glob(key: str, pattern: str) -> bool:
    return compile_glob_regex(pattern).match(key) is not None


def is_excluded(key: str, patterns: Iterable[str]) -> bool:
    return any(matches_glob(key, pattern) for pattern in patterns)


def parse_exclusion_patterns(raw_patterns: Iterable[str]) -> list[str]:
    parsed: list[str] = []
    for item in raw_patterns:
        pattern = item.strip()
        if not pattern:
            raise ConfigError(f"Invalid exclusion pattern '{item}', pattern cannot be empty")
        try:
            compile_glob_regex(pattern)
        except re.error as exc:
            raise ConfigError(f"Invalid exclusion pattern '{item}': {exc}") from exc
        parsed.append(pattern)

    # Keep input order while removing duplicates.
    return list(dict.fromkeys(parsed))

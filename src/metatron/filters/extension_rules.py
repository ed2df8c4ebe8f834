"""Extension-based filter rules for selecting files by name suffix."""

import os
import re
from typing import List, Sequence

from metatron.types import PathType

from .base_rules import BaseFilterRules

_SEPARATORS = re.compile(r"[, ]")


def parse_extensions(raw: str) -> List[str]:
    """Parse a free-form extension string into a normalized extension list.

    Tokens are separated by commas and/or spaces. Each token is trimmed,
    lowercased and stripped of leading dots; empty tokens are dropped. Order of
    appearance is preserved.

    Args:
        raw: User input such as ``".py, .TXT md"``.

    Returns:
        The normalized extensions. An empty list means "no restriction".

    Example:
        >>> parse_extensions(" .RS, .Txt  md ")
        ['rs', 'txt', 'md']
        >>> parse_extensions("")
        []
    """
    extensions = []
    for token in _SEPARATORS.split(raw):
        token = token.strip().lower().lstrip(".")
        if token:
            extensions.append(token)
    return extensions


def format_extensions(extensions: Sequence[str]) -> str:
    """Render an extension list back into the comma-separated input form.

    Example:
        >>> format_extensions(["md", "txt"])
        '.md,.txt'
        >>> parse_extensions(format_extensions(["md", "txt"]))
        ['md', 'txt']
    """
    return ",".join(f".{ext}" for ext in extensions)


def _has_suffix(filename: str, extensions: Sequence[str]) -> bool:
    # Plain suffix comparison: "archive.tar.gz" ends with ".gz" and ".tar.gz" alike.
    filename_lower = filename.lower()
    return any(filename_lower.endswith(f".{ext}") for ext in extensions)


def matches_extension(filename: str, extensions: Sequence[str]) -> bool:
    """Check a file name against an allow-list of extensions.

    Args:
        filename: Base name of the file.
        extensions: Normalized extensions, as returned by parse_extensions().

    Returns:
        True if the list is empty or the lowercased name ends with ``.<ext>``
        for any listed extension.

    Example:
        >>> matches_extension("notes.TXT", ["txt", "md"])
        True
        >>> matches_extension("image.png", ["txt", "md"])
        False
        >>> matches_extension("anything", [])
        True
    """
    if not extensions:
        return True
    return _has_suffix(filename, extensions)


def is_ignored_file(filename: str, ignored_extensions: Sequence[str]) -> bool:
    """Check a file name against a deny-list of extensions.

    Example:
        >>> is_ignored_file("server.LOG", ["log"])
        True
        >>> is_ignored_file("server.log", [])
        False
    """
    if not ignored_extensions:
        return False
    return _has_suffix(filename, ignored_extensions)


class ExtensionFilterRules(BaseFilterRules):
    """File filter combining an extension allow-list with an extension deny-list.

    A file is accepted when it is not ignored and it matches the allow-list.
    Both lists are given in the free-form input syntax understood by
    parse_extensions().

    Attributes:
        extensions (List[str]): Normalized allow-list. Empty allows everything.
        ignored_extensions (List[str]): Normalized deny-list. Empty ignores nothing.

    Example:
        >>> rules = ExtensionFilterRules("py md", ignored_extensions=".pyc")
        >>> rules.accepts("main.py")
        True
        >>> rules.accepts("main.pyc")
        False
        >>> rules.restricts_extensions
        True
    """

    def __init__(self, extensions: str = "", ignored_extensions: str = "") -> None:
        self.extensions = parse_extensions(extensions)
        self.ignored_extensions = parse_extensions(ignored_extensions)

    @property
    def restricts_extensions(self) -> bool:
        """Whether an allow-list is active. Empty folders are hidden from trees only in that case."""
        return bool(self.extensions)

    def accepts(self, filename: str) -> bool:
        """Return True if a file with this name belongs in the results."""
        if is_ignored_file(filename, self.ignored_extensions):
            return False
        return matches_extension(filename, self.extensions)

    def exclude(self, path: PathType) -> bool:
        """Check if a file should be left out, looking only at its base name.

        Args:
            path: File name or path to the file.

        Returns:
            True if the file is ignored or does not match the allow-list.
        """
        if not self.has_rules():
            return False
        return not self.accepts(os.path.basename(os.fspath(path)))

    def has_rules(self) -> bool:
        return bool(self.extensions or self.ignored_extensions)

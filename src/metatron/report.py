"""Human-readable reports built from scan results."""

from datetime import datetime, timezone
from typing import Optional

from metatron.types import HierarchyResult, ListingResult

BOX_WIDTH = 64
FIELD_WIDTH = 48
END_MARKER = "── End of hierarchy ──"


def format_listing_report(result: ListingResult) -> str:
    """List entry names, one per line.

    Example:
        >>> from metatron.types import FileEntry
        >>> result = ListingResult(files=[FileEntry("a.md", "/x/a.md"), FileEntry("b.md", "/x/b.md")])
        >>> print(format_listing_report(result))
        a.md
        b.md
    """
    return "\n".join(entry.name for entry in result.files)


def format_hierarchy_report(result: HierarchyResult, folder_path: str, extension: str = "") -> str:
    """Wrap a rendered hierarchy with a boxed header and an end marker.

    The header shows the scanned directory (cut to 48 characters) and the raw
    extension filter, or ``All`` when no filter was given.
    """
    border = "═" * BOX_WIDTH
    lines = [
        f"╔{border}╗",
        f"║  {'FILE HIERARCHY'.ljust(BOX_WIDTH - 2)}║",
        f"║  Directory: {folder_path[:FIELD_WIDTH].ljust(FIELD_WIDTH)}  ║",
        f"║  Extension: {(extension or 'All').ljust(FIELD_WIDTH)}  ║",
        f"╚{border}╝",
        "",
        "",
    ]
    return "\n".join(lines) + result.hierarchy + f"\n\n{END_MARKER}"


def default_output_filename(mode: str, now: Optional[datetime] = None) -> str:
    """Build the default name for a saved report.

    Example:
        >>> default_output_filename("tree", datetime(2024, 5, 1, 13, 45, 9))
        'metatron_tree_2024-05-01T13-45-09.txt'
    """
    now = now or datetime.now(timezone.utc)
    return f"metatron_{mode}_{now.strftime('%Y-%m-%dT%H-%M-%S')}.txt"

"""Text width helpers with proper Unicode width handling."""

from wcwidth import wcwidth


def display_width(text: str) -> int:
    """Return visual width of text accounting for wide/narrow characters."""
    width = 0
    for ch in text:
        w = wcwidth(ch)
        if w is None:
            w = 0
        width += max(0, w)
    return width


def trim_display(text: str, width: int, ellipsis: str = "") -> str:
    """Trim text so visible width doesn't exceed width.

    When trimming happens and ellipsis is given, it replaces the tail.
    """
    if display_width(text) <= width:
        return text
    budget = max(0, width - display_width(ellipsis))
    acc = []
    used = 0
    for ch in text:
        w = wcwidth(ch) or 0
        if w < 0:
            w = 0
        if used + w > budget:
            break
        acc.append(ch)
        used += w
    return "".join(acc) + (ellipsis if width >= display_width(ellipsis) else "")


def pad_display(text: str, width: int) -> str:
    """Trim and pad with spaces to exact visible width."""
    trimmed = trim_display(text, width, ellipsis="…")
    trimmed_width = display_width(trimmed)
    if trimmed_width < width:
        trimmed += " " * (width - trimmed_width)
    return trimmed


__all__ = ["display_width", "trim_display", "pad_display"]

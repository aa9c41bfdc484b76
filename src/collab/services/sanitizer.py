"""Output sanitization for user-supplied free text."""

import html


def sanitize_text(text: str | None) -> str | None:
    """Escape markup so stored text renders as text, never as HTML.

    Quotes are left alone: the result is only ever placed in element content,
    and keeping them preserves what the user typed.
    """
    if text is None:
        return None
    return html.escape(text, quote=False)

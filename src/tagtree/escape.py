"""HTML escaping for text content and attribute values."""
from __future__ import annotations

# Quotes become numeric references rather than &quot; and &#x27;.
_HTML_ESCAPES: dict[int, str] = {
    ord("\0"): "\ufffd",
    ord('"'): "&#34;",
    ord("'"): "&#39;",
    ord("&"): "&amp;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
}


def escape_html(value: str) -> str:
    """Return ``value`` with HTML-significant characters replaced.

    ``&``, ``<``, ``>``, ``"`` and ``'`` become character references and
    NUL becomes U+FFFD. The result is safe both as element content and
    inside a double-quoted attribute value.
    """
    return value.translate(_HTML_ESCAPES)

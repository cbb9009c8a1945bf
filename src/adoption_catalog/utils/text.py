"""Text helpers for displaying untrusted free-text fields."""

import re
import unicodedata

from bs4 import BeautifulSoup

# Elements whose end starts a new line in the plain-text rendering
BLOCK_TAGS = ["p", "div", "li", "ul", "ol", "h1", "h2", "h3", "h4", "h5", "h6", "tr"]


def strip_markup(text: str) -> str:
    """
    Convert an HTML fragment from the listing API into plain text.

    Scripts and styles are dropped with their contents, ``<br>`` and
    block elements become newlines, and entities are decoded. A stray
    ``<`` or ``>`` that does not open a tag is kept as text.

    Args:
        text: Raw field value, possibly containing markup

    Returns:
        Plain text with normalized whitespace
    """
    if not text:
        return ""

    soup = BeautifulSoup(text, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for block in soup.find_all(BLOCK_TAGS):
        block.append("\n")
    text = soup.get_text()

    # Normalize unicode characters
    text = unicodedata.normalize("NFKC", text)

    # Remove control characters except newlines
    text = "".join(char for char in text if unicodedata.category(char)[0] != "C" or char == "\n")

    # Normalize whitespace
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r" *\n *", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)

    return text.strip()


def truncate_text(text: str, max_length: int = 500, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length, preserving word boundaries.

    Args:
        text: Text to truncate
        max_length: Maximum length of output
        suffix: Suffix to add when truncating

    Returns:
        Truncated text
    """
    if not text or len(text) <= max_length:
        return text

    truncate_at = max_length - len(suffix)
    if truncate_at <= 0:
        return suffix

    # Find the last space before the truncation point
    last_space = text.rfind(" ", 0, truncate_at)
    if last_space > 0:
        truncate_at = last_space

    return text[:truncate_at].rstrip() + suffix

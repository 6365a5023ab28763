"""
Sanitizer - Cleanup of raw model text before it becomes an Artifact.

Models often wrap HTML/CSS in markdown fences even when asked not to.
strip_code_fences() removes every fence marker (with an optional language
tag) and the surrounding whitespace. It runs to a fixed point, so applying
it twice gives the same result as applying it once.
"""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger("resumeforge.ai.resume.sanitizer")

# A fence marker plus its language tag. The tag is any word that ends at
# whitespace, another backtick or the end of text ("```less\n", "```css```").
# json/html/xml tags are also stripped when glued to the code ("```json{").
_FENCE_RE = re.compile(
    r"```(?:[a-z][\w+#.-]*(?=[\s`]|$)|(?:json|html|xml)(?=[{\[<]))?",
    re.IGNORECASE,
)


def strip_code_fences(text: Optional[str]) -> str:
    """
    Remove code-fence delimiters and surrounding whitespace.

    Examples:
        "```html\\n<div>x</div>\\n```" -> "<div>x</div>"
        "```css```"                    -> ""
    """
    if not text:
        return ""

    cleaned = text
    while True:
        stripped = _FENCE_RE.sub("", cleaned).strip()
        if stripped == cleaned:
            return cleaned
        cleaned = stripped


def unwrap_code_fence(text: Optional[str]) -> str:
    """
    Remove one enclosing fence pair, leaving fences inside the body alone.

    Used on whole JSON answers, whose string values may carry their own
    fenced code:
        '```json{"css": "a{}"}```' -> '{"css": "a{}"}'
    """
    cleaned = (text or "").strip()
    opening = _FENCE_RE.match(cleaned)
    if opening is None:
        return cleaned

    body = cleaned[opening.end():]
    if body.endswith("```"):
        body = body[:-3]
    return body.strip()


def count_root_elements(markup: str) -> int:
    """Number of top-level elements in an HTML fragment."""
    soup = BeautifulSoup(markup, "html.parser")
    return sum(1 for node in soup.contents if isinstance(node, Tag))


def inspect_markup(markup: str, request_id: str = "") -> bool:
    """
    Check that markup is a single root container.

    Only logs: the caller's editor can still display a multi-root fragment,
    and refinement is free to fix it later.

    Returns:
        True if the markup has exactly one root element
    """
    roots = count_root_elements(markup)
    if roots != 1:
        logger.warning(f"[{request_id}] Markup has {roots} root elements, expected a single container")
        return False
    return True

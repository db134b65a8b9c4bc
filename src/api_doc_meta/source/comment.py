"""Doc comment access and parsing.

Reads the free-text body and the ``@tag value`` entries of a structured doc
comment. A missing comment behaves exactly like a comment without the
requested tag.
"""

import re

from api_doc_meta.source.base import DocComment

_TAG_LINE = re.compile(r"^@([\w.\-]+)\s*(.*)$")
_INLINE_TAG = re.compile(r"\{@(?:code|link|linkplain|literal|value)\s+([^}]*)\}")
_PARAGRAPH = re.compile(r"</?p\s*/?>", re.IGNORECASE)


def tag_value(comment: DocComment | None, tag_name: str) -> str:
    """Return the trimmed value of ``tag_name``, or "" when absent or blank."""
    if comment is None:
        return ""
    return (comment.tags.get(tag_name) or "").strip()


def has_tag(comment: DocComment | None, tag_name: str) -> bool:
    """True when the tag is present, whatever its value."""
    return comment is not None and tag_name in comment.tags


def body_text(comment: DocComment | None) -> str:
    if comment is None:
        return ""
    return comment.body.strip()


def parse_doc_comment(text: str) -> DocComment:
    """Split raw ``/** ... */`` text into body and tags.

    Everything before the first line starting with ``@`` is the body. A tag
    value continues over the following lines until the next tag. When a tag
    name repeats, the first occurrence is kept.
    """
    body_lines: list[str] = []
    tags: dict[str, str] = {}
    current: tuple[str, list[str]] | None = None

    for line in _strip_comment_markers(text):
        match = _TAG_LINE.match(line)
        if match:
            _store_tag(current, tags)
            current = (match.group(1), [match.group(2)])
        elif current is not None:
            current[1].append(line)
        else:
            body_lines.append(line)
    _store_tag(current, tags)

    return DocComment(body=_clean_body(body_lines), tags=tags)


def _strip_comment_markers(text: str) -> list[str]:
    text = text.strip()
    if text.startswith("/**"):
        text = text[3:]
    elif text.startswith("/*"):
        text = text[2:]
    if text.endswith("*/"):
        text = text[:-2]

    lines = []
    for raw in text.splitlines():
        line = raw.strip()
        if line.startswith("*"):
            line = line[1:].strip()
        lines.append(line)
    return lines


def _store_tag(current: tuple[str, list[str]] | None, tags: dict[str, str]) -> None:
    if current is None:
        return
    name, parts = current
    if name not in tags:
        tags[name] = " ".join(p for p in parts if p).strip()


def _clean_body(lines: list[str]) -> str:
    text = "\n".join(lines)
    text = _INLINE_TAG.sub(lambda m: m.group(1).strip(), text)
    text = _PARAGRAPH.sub("\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()

"""Comment text cleaning."""

import re

_JAVADOC_LINE_PREFIX = re.compile(r"^\s*\*\s?")


def clean_comment(comment: str | None) -> str | None:
    """Reduce a raw comment token to its prose.

    Javadoc comments lose their delimiters, leading `*` and `@tag` lines, and the
    remaining lines are joined with single spaces. Returns `None` when nothing is
    left.
    """
    if comment is None:
        return None

    if comment.startswith("/**") and comment != "/**/":
        body = comment[3:]
        if body.endswith("*/"):
            body = body[:-2]
        lines = (_JAVADOC_LINE_PREFIX.sub("", line).strip() for line in body.splitlines())
        cleaned = " ".join(line for line in lines if line and not line.startswith("@"))
    elif comment.startswith("//"):
        cleaned = comment[2:]
    elif comment.startswith("/*"):
        body = comment[2:]
        if body.endswith("*/"):
            body = body[:-2]
        cleaned = body
    else:
        cleaned = comment

    cleaned = cleaned.strip()
    return cleaned or None

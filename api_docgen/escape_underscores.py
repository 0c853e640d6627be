"""Utility for escaping underscores in narrative Markdown text."""

import re

# Underscores not already preceded by a backslash.
BARE_UNDERSCORE_RE = re.compile(r"(?<!\\)_")
# Inline HTML tags and inline code spans keep their literal names. A tag starts
# with a letter or "/" right after "<", so comparisons like "a < b" stay prose.
VERBATIM_RE = re.compile(r"</?[A-Za-z][^<>\n]*>|`[^`\n]*`")


def escape_underscores(text: str) -> str:
    """Escape bare ``_`` as ``\\_`` outside inline HTML tags and code spans.

    Already escaped underscores are left alone, so applying this twice is the
    same as applying it once.
    """
    out = []
    pos = 0
    for m in VERBATIM_RE.finditer(text):
        out.append(BARE_UNDERSCORE_RE.sub(r"\\_", text[pos : m.start()]))
        out.append(m.group(0))
        pos = m.end()
    out.append(BARE_UNDERSCORE_RE.sub(r"\\_", text[pos:]))
    return "".join(out)

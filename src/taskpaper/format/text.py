"""Text hygiene applied before parsing."""

import re

_EOL_RE = re.compile(r"\r\n?")


def normalize_text(text: str) -> str:
    """Convert `\\r\\n` and `\\r` line endings to `\\n`.

    Other line boundaries (`\\u2028`, `\\x85`, ...) are left alone; the
    parser still splits on them.
    """
    return _EOL_RE.sub("\n", text)

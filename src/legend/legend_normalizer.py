"""Line normalization for fuzzy comparison."""

import re


_ZERO_WIDTH_RE = re.compile('[\u200b-\u200d\ufeff]')
_WHITESPACE_RE = re.compile(r'\s+')


def normalize(line: str) -> str:
    """
    Canonicalize a line so that cosmetic differences don't prevent a match.

    Zero-width characters are removed, the line is trimmed and lower-cased, and
    runs of whitespace collapse to a single space.  Punctuation is left alone so
    code tokens stay intact.

    Args:
        line: Line to normalize

    Returns:
        Normalized text, used only for comparison
    """
    out = _ZERO_WIDTH_RE.sub('', line)
    out = out.strip()
    out = out.lower()
    return _WHITESPACE_RE.sub(' ', out)

"""Transcript Normalization — trimming and code point cleanup applied before rendering.

Invariants:
    - All functions are pure and deterministic
    - TRIM_CHARACTERS is the ECMAScript WhiteSpace + LineTerminator set: U+FEFF
      is trimmed, the ASCII separators U+001C–U+001F and U+0085 are not
    - Output of replace_lone_surrogates is always encodable as UTF-8

Design Decisions:
    - Explicit trim set over bare str.strip(): browser clients trim with
      String.prototype.trim, and both sides must agree on what "empty" means
    - Lone surrogates become U+FFFD one-for-one, so excerpt lengths are unchanged
"""

import re

TRIM_CHARACTERS = (
    "\t\n\v\f\r\u0020\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# json.loads already joins valid pairs, so any surrogate left in a str is unpaired
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def trim_transcript(text: str) -> str:
    return text.strip(TRIM_CHARACTERS)


def replace_lone_surrogates(text: str) -> str:
    """Swap unpaired UTF-16 surrogates for U+FFFD."""
    return _LONE_SURROGATE.sub("\ufffd", text)

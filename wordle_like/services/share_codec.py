"""
Share Codec

Encodes a target word into a compact share code and back. Codes are plain
Base64 so they survive clipboard, URL query and manual entry transports.
"""

import base64
import binascii
from typing import Optional


def encode_word(word: str) -> str:
    """Encodes a word as a Base64 share code."""
    return base64.b64encode(word.lower().encode("utf-8")).decode("ascii")


def decode_word(code) -> Optional[str]:
    """
    Decodes a share code back into a lowercase word.

    Returns:
        The decoded word, or None if the code is malformed or empty
    """
    if not isinstance(code, str):
        return None

    code = code.strip()
    if not code:
        return None

    try:
        raw = base64.b64decode(code, validate=True)
        word = raw.decode("utf-8")
    except (binascii.Error, ValueError):
        # ValueError also covers UnicodeDecodeError and non-ASCII input
        return None

    word = word.strip().lower()
    return word or None

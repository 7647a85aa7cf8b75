"""
Decode uploaded CSV bytes to text.

Rules:
- UTF-8 (with or without BOM) is the expected input and is tried first.
- Anything else is decoded with charset-normalizer's best guess.
- If that fails too, decode as UTF-8 with replacement characters and report it.
"""

from __future__ import annotations

import logging

from charset_normalizer import from_bytes

from .rules import TARGET_ENCODING

log = logging.getLogger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"


def decode_csv_bytes(raw: bytes) -> tuple[str, str]:
    """Return (text, encoding used). Never raises."""
    if not raw:
        return "", TARGET_ENCODING

    decode_used = "utf-8-sig" if raw.startswith(UTF8_BOM) else TARGET_ENCODING
    try:
        return raw.decode(decode_used), decode_used
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding
        try:
            text = raw.decode(detected)
            log.info("input is not utf-8, decoded as %s", detected)
            return text, detected
        except (UnicodeDecodeError, LookupError):
            log.warning("decode with detected encoding %s failed", detected)

    # Last resort: decode with replacement so the pipeline can continue
    log.warning("undecodable bytes replaced")
    return raw.decode(TARGET_ENCODING, errors="replace"), TARGET_ENCODING

"""
Module: log_banner.py
Location: src/logx/
Version: 2.0.23

Header banner written once at startup, before any message traffic.
The banner is stored Base64-encoded; swap BANNER_PAYLOAD for a custom header.
"""

import base64
import binascii

from src.logx.log_exceptions import BannerDecodeError

BANNER_PAYLOAD = (
    "ICAgX18gICAgICAgICAgICBfXyAgX18KICAvIC8gIF9fXyAgIF9fIF9cIFwvIC8KIC8gLyAgLyBfIFwg"
    "LyBfYCB8XCAgLyAKLyAvX198IChfKSB8IChffCB8LyAgXCAKXF9fX18vXF9fXy8gXF9fLCAvXy9cX1wK"
    "ICAgICAgICAgICAgfF9fXy8gICAgKHYyLjAuMjMpCkxvZyBFeHByZXNzIDogbWFraW5nIGxvZ2dpbmcg"
    "ZWFzeSBhbmQgZWZmaWNpZW50IQoKICAgICAgICBUaW1lU3RhbXAgICAgICAgICAgfCAgICAgTGV2ZWwg"
    "LyBTdGFja1RyYWNlICAgIHwgICAgIE1lc3NhZ2VzCg=="
)


def decode_banner(payload: str = BANNER_PAYLOAD) -> str:
    """
    Decode a Base64 banner payload into its text.

    Raises BannerDecodeError when the payload is not valid Base64 or
    not valid UTF-8.
    """
    try:
        raw = base64.b64decode(payload, validate=True)
        text = raw.decode("utf-8")
    except (binascii.Error, ValueError) as e:
        raise BannerDecodeError(None, "Malformed banner payload", str(e)) from e

    if not text.endswith("\n"):
        text += "\n"
    return text

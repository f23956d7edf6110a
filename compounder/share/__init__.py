"""Share links and the clipboard they are published to."""

from compounder.share.clipboard import ClipboardWriter, MemoryClipboard
from compounder.share.codec import (
    decode_share_query,
    decode_share_url,
    encode_share_url,
    format_number,
)

__all__ = [
    "ClipboardWriter",
    "MemoryClipboard",
    "decode_share_query",
    "decode_share_url",
    "encode_share_url",
    "format_number",
]

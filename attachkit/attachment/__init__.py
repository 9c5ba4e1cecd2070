"""Attachment package for card and media message attachments.

This package provides the Attachment value, its content variants, and the
codec that maps attachments to and from their wire objects.

Example:
    >>> from attachkit.attachment import Attachment, decode, encode
    >>> from attachkit.models import Media
    >>> attachment = Attachment.from_media(
    ...     Media(content_type="image/png", content_url="https://example.com/a.png"),
    ...     name="a.png",
    ... )
    >>> decode(encode(attachment)) == attachment
    True

Card attachments are decode-only:
    >>> card = decode({
    ...     "contentType": "application/vnd.microsoft.card.adaptive",
    ...     "content": {"type": "AdaptiveCard", "version": "1.5"},
    ... })
    >>> card.is_encodable
    False
"""

from attachkit.attachment.codec import (
    CONTENT_DECODERS,
    AttachmentCodec,
    decode,
    decode_json,
    encode,
    encode_json,
)
from attachkit.attachment.core import (
    Attachment,
    AttachmentContent,
    CardContent,
    MediaContent,
)
from attachkit.attachment.errors import (
    AttachmentCodecError,
    AttachmentDecodeError,
    AttachmentEncodeError,
    MissingOrInvalidFieldError,
    NestedDecodeError,
    UnsupportedEncodingError,
)

__all__ = [
    "Attachment",
    "AttachmentContent",
    "CardContent",
    "MediaContent",
    "AttachmentCodec",
    "CONTENT_DECODERS",
    "decode",
    "decode_json",
    "encode",
    "encode_json",
    "AttachmentCodecError",
    "AttachmentDecodeError",
    "AttachmentEncodeError",
    "MissingOrInvalidFieldError",
    "NestedDecodeError",
    "UnsupportedEncodingError",
]

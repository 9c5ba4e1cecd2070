"""Wire encoding and decoding for attachments.

Decoding selects the content variant from the ``contentType`` discriminator.
Card payloads are nested under ``content``; any other discriminator is read
as a media payload whose fields sit beside the attachment's own fields.

Only media attachments can be encoded. Cards are decode-only and encoding
one raises UnsupportedEncodingError. So does media whose content type is the
card content type, since its output would not decode back as media.

Example:
    >>> from attachkit.attachment import decode, encode
    >>> attachment = decode({"contentType": "image/png", "contentUrl": "https://x/y.png"})
    >>> encode(attachment)
    {'contentType': 'image/png', 'contentUrl': 'https://x/y.png'}
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import urlparse

from pydantic import ValidationError

from attachkit.attachment.core import (
    Attachment,
    AttachmentContent,
    CardContent,
    MediaContent,
)
from attachkit.attachment.errors import (
    AttachmentDecodeError,
    MissingOrInvalidFieldError,
    NestedDecodeError,
    UnsupportedEncodingError,
)
from attachkit.config import CodecConfig
from attachkit.models import AdaptiveCard, Media

logger = logging.getLogger(__name__)

CONTENT_TYPE_KEY = "contentType"
CONTENT_KEY = "content"
NAME_KEY = "name"
THUMBNAIL_URL_KEY = "thumbnailUrl"

ContentDecoder = Callable[[Mapping[str, Any]], AttachmentContent]


def _decode_card(data: Mapping[str, Any]) -> CardContent:
    payload = data.get(CONTENT_KEY)
    if payload is None:
        raise NestedDecodeError(
            f"Missing '{CONTENT_KEY}' for {AdaptiveCard.__name__} attachment",
            (CONTENT_KEY,),
            AdaptiveCard.__name__,
        )
    try:
        return CardContent(AdaptiveCard.model_validate(payload, by_name=False))
    except ValidationError as e:
        raise NestedDecodeError.from_validation_error(
            e, (CONTENT_KEY,), AdaptiveCard.__name__
        ) from e


def _decode_media(data: Mapping[str, Any]) -> MediaContent:
    try:
        return MediaContent(Media.model_validate(dict(data), by_name=False))
    except ValidationError as e:
        raise MissingOrInvalidFieldError.from_validation_error(e) from e


# Discriminators without an entry here decode as media.
CONTENT_DECODERS: Mapping[str, ContentDecoder] = {
    AdaptiveCard.content_type: _decode_card,
}


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MissingOrInvalidFieldError.for_field((key,), "string")
    return value


class AttachmentCodec:
    """Encodes and decodes attachments according to a CodecConfig.

    The codec holds no mutable state and may be shared between threads.

    Args:
        config: Codec configuration. Defaults to CodecConfig().
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        self.config = config or CodecConfig()

    def decode(self, data: Mapping[str, Any]) -> Attachment:
        """Decode a wire object into an Attachment.

        Args:
            data: The attachment's keyed wire object.

        Returns:
            The decoded Attachment.

        Raises:
            MissingOrInvalidFieldError: If the discriminator, a media field,
                ``name`` or ``thumbnailUrl`` is missing or malformed.
            NestedDecodeError: If a card's nested ``content`` is rejected.
            AttachmentDecodeError: If ``data`` is not a keyed object.
        """
        if not isinstance(data, Mapping):
            raise AttachmentDecodeError(
                f"Attachment must be an object, got {type(data).__name__}"
            )

        content_type = data.get(CONTENT_TYPE_KEY)
        if not isinstance(content_type, str):
            raise MissingOrInvalidFieldError.for_field((CONTENT_TYPE_KEY,), "string")

        decoder = CONTENT_DECODERS.get(content_type)
        if decoder is None:
            logger.debug(
                "No decoder registered for content type '%s', decoding as media",
                content_type,
            )
            decoder = _decode_media
        content = decoder(data)

        name = _optional_str(data, NAME_KEY)
        thumbnail_url = self._decode_thumbnail_url(data)

        return Attachment(content=content, name=name, thumbnail_url=thumbnail_url)

    def _decode_thumbnail_url(self, data: Mapping[str, Any]) -> str | None:
        thumbnail_url = _optional_str(data, THUMBNAIL_URL_KEY)
        if thumbnail_url is not None and self.config.require_absolute_thumbnail_url:
            parsed = urlparse(thumbnail_url)
            if not parsed.scheme or not parsed.netloc:
                raise MissingOrInvalidFieldError.for_field(
                    (THUMBNAIL_URL_KEY,), "absolute URL"
                )
        return thumbnail_url

    def encode(self, attachment: Attachment) -> dict[str, Any]:
        """Encode an Attachment into a wire object.

        Absent ``name`` and ``thumbnail_url`` are omitted rather than
        written as null.

        Raises:
            UnsupportedEncodingError: If the attachment holds card content, or
                media whose content type is registered to another decoder.
        """
        content = attachment.content
        if not isinstance(content, MediaContent):
            raise UnsupportedEncodingError((CONTENT_KEY,))
        # Such media would decode back through the registered decoder, not as media.
        if content.media.content_type in CONTENT_DECODERS:
            raise UnsupportedEncodingError((CONTENT_KEY,))

        data = content.media.to_wire()
        if attachment.name is not None:
            data[NAME_KEY] = attachment.name
        if attachment.thumbnail_url is not None:
            data[THUMBNAIL_URL_KEY] = attachment.thumbnail_url
        return data

    def decode_json(self, raw: str | bytes) -> Attachment:
        """Decode an Attachment from JSON text or bytes."""
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise AttachmentDecodeError(f"Attachment is not valid JSON: {e}") from e
        return self.decode(data)

    def encode_json(self, attachment: Attachment) -> str:
        """Encode an Attachment to JSON text."""
        return json.dumps(self.encode(attachment), indent=self.config.json_indent)


_default_codec = AttachmentCodec()


def decode(data: Mapping[str, Any]) -> Attachment:
    """Decode a wire object with the default codec."""
    return _default_codec.decode(data)


def encode(attachment: Attachment) -> dict[str, Any]:
    """Encode an Attachment with the default codec."""
    return _default_codec.encode(attachment)


def decode_json(raw: str | bytes) -> Attachment:
    """Decode JSON text or bytes with the default codec."""
    return _default_codec.decode_json(raw)


def encode_json(attachment: Attachment) -> str:
    """Encode an Attachment to JSON text with the default codec."""
    return _default_codec.encode_json(attachment)

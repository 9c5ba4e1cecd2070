"""Core Attachment value for message attachments."""

from __future__ import annotations

from dataclasses import dataclass

from attachkit.models import AdaptiveCard, Media


@dataclass(frozen=True)
class CardContent:
    """Attachment content holding an Adaptive Card."""

    card: AdaptiveCard


@dataclass(frozen=True)
class MediaContent:
    """Attachment content holding a media reference."""

    media: Media


AttachmentContent = CardContent | MediaContent


@dataclass(frozen=True)
class Attachment:
    """Additional information included in a message.

    An attachment is either a media reference (audio, video, image, file)
    or a rich card.

    Attributes:
        content: The card or media content of the attachment.
        name: Name of the attachment.
        thumbnail_url: URL of a thumbnail image representing an alternative,
            smaller form of the content.

    Raises:
        TypeError: If content is not a CardContent or MediaContent.

    Example:
        >>> attachment = Attachment.from_media(
        ...     Media(content_type="image/png", content_url="https://example.com/a.png"),
        ...     name="a.png",
        ... )
    """

    content: AttachmentContent
    name: str | None = None
    thumbnail_url: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.content, (CardContent, MediaContent)):
            raise TypeError(
                f"Attachment content must be CardContent or MediaContent, "
                f"got {type(self.content).__name__}"
            )

    @property
    def is_encodable(self) -> bool:
        """Whether this attachment has a wire representation.

        Only media attachments can be encoded; cards are decode-only, as is
        media carrying the card content type.
        """
        return (
            isinstance(self.content, MediaContent)
            and self.content.media.content_type != AdaptiveCard.content_type
        )

    @classmethod
    def from_media(
        cls,
        media: Media,
        name: str | None = None,
        thumbnail_url: str | None = None,
    ) -> Attachment:
        """Create an encodable attachment wrapping a media reference."""
        return cls(content=MediaContent(media), name=name, thumbnail_url=thumbnail_url)

    @classmethod
    def from_card(
        cls,
        card: AdaptiveCard,
        name: str | None = None,
        thumbnail_url: str | None = None,
    ) -> Attachment:
        """Create an attachment wrapping an Adaptive Card."""
        return cls(content=CardContent(card), name=name, thumbnail_url=thumbnail_url)

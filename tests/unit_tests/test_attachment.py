"""Tests for the Attachment value."""

import dataclasses

import pydantic
import pytest

from attachkit.attachment import Attachment, CardContent, MediaContent
from attachkit.models import AdaptiveCard, Media


@pytest.fixture
def media() -> Media:
    return Media(content_type="image/png", content_url="https://example.com/a.png")


class TestAttachmentBasics:
    """Core attachment construction tests."""

    def test_defaults(self, media: Media):
        """Test that name and thumbnail_url default to None."""
        attachment = Attachment(content=MediaContent(media))
        assert attachment.name is None
        assert attachment.thumbnail_url is None

    def test_immutable(self, media: Media):
        """Test that attachment fields cannot be reassigned."""
        attachment = Attachment(content=MediaContent(media), name="a.png")
        with pytest.raises(dataclasses.FrozenInstanceError):
            attachment.name = "b.png"  # type: ignore[misc]

    def test_replace_creates_new_value(self, media: Media):
        """Test that changing a field produces a new attachment."""
        attachment = Attachment(content=MediaContent(media), name="a.png")
        renamed = dataclasses.replace(attachment, name="b.png")
        assert attachment.name == "a.png"
        assert renamed.name == "b.png"
        assert renamed.content == attachment.content

    @pytest.mark.parametrize("content", [None, "image/png", {"contentType": "image/png"}])
    def test_content_must_be_variant(self, content: object):
        """Test that content must be one of the two variants."""
        with pytest.raises(TypeError, match="CardContent or MediaContent"):
            Attachment(content=content)  # type: ignore[arg-type]

    def test_raw_payload_is_not_content(self, media: Media):
        """Test that a payload must be wrapped in its variant."""
        with pytest.raises(TypeError):
            Attachment(content=media)  # type: ignore[arg-type]


class TestAttachmentFactories:
    """Tests for from_media() and from_card()."""

    def test_from_media(self, media: Media):
        """Test from_media wraps the media and is encodable."""
        attachment = Attachment.from_media(media, name="a.png", thumbnail_url="https://t")
        assert attachment.content == MediaContent(media)
        assert attachment.name == "a.png"
        assert attachment.thumbnail_url == "https://t"
        assert attachment.is_encodable

    def test_from_card(self):
        """Test from_card wraps the card and is not encodable."""
        card = AdaptiveCard(version="1.5")
        attachment = Attachment.from_card(card, name="Card A")
        assert isinstance(attachment.content, CardContent)
        assert attachment.content.card is card
        assert not attachment.is_encodable

    def test_card_attachment_is_hashable(self):
        """Test that card attachments are hashable values."""
        card = AdaptiveCard.model_validate(
            {"version": "1.5", "body": [{"type": "TextBlock", "text": "Hello"}]}
        )
        attachment = Attachment.from_card(card, name="Card A")
        same = Attachment.from_card(
            AdaptiveCard.model_validate(
                {"version": "1.5", "body": [{"type": "TextBlock", "text": "Hello"}]}
            ),
            name="Card A",
        )
        assert hash(attachment) == hash(same)
        assert {attachment, same} == {attachment}

    def test_card_body_cannot_be_mutated(self):
        """Test that card body and actions cannot be changed in place."""
        card = AdaptiveCard.model_validate(
            {"version": "1.5", "body": [{"type": "TextBlock", "text": "Hello"}]}
        )
        attachment = Attachment.from_card(card)
        assert isinstance(attachment.content.card.body, tuple)
        assert isinstance(attachment.content.card.actions, tuple)
        with pytest.raises(AttributeError):
            attachment.content.card.body.append({"type": "TextBlock"})  # type: ignore[attr-defined]
        with pytest.raises(pydantic.ValidationError):
            attachment.content.card.body[0].type = "Image"  # type: ignore[misc]

    def test_media_attachment_is_hashable(self, media: Media):
        """Test that media attachments are hashable values."""
        assert hash(Attachment.from_media(media)) == hash(Attachment.from_media(media))

    def test_equality(self, media: Media):
        """Test that attachments compare by value."""
        same_media = Media(content_type="image/png", content_url="https://example.com/a.png")
        assert Attachment.from_media(media, name="a") == Attachment.from_media(same_media, name="a")
        assert Attachment.from_media(media, name="a") != Attachment.from_media(media, name="b")

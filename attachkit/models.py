import typing as t

from pydantic import BaseModel, ConfigDict, Field


class Media(BaseModel):
    """Represents a media reference carried by an attachment.

    Media fields share the attachment's top-level object, so unrelated keys
    such as ``name`` are ignored when decoding.

    Attributes:
        content_type: MIME type of the media (e.g., 'image/png')
        content_url: URL of the media content
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content_type: str = Field(alias="contentType")
    content_url: str = Field(alias="contentUrl")

    def to_wire(self) -> dict[str, t.Any]:
        """Dump the media fields using their wire names."""
        return self.model_dump(by_alias=True)


class CardElement(BaseModel):
    """An element or action inside an Adaptive Card.

    Only ``type`` is modelled; the remaining properties are kept as extras
    and are readable as attributes (e.g., ``element.text``).
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str


class AdaptiveCard(BaseModel):
    """Represents an Adaptive Card payload.

    Only the card envelope is modelled. Unknown card properties are
    preserved as extras.

    Attributes:
        type: Card type marker, always "AdaptiveCard"
        version: Adaptive Card schema version (e.g., "1.5")
        body: Card elements
        actions: Card-level actions
        schema_url: URL of the card JSON schema
        fallback_text: Text shown by hosts that cannot render the card
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    content_type: t.ClassVar[str] = "application/vnd.microsoft.card.adaptive"

    type: t.Literal["AdaptiveCard"] = "AdaptiveCard"
    version: str
    body: tuple[CardElement, ...] = ()
    actions: tuple[CardElement, ...] = ()
    schema_url: t.Optional[str] = Field(default=None, alias="$schema")
    fallback_text: t.Optional[str] = Field(default=None, alias="fallbackText")

"""Outbound objects for inline mode: query results and message contents.

An :class:`~telbot.methods.AnswerInlineQuery` carries a list of results.
Each result class fixes its ``type`` tag; cached variants reuse the tag of
their URL-based twin and differ only in referencing a ``*_file_id``.

Usage::

    from telbot.inline import InlineQueryResultArticle, InputTextMessageContent
    from telbot.methods import AnswerInlineQuery

    article = InlineQueryResultArticle(
        id="1",
        title="Echo",
        input_message_content=InputTextMessageContent(message_text=query.query),
    )
    api.send_json(AnswerInlineQuery(inline_query_id=query.id, results=[article]))
"""

from typing import List, Literal, Optional, Union

from telbot.types import (
    InlineKeyboardMarkup,
    LabeledPrice,
    MessageEntity,
    ParseMode,
    TelegramObject,
)

# ── Message contents ─────────────────────────────────────────────────────────


class InputTextMessageContent(TelegramObject):
    message_text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None


class InputLocationMessageContent(TelegramObject):
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class InputVenueMessageContent(TelegramObject):
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class InputContactMessageContent(TelegramObject):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


class InputInvoiceMessageContent(TelegramObject):
    title: str
    description: str
    payload: str
    provider_token: str
    currency: str
    prices: List[LabeledPrice]
    max_tip_amount: Optional[int] = None
    suggested_tip_amounts: Optional[List[int]] = None
    provider_data: Optional[str] = None
    photo_url: Optional[str] = None
    photo_size: Optional[int] = None
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    need_name: Optional[bool] = None
    need_phone_number: Optional[bool] = None
    need_email: Optional[bool] = None
    need_shipping_address: Optional[bool] = None
    send_phone_number_to_provider: Optional[bool] = None
    send_email_to_provider: Optional[bool] = None
    is_flexible: Optional[bool] = None


InputMessageContent = Union[
    InputTextMessageContent,
    InputLocationMessageContent,
    InputVenueMessageContent,
    InputContactMessageContent,
    InputInvoiceMessageContent,
]


# ── Results ──────────────────────────────────────────────────────────────────


class InlineQueryResultBase(TelegramObject):
    """Fields shared by every inline query result.  *id* is 1-64 bytes."""

    id: str
    reply_markup: Optional[InlineKeyboardMarkup] = None

    def with_reply_markup(self, markup: InlineKeyboardMarkup) -> "InlineQueryResultBase":
        return self.model_copy(update={"reply_markup": markup})


class _CaptionedResult(InlineQueryResultBase):
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultArticle(InlineQueryResultBase):
    type: Literal["article"] = "article"
    title: str
    input_message_content: InputMessageContent
    url: Optional[str] = None
    hide_url: Optional[bool] = None
    description: Optional[str] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultPhoto(_CaptionedResult):
    type: Literal["photo"] = "photo"
    photo_url: str
    thumb_url: str
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None


class InlineQueryResultGif(_CaptionedResult):
    type: Literal["gif"] = "gif"
    gif_url: str
    thumb_url: str
    gif_width: Optional[int] = None
    gif_height: Optional[int] = None
    gif_duration: Optional[int] = None
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None


class InlineQueryResultMpeg4Gif(_CaptionedResult):
    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    mpeg4_url: str
    thumb_url: str
    mpeg4_width: Optional[int] = None
    mpeg4_height: Optional[int] = None
    mpeg4_duration: Optional[int] = None
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None


class InlineQueryResultVideo(_CaptionedResult):
    """A video file or embedded player.

    An HTML player (e.g. YouTube) must set *input_message_content*.
    """

    type: Literal["video"] = "video"
    video_url: str
    mime_type: str
    thumb_url: str
    title: str
    video_width: Optional[int] = None
    video_height: Optional[int] = None
    video_duration: Optional[int] = None
    description: Optional[str] = None


class InlineQueryResultAudio(_CaptionedResult):
    type: Literal["audio"] = "audio"
    audio_url: str
    title: str
    performer: Optional[str] = None
    audio_duration: Optional[int] = None


class InlineQueryResultVoice(_CaptionedResult):
    type: Literal["voice"] = "voice"
    voice_url: str
    title: str
    voice_duration: Optional[int] = None


class InlineQueryResultDocument(_CaptionedResult):
    """Only ``.pdf`` and ``.zip`` files can be sent by URL."""

    type: Literal["document"] = "document"
    title: str
    document_url: str
    mime_type: str
    description: Optional[str] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultLocation(InlineQueryResultBase):
    type: Literal["location"] = "location"
    latitude: float
    longitude: float
    title: str
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultVenue(InlineQueryResultBase):
    type: Literal["venue"] = "venue"
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultContact(InlineQueryResultBase):
    type: Literal["contact"] = "contact"
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultGame(InlineQueryResultBase):
    type: Literal["game"] = "game"
    game_short_name: str


# Results referencing a file already stored on the Telegram servers.


class InlineQueryResultCachedPhoto(_CaptionedResult):
    type: Literal["photo"] = "photo"
    photo_file_id: str
    title: Optional[str] = None
    description: Optional[str] = None


class InlineQueryResultCachedGif(_CaptionedResult):
    type: Literal["gif"] = "gif"
    gif_file_id: str
    title: Optional[str] = None


class InlineQueryResultCachedMpeg4Gif(_CaptionedResult):
    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    mpeg4_file_id: str
    title: Optional[str] = None


class InlineQueryResultCachedSticker(InlineQueryResultBase):
    type: Literal["sticker"] = "sticker"
    sticker_file_id: str
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedVideo(_CaptionedResult):
    type: Literal["video"] = "video"
    video_file_id: str
    title: str
    description: Optional[str] = None


class InlineQueryResultCachedAudio(_CaptionedResult):
    type: Literal["audio"] = "audio"
    audio_file_id: str


class InlineQueryResultCachedVoice(_CaptionedResult):
    type: Literal["voice"] = "voice"
    voice_file_id: str
    title: str


class InlineQueryResultCachedDocument(_CaptionedResult):
    type: Literal["document"] = "document"
    document_file_id: str
    title: str
    description: Optional[str] = None


# Cached variants share their type tag with the URL-based ones, so the union
# is resolved by field shape rather than by a discriminator.
InlineQueryResult = Union[
    InlineQueryResultArticle,
    InlineQueryResultPhoto,
    InlineQueryResultGif,
    InlineQueryResultMpeg4Gif,
    InlineQueryResultVideo,
    InlineQueryResultAudio,
    InlineQueryResultVoice,
    InlineQueryResultDocument,
    InlineQueryResultLocation,
    InlineQueryResultVenue,
    InlineQueryResultContact,
    InlineQueryResultGame,
    InlineQueryResultCachedPhoto,
    InlineQueryResultCachedGif,
    InlineQueryResultCachedMpeg4Gif,
    InlineQueryResultCachedSticker,
    InlineQueryResultCachedVideo,
    InlineQueryResultCachedAudio,
    InlineQueryResultCachedVoice,
    InlineQueryResultCachedDocument,
]

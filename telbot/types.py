"""Pydantic models for the objects exchanged with the Telegram Bot API.

Every class mirrors an object from https://core.telegram.org/bots/api.
Inbound payloads are validated leniently (unknown keys are ignored, so a
newer Bot API does not break decoding); outbound objects such as keyboards
and input media are serialized with ``None`` fields dropped.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from telbot.files import InputFileVariant
    from telbot.methods import SendMessage, SendPhoto


class TelegramObject(BaseModel):
    """Common configuration for Bot API objects."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ── Enumerations ─────────────────────────────────────────────────────────────


class ParseMode(str, Enum):
    """Formatting options for message text and captions."""

    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"


class ChatAction(str, Enum):
    """Activity shown to the chat partner by ``sendChatAction``."""

    TYPING = "typing"
    UPLOAD_PHOTO = "upload_photo"
    RECORD_VIDEO = "record_video"
    UPLOAD_VIDEO = "upload_video"
    RECORD_VOICE = "record_voice"
    UPLOAD_VOICE = "upload_voice"
    UPLOAD_DOCUMENT = "upload_document"
    FIND_LOCATION = "find_location"
    RECORD_VIDEO_NOTE = "record_video_note"
    UPLOAD_VIDEO_NOTE = "upload_video_note"


# ── Users and chats ──────────────────────────────────────────────────────────


class User(TelegramObject):
    """A Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None


class ChatPhoto(TelegramObject):
    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class ChatPermissions(TelegramObject):
    """Actions a non-administrator member is allowed to take in a chat."""

    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class Chat(TelegramObject):
    """A private chat, group, supergroup or channel."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    photo: Optional[ChatPhoto] = None
    bio: Optional[str] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None
    pinned_message: Optional[Message] = None
    permissions: Optional[ChatPermissions] = None
    slow_mode_delay: Optional[int] = None
    sticker_set_name: Optional[str] = None
    linked_chat_id: Optional[int] = None

    def send_message(self, text: str) -> "SendMessage":
        """Build a :class:`~telbot.methods.SendMessage` addressed to this chat."""
        from telbot.methods import SendMessage

        return SendMessage(chat_id=self.id, text=text)

    def send_photo(self, photo: "InputFileVariant") -> "SendPhoto":
        """Build a :class:`~telbot.methods.SendPhoto` addressed to this chat."""
        from telbot.methods import SendPhoto

        return SendPhoto(chat_id=self.id, photo=photo)


class ChatMember(TelegramObject):
    """Information about one member of a chat.

    The Bot API splits this into one object per ``status``; the fields are
    merged here and the ones irrelevant to a status stay ``None``.
    """

    status: str
    user: User
    is_anonymous: Optional[bool] = None
    custom_title: Optional[str] = None
    until_date: Optional[int] = None
    can_be_edited: Optional[bool] = None
    can_manage_chat: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    is_member: Optional[bool] = None
    can_send_messages: Optional[bool] = None


class ChatInviteLink(TelegramObject):
    invite_link: str
    creator: User
    is_primary: bool
    is_revoked: bool
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None


class ChatMemberUpdated(TelegramObject):
    """A change in the status of a chat member."""

    chat: Chat
    from_user: User = Field(alias="from")
    date: int
    old_chat_member: ChatMember
    new_chat_member: ChatMember
    invite_link: Optional[ChatInviteLink] = None


# ── Media ────────────────────────────────────────────────────────────────────


class PhotoSize(TelegramObject):
    """One size of a photo or a file / sticker thumbnail."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None


class Animation(TelegramObject):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Audio(TelegramObject):
    file_id: str
    file_unique_id: str
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumb: Optional[PhotoSize] = None


class Document(TelegramObject):
    file_id: str
    file_unique_id: str
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Video(TelegramObject):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class VideoNote(TelegramObject):
    file_id: str
    file_unique_id: str
    length: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_size: Optional[int] = None


class Voice(TelegramObject):
    file_id: str
    file_unique_id: str
    duration: int
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Sticker(TelegramObject):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    is_animated: bool
    thumb: Optional[PhotoSize] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    file_size: Optional[int] = None


class File(TelegramObject):
    """A file ready to be downloaded.

    The content lives at ``https://api.telegram.org/file/bot<token>/<file_path>``
    for at least one hour after the ``getFile`` call.
    """

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None


class UserProfilePhotos(TelegramObject):
    total_count: int
    photos: List[List[PhotoSize]]


# ── Message contents ─────────────────────────────────────────────────────────


class MessageEntity(TelegramObject):
    """A special entity in a text message: hashtag, mention, URL, etc."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional[User] = None
    language: Optional[str] = None


class Contact(TelegramObject):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[int] = None
    vcard: Optional[str] = None


class Dice(TelegramObject):
    emoji: str
    value: int


class Location(TelegramObject):
    longitude: float
    latitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class Venue(TelegramObject):
    location: Location
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class PollOption(TelegramObject):
    text: str
    voter_count: int


class PollAnswer(TelegramObject):
    poll_id: str
    user: User
    option_ids: List[int]


class Poll(TelegramObject):
    id: str
    question: str
    options: List[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str
    allows_multiple_answers: bool
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None


class MessageId(TelegramObject):
    message_id: int


# ── Keyboards ────────────────────────────────────────────────────────────────


class InlineKeyboardButton(TelegramObject):
    """One button of an inline keyboard; exactly one optional field is used."""

    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    pay: Optional[bool] = None


class InlineKeyboardMarkup(TelegramObject):
    inline_keyboard: List[List[InlineKeyboardButton]]


class KeyboardButton(TelegramObject):
    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None


class ReplyKeyboardMarkup(TelegramObject):
    keyboard: List[List[KeyboardButton]]
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None


class ReplyKeyboardRemove(TelegramObject):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    remove_keyboard: Literal[True] = True
    selective: Optional[bool] = None


class ForceReply(TelegramObject):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    force_reply: Literal[True] = True
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None


ReplyMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply]


class BotCommand(TelegramObject):
    """A bot command shown in the client's command menu."""

    command: str
    description: str


# ── Payments ─────────────────────────────────────────────────────────────────
#
# Amounts are integers in the smallest units of the currency: US$ 1.45 is 145.


class LabeledPrice(TelegramObject):
    """A portion of the price for goods or services."""

    label: str
    amount: int


class Invoice(TelegramObject):
    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class ShippingAddress(TelegramObject):
    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramObject):
    name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    shipping_address: Optional[ShippingAddress] = None


class ShippingOption(TelegramObject):
    id: str
    title: str
    prices: List[LabeledPrice]


class SuccessfulPayment(TelegramObject):
    currency: str
    total_amount: int
    invoice_payload: str
    telegram_payment_charge_id: str
    provider_payment_charge_id: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None


class ShippingQuery(TelegramObject):
    """Sent for invoices with a flexible price once the user picks an address."""

    id: str
    from_user: User = Field(alias="from")
    invoice_payload: str
    shipping_address: ShippingAddress


class PreCheckoutQuery(TelegramObject):
    """Final confirmation asked of the bot before a payment is charged."""

    id: str
    from_user: User = Field(alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None


# ── Messages ─────────────────────────────────────────────────────────────────


class Message(TelegramObject):
    """A message in a chat.

    The Telegram ``from`` field is exposed as :attr:`from_user`.
    """

    message_id: int
    date: int
    chat: Chat
    from_user: Optional[User] = Field(None, alias="from")
    sender_chat: Optional[Chat] = None
    forward_from: Optional[User] = None
    forward_from_chat: Optional[Chat] = None
    forward_from_message_id: Optional[int] = None
    forward_signature: Optional[str] = None
    forward_sender_name: Optional[str] = None
    forward_date: Optional[int] = None
    reply_to_message: Optional[Message] = None
    via_bot: Optional[User] = None
    edit_date: Optional[int] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None
    audio: Optional[Audio] = None
    document: Optional[Document] = None
    photo: Optional[List[PhotoSize]] = None
    sticker: Optional[Sticker] = None
    video: Optional[Video] = None
    video_note: Optional[VideoNote] = None
    voice: Optional[Voice] = None
    caption: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    contact: Optional[Contact] = None
    dice: Optional[Dice] = None
    poll: Optional[Poll] = None
    venue: Optional[Venue] = None
    location: Optional[Location] = None
    invoice: Optional[Invoice] = None
    successful_payment: Optional[SuccessfulPayment] = None
    new_chat_members: Optional[List[User]] = None
    left_chat_member: Optional[User] = None
    new_chat_title: Optional[str] = None
    new_chat_photo: Optional[List[PhotoSize]] = None
    delete_chat_photo: Optional[bool] = None
    group_chat_created: Optional[bool] = None
    supergroup_chat_created: Optional[bool] = None
    channel_chat_created: Optional[bool] = None
    migrate_to_chat_id: Optional[int] = None
    migrate_from_chat_id: Optional[int] = None
    pinned_message: Optional[Message] = None
    connected_website: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None

    def text_content(self) -> Optional[str]:
        """Return the text of a text message, or the caption of a media message."""
        return self.text if self.text is not None else self.caption

    def reply_text(self, text: str) -> "SendMessage":
        """Build a :class:`~telbot.methods.SendMessage` replying to this message."""
        from telbot.methods import SendMessage

        return SendMessage(chat_id=self.chat.id, text=text, reply_to_message_id=self.message_id)


# ── Queries ──────────────────────────────────────────────────────────────────


class CallbackQuery(TelegramObject):
    """An incoming press of an inline keyboard button."""

    id: str
    from_user: User = Field(alias="from")
    chat_instance: str
    message: Optional[Message] = None
    inline_message_id: Optional[str] = None
    data: Optional[str] = None
    game_short_name: Optional[str] = None


class InlineQuery(TelegramObject):
    id: str
    from_user: User = Field(alias="from")
    query: str
    offset: str
    chat_type: Optional[str] = None
    location: Optional[Location] = None


class ChosenInlineResult(TelegramObject):
    """An inline result the user picked and sent to their chat partner."""

    result_id: str
    from_user: User = Field(alias="from")
    query: str
    location: Optional[Location] = None
    inline_message_id: Optional[str] = None


# ── Updates and webhooks ─────────────────────────────────────────────────────


class Update(TelegramObject):
    """An incoming update.  At most one of the optional fields is present."""

    update_id: int
    message: Optional[Message] = None
    edited_message: Optional[Message] = None
    channel_post: Optional[Message] = None
    edited_channel_post: Optional[Message] = None
    inline_query: Optional[InlineQuery] = None
    chosen_inline_result: Optional[ChosenInlineResult] = None
    callback_query: Optional[CallbackQuery] = None
    shipping_query: Optional[ShippingQuery] = None
    pre_checkout_query: Optional[PreCheckoutQuery] = None
    poll: Optional[Poll] = None
    poll_answer: Optional[PollAnswer] = None
    my_chat_member: Optional[ChatMemberUpdated] = None
    chat_member: Optional[ChatMemberUpdated] = None

    @property
    def kind(self) -> Optional[str]:
        """Name of the populated payload field (``"message"``, ``"poll"``, …)."""
        for name in type(self).model_fields:
            if name != "update_id" and getattr(self, name) is not None:
                return name
        return None

    def message_like(self) -> Optional[Message]:
        """Return the message carried by any message-style update."""
        return self.message or self.edited_message or self.channel_post or self.edited_channel_post


class WebhookInfo(TelegramObject):
    """Current status of the bot's webhook."""

    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


class ResponseParameters(TelegramObject):
    """Hints attached to some failed requests."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None


# ── Input media (outbound only) ──────────────────────────────────────────────


class InputMediaPhoto(TelegramObject):
    type: Literal["photo"] = "photo"
    media: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None


class InputMediaVideo(TelegramObject):
    type: Literal["video"] = "video"
    media: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None


class InputMediaAnimation(TelegramObject):
    type: Literal["animation"] = "animation"
    media: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None


class InputMediaAudio(TelegramObject):
    type: Literal["audio"] = "audio"
    media: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None


class InputMediaDocument(TelegramObject):
    type: Literal["document"] = "document"
    media: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_content_type_detection: Optional[bool] = None


InputMedia = Annotated[
    Union[InputMediaPhoto, InputMediaVideo, InputMediaAnimation, InputMediaAudio, InputMediaDocument],
    Field(discriminator="type"),
]


# Chat, ChatMemberUpdated and friends refer forward to Message.
for _model in TelegramObject.__subclasses__():
    _model.model_rebuild()
del _model

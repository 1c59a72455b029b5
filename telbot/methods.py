"""Request classes for the Telegram Bot API.

Each class corresponds to one Bot API method.  Plain requests derive from
:class:`~telbot.base.JsonMethod`; requests with a field that may hold an
upload derive from :class:`~telbot.base.FileMethod`.

Usage::

    from telbot.methods import GetMe, SendMessage, SendPhoto
    from telbot.files import InputFile

    api.send_json(SendMessage(chat_id=42, text="hello"))
    api.send_file(SendPhoto(chat_id=42, photo=InputFile.from_path("kiwi.jpg")))
"""

from typing import Any, ClassVar, List, Optional, Union

from telbot.base import FileMethod, JsonMethod
from telbot.files import InputFile, InputFileVariant
from telbot.inline import InlineQueryResult
from telbot.types import (
    BotCommand,
    Chat,
    ChatAction,
    ChatInviteLink,
    ChatMember,
    ChatPermissions,
    File,
    InlineKeyboardMarkup,
    InputMedia,
    Message,
    MessageEntity,
    MessageId,
    ParseMode,
    Poll,
    ReplyMarkup,
    Update,
    User,
    UserProfilePhotos,
    WebhookInfo,
)

ChatId = Union[int, str]


# ── Bot ──────────────────────────────────────────────────────────────────────


class GetMe(JsonMethod):
    """Test the bot's token; returns the bot's own :class:`User`."""

    api_method: ClassVar[str] = "getMe"
    result_type: ClassVar[Any] = User


class LogOut(JsonMethod):
    """Log out from the cloud Bot API server before moving to a local one."""

    api_method: ClassVar[str] = "logOut"
    result_type: ClassVar[Any] = bool


class Close(JsonMethod):
    """Close the bot instance before moving it between local servers."""

    api_method: ClassVar[str] = "close"
    result_type: ClassVar[Any] = bool


class SetMyCommands(JsonMethod):
    api_method: ClassVar[str] = "setMyCommands"
    result_type: ClassVar[Any] = bool

    commands: List[BotCommand]
    language_code: Optional[str] = None


class GetMyCommands(JsonMethod):
    api_method: ClassVar[str] = "getMyCommands"
    result_type: ClassVar[Any] = List[BotCommand]

    language_code: Optional[str] = None


class DeleteMyCommands(JsonMethod):
    api_method: ClassVar[str] = "deleteMyCommands"
    result_type: ClassVar[Any] = bool

    language_code: Optional[str] = None


# ── Updates and webhooks ─────────────────────────────────────────────────────


class GetUpdates(JsonMethod):
    """Receive incoming updates by long polling."""

    api_method: ClassVar[str] = "getUpdates"
    result_type: ClassVar[Any] = List[Update]

    offset: Optional[int] = None
    limit: Optional[int] = None
    timeout: Optional[int] = None
    allowed_updates: Optional[List[str]] = None

    def with_offset(self, offset: int) -> "GetUpdates":
        return self.model_copy(update={"offset": offset})

    def with_limit(self, limit: int) -> "GetUpdates":
        return self.model_copy(update={"limit": limit})

    def with_timeout(self, timeout: int) -> "GetUpdates":
        return self.model_copy(update={"timeout": timeout})


class SetWebhook(FileMethod):
    """Register an HTTPS URL to receive updates.

    *certificate* uploads a self-signed public key; it is the only upload
    field, so the request is multipart only when a certificate is given.
    """

    api_method: ClassVar[str] = "setWebhook"
    result_type: ClassVar[Any] = bool

    url: str
    certificate: Optional[InputFile] = None
    ip_address: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None
    drop_pending_updates: Optional[bool] = None


class DeleteWebhook(JsonMethod):
    api_method: ClassVar[str] = "deleteWebhook"
    result_type: ClassVar[Any] = bool

    drop_pending_updates: Optional[bool] = None


class GetWebhookInfo(JsonMethod):
    api_method: ClassVar[str] = "getWebhookInfo"
    result_type: ClassVar[Any] = WebhookInfo


# ── Messages ─────────────────────────────────────────────────────────────────


class SendMessage(JsonMethod):
    """Send a text message."""

    api_method: ClassVar[str] = "sendMessage"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None

    def reply_to(self, message_id: int) -> "SendMessage":
        return self.model_copy(update={"reply_to_message_id": message_id})

    def with_parse_mode(self, parse_mode: ParseMode) -> "SendMessage":
        return self.model_copy(update={"parse_mode": parse_mode})

    def with_reply_markup(self, markup: ReplyMarkup) -> "SendMessage":
        return self.model_copy(update={"reply_markup": markup})


class ForwardMessage(JsonMethod):
    api_method: ClassVar[str] = "forwardMessage"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int
    disable_notification: Optional[bool] = None


class CopyMessage(JsonMethod):
    """Copy a message without a link to the original; returns its new id."""

    api_method: ClassVar[str] = "copyMessage"
    result_type: ClassVar[Any] = MessageId

    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendLocation(JsonMethod):
    api_method: ClassVar[str] = "sendLocation"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendVenue(JsonMethod):
    api_method: ClassVar[str] = "sendVenue"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendContact(JsonMethod):
    api_method: ClassVar[str] = "sendContact"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendPoll(JsonMethod):
    api_method: ClassVar[str] = "sendPoll"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    question: str
    options: List[str]
    is_anonymous: Optional[bool] = None
    type: Optional[str] = None
    allows_multiple_answers: Optional[bool] = None
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None
    is_closed: Optional[bool] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendDice(JsonMethod):
    api_method: ClassVar[str] = "sendDice"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    emoji: Optional[str] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendChatAction(JsonMethod):
    """Show a "typing…"-style status for five seconds."""

    api_method: ClassVar[str] = "sendChatAction"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    action: ChatAction


class SendMediaGroup(JsonMethod):
    """Send 2-10 photos/videos/documents/audios as an album.

    Media are referenced by file id or URL.
    """

    api_method: ClassVar[str] = "sendMediaGroup"
    result_type: ClassVar[Any] = List[Message]

    chat_id: ChatId
    media: List[InputMedia]
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None


class EditMessageText(JsonMethod):
    """Edit a text message; returns ``True`` instead of a message for inline messages."""

    api_method: ClassVar[str] = "editMessageText"
    result_type: ClassVar[Any] = Union[Message, bool]

    text: str
    chat_id: Optional[ChatId] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageCaption(JsonMethod):
    api_method: ClassVar[str] = "editMessageCaption"
    result_type: ClassVar[Any] = Union[Message, bool]

    chat_id: Optional[ChatId] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageReplyMarkup(JsonMethod):
    api_method: ClassVar[str] = "editMessageReplyMarkup"
    result_type: ClassVar[Any] = Union[Message, bool]

    chat_id: Optional[ChatId] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class StopPoll(JsonMethod):
    api_method: ClassVar[str] = "stopPoll"
    result_type: ClassVar[Any] = Poll

    chat_id: ChatId
    message_id: int
    reply_markup: Optional[InlineKeyboardMarkup] = None


class DeleteMessage(JsonMethod):
    api_method: ClassVar[str] = "deleteMessage"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    message_id: int


# ── Uploads ──────────────────────────────────────────────────────────────────
#
# Each media field accepts an InputFile (uploaded as a multipart part) or a
# str holding a file_id / HTTP URL (sent as an ordinary form field).


class SendPhoto(FileMethod):
    api_method: ClassVar[str] = "sendPhoto"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    photo: InputFileVariant
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None

    def reply_to(self, message_id: int) -> "SendPhoto":
        return self.model_copy(update={"reply_to_message_id": message_id})


class SendAudio(FileMethod):
    api_method: ClassVar[str] = "sendAudio"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    audio: InputFileVariant
    thumb: Optional[InputFileVariant] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendDocument(FileMethod):
    api_method: ClassVar[str] = "sendDocument"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    document: InputFileVariant
    thumb: Optional[InputFileVariant] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    disable_content_type_detection: Optional[bool] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendVideo(FileMethod):
    api_method: ClassVar[str] = "sendVideo"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    video: InputFileVariant
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumb: Optional[InputFileVariant] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    supports_streaming: Optional[bool] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendAnimation(FileMethod):
    api_method: ClassVar[str] = "sendAnimation"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    animation: InputFileVariant
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumb: Optional[InputFileVariant] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendVoice(FileMethod):
    api_method: ClassVar[str] = "sendVoice"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    voice: InputFileVariant
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    duration: Optional[int] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendVideoNote(FileMethod):
    api_method: ClassVar[str] = "sendVideoNote"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    video_note: InputFileVariant
    duration: Optional[int] = None
    length: Optional[int] = None
    thumb: Optional[InputFileVariant] = None
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendSticker(FileMethod):
    api_method: ClassVar[str] = "sendSticker"
    result_type: ClassVar[Any] = Message

    chat_id: ChatId
    sticker: InputFileVariant
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    reply_markup: Optional[ReplyMarkup] = None


class SetChatPhoto(FileMethod):
    """Set a new profile photo for a group; the photo must be uploaded."""

    api_method: ClassVar[str] = "setChatPhoto"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    photo: InputFile


# ── Files and users ──────────────────────────────────────────────────────────


class GetFile(JsonMethod):
    """Resolve a file id to a downloadable :class:`~telbot.types.File`."""

    api_method: ClassVar[str] = "getFile"
    result_type: ClassVar[Any] = File

    file_id: str


class GetUserProfilePhotos(JsonMethod):
    api_method: ClassVar[str] = "getUserProfilePhotos"
    result_type: ClassVar[Any] = UserProfilePhotos

    user_id: int
    offset: Optional[int] = None
    limit: Optional[int] = None


# ── Chats ────────────────────────────────────────────────────────────────────


class BanChatMember(JsonMethod):
    api_method: ClassVar[str] = "banChatMember"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    user_id: int
    until_date: Optional[int] = None
    revoke_messages: Optional[bool] = None


class UnbanChatMember(JsonMethod):
    api_method: ClassVar[str] = "unbanChatMember"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    user_id: int
    only_if_banned: Optional[bool] = None


class RestrictChatMember(JsonMethod):
    api_method: ClassVar[str] = "restrictChatMember"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    user_id: int
    permissions: ChatPermissions
    until_date: Optional[int] = None


class PromoteChatMember(JsonMethod):
    """Grant or revoke administrator rights; pass no rights to demote."""

    api_method: ClassVar[str] = "promoteChatMember"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    user_id: int
    is_anonymous: Optional[bool] = None
    can_manage_chat: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_manage_voice_chats: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class SetChatAdministratorCustomTitle(JsonMethod):
    api_method: ClassVar[str] = "setChatAdministratorCustomTitle"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    user_id: int
    custom_title: str


class SetChatPermissions(JsonMethod):
    """Set the default permissions of every non-administrator member."""

    api_method: ClassVar[str] = "setChatPermissions"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    permissions: ChatPermissions


class ApproveChatJoinRequest(JsonMethod):
    api_method: ClassVar[str] = "approveChatJoinRequest"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    user_id: int


class DeclineChatJoinRequest(JsonMethod):
    api_method: ClassVar[str] = "declineChatJoinRequest"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    user_id: int


class GetChat(JsonMethod):
    api_method: ClassVar[str] = "getChat"
    result_type: ClassVar[Any] = Chat

    chat_id: ChatId


class GetChatAdministrators(JsonMethod):
    api_method: ClassVar[str] = "getChatAdministrators"
    result_type: ClassVar[Any] = List[ChatMember]

    chat_id: ChatId


class GetChatMemberCount(JsonMethod):
    api_method: ClassVar[str] = "getChatMemberCount"
    result_type: ClassVar[Any] = int

    chat_id: ChatId


class GetChatMember(JsonMethod):
    api_method: ClassVar[str] = "getChatMember"
    result_type: ClassVar[Any] = ChatMember

    chat_id: ChatId
    user_id: int


class LeaveChat(JsonMethod):
    api_method: ClassVar[str] = "leaveChat"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId


class DeleteChatPhoto(JsonMethod):
    api_method: ClassVar[str] = "deleteChatPhoto"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId


class SetChatTitle(JsonMethod):
    api_method: ClassVar[str] = "setChatTitle"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    title: str


class SetChatDescription(JsonMethod):
    api_method: ClassVar[str] = "setChatDescription"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    description: Optional[str] = None


class PinChatMessage(JsonMethod):
    api_method: ClassVar[str] = "pinChatMessage"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    message_id: int
    disable_notification: Optional[bool] = None


class UnpinChatMessage(JsonMethod):
    api_method: ClassVar[str] = "unpinChatMessage"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    message_id: Optional[int] = None


class UnpinAllChatMessages(JsonMethod):
    api_method: ClassVar[str] = "unpinAllChatMessages"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId


class ExportChatInviteLink(JsonMethod):
    """Generate a new primary invite link; returns the link as a string."""

    api_method: ClassVar[str] = "exportChatInviteLink"
    result_type: ClassVar[Any] = str

    chat_id: ChatId


class CreateChatInviteLink(JsonMethod):
    """Create an additional invite link; *expire_date* is a Unix timestamp."""

    api_method: ClassVar[str] = "createChatInviteLink"
    result_type: ClassVar[Any] = ChatInviteLink

    chat_id: ChatId
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    creates_join_request: Optional[bool] = None


class EditChatInviteLink(JsonMethod):
    api_method: ClassVar[str] = "editChatInviteLink"
    result_type: ClassVar[Any] = ChatInviteLink

    chat_id: ChatId
    invite_link: str
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    creates_join_request: Optional[bool] = None


class RevokeChatInviteLink(JsonMethod):
    """Revoke a link created by the bot; a revoked primary link is replaced."""

    api_method: ClassVar[str] = "revokeChatInviteLink"
    result_type: ClassVar[Any] = ChatInviteLink

    chat_id: ChatId
    invite_link: str


class SetChatStickerSet(JsonMethod):
    """Set the group sticker set of a supergroup."""

    api_method: ClassVar[str] = "setChatStickerSet"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId
    sticker_set_name: str


class DeleteChatStickerSet(JsonMethod):
    api_method: ClassVar[str] = "deleteChatStickerSet"
    result_type: ClassVar[Any] = bool

    chat_id: ChatId


# ── Queries ──────────────────────────────────────────────────────────────────


class AnswerCallbackQuery(JsonMethod):
    """Acknowledge an inline button press so the client stops its spinner."""

    api_method: ClassVar[str] = "answerCallbackQuery"
    result_type: ClassVar[Any] = bool

    callback_query_id: str
    text: Optional[str] = None
    show_alert: Optional[bool] = None
    url: Optional[str] = None
    cache_time: Optional[int] = None


class AnswerInlineQuery(JsonMethod):
    """Send up to 50 results for an inline query."""

    api_method: ClassVar[str] = "answerInlineQuery"
    result_type: ClassVar[Any] = bool

    inline_query_id: str
    results: List[InlineQueryResult]
    cache_time: Optional[int] = None
    is_personal: Optional[bool] = None
    next_offset: Optional[str] = None
    switch_pm_text: Optional[str] = None
    switch_pm_parameter: Optional[str] = None

    def with_cache_time(self, cache_time: int) -> "AnswerInlineQuery":
        return self.model_copy(update={"cache_time": cache_time})

    def personal(self) -> "AnswerInlineQuery":
        return self.model_copy(update={"is_personal": True})

    def with_next_offset(self, offset: str) -> "AnswerInlineQuery":
        return self.model_copy(update={"next_offset": offset})

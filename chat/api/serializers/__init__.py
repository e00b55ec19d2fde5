from .chat_serializers import (
    ChatCreatedResponseSerializer,
    ChatCreateSerializer,
    ChatKeySerializer,
    ChatMessageSerializer,
    ChatProductSerializer,
    ChatReadSerializer,
    ChatResponseSerializer,
    ChatUnreadSerializer,
    ChatUserSerializer,
)

__all__ = [
    "ChatCreatedResponseSerializer",
    "ChatCreateSerializer",
    "ChatKeySerializer",
    "ChatMessageSerializer",
    "ChatProductSerializer",
    "ChatReadSerializer",
    "ChatResponseSerializer",
    "ChatUnreadSerializer",
    "ChatUserSerializer",
]

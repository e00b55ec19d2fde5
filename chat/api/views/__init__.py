from .chat_views import ChatViewSet

__all__ = ["ChatViewSet"]

import functools
import logging

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied, ValidationError
from drf_spectacular.utils import extend_schema
from pymongo.errors import PyMongoError
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from chat.api.serializers import (
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
from infrastructure.container import container
from infrastructure.database import to_json_safe


logger = logging.getLogger(__name__)


def chat_response(message, data=None, http_status=status.HTTP_200_OK):
    return Response({"message": message, "data": to_json_safe(data)}, status=http_status)


def handle_chat_errors(view):
    """Map ChatService exceptions onto HTTP responses."""

    @functools.wraps(view)
    def wrapper(self, request, *args, **kwargs):
        try:
            return view(self, request, *args, **kwargs)
        except ObjectDoesNotExist as e:
            return chat_response(str(e), None, status.HTTP_404_NOT_FOUND)
        except (PermissionDenied, ValidationError) as e:
            message = e.messages[0] if isinstance(e, ValidationError) else str(e)
            return chat_response(message, None, status.HTTP_400_BAD_REQUEST)
        except PyMongoError as e:
            logger.error(f"Chat storage error in {view.__name__}: {e}", exc_info=True)
            return chat_response("Service Unavailable", None, status.HTTP_503_SERVICE_UNAVAILABLE)

    return wrapper


def invalid(serializer):
    return Response(
        {"message": "Invalid request", "data": None, "errors": serializer.errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


class ChatViewSet(viewsets.ViewSet):
    """
    Chats between buyers and sellers.

    Lookups take ids in the request body; only fetching a chat uses the URL.
    """

    lookup_value_regex = "[0-9a-zA-Z]+"

    def get_service(self):
        return container.chat_service()

    @extend_schema(
        operation_id="chats_retrieve",
        summary="Get a chat with its messages",
        responses={200: ChatResponseSerializer, 404: ChatResponseSerializer},
        tags=["Chat"],
    )
    @handle_chat_errors
    def retrieve(self, request, pk=None):
        return chat_response("Chat fetched successfully", self.get_service().get_chat(pk))

    @extend_schema(
        operation_id="chats_create",
        summary="Start a chat about a product",
        description="Returns the existing chat for the same product, buyer and seller if there is one.",
        request=ChatCreateSerializer,
        responses={
            201: ChatCreatedResponseSerializer,
            200: ChatCreatedResponseSerializer,
            400: ChatResponseSerializer,
        },
        tags=["Chat"],
    )
    @handle_chat_errors
    def create(self, request):
        serializer = ChatCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid(serializer)

        data = serializer.validated_data
        chat_id, is_new = self.get_service().create_chat(
            data["product"], data["buyer"], data["seller"], data.get("text") or None
        )
        return Response(
            {"chatId": str(chat_id), "isNew": is_new},
            status=status.HTTP_201_CREATED if is_new else status.HTTP_200_OK,
        )

    @extend_schema(
        operation_id="chats_lookup",
        summary="Find the chat id for a product, buyer and seller",
        request=ChatKeySerializer,
        responses={200: ChatResponseSerializer, 404: ChatResponseSerializer},
        tags=["Chat"],
    )
    @action(detail=False, methods=["post"])
    @handle_chat_errors
    def lookup(self, request):
        serializer = ChatKeySerializer(data=request.data)
        if not serializer.is_valid():
            return invalid(serializer)

        data = serializer.validated_data
        chat_id = self.get_service().get_chat_id(data["product"], data["buyer"], data["seller"])
        return chat_response("Chat found", {"chatId": chat_id})

    @extend_schema(
        operation_id="chats_update",
        summary="Send a message",
        request=ChatMessageSerializer,
        responses={200: ChatResponseSerializer, 400: ChatResponseSerializer, 404: ChatResponseSerializer},
        tags=["Chat"],
    )
    @action(detail=False, methods=["post"], url_path="update")
    @handle_chat_errors
    def update_chat(self, request):
        serializer = ChatMessageSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid(serializer)

        data = serializer.validated_data
        message = self.get_service().add_message(data["chatId"], data["sender"], data["text"])
        return chat_response("Chat updated", message)

    @extend_schema(
        operation_id="chats_mark_read",
        summary="Mark a chat as read for a user",
        request=ChatReadSerializer,
        responses={200: ChatResponseSerializer, 404: ChatResponseSerializer},
        tags=["Chat"],
    )
    @action(detail=False, methods=["post"], url_path="mark-read")
    @handle_chat_errors
    def mark_read(self, request):
        serializer = ChatReadSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid(serializer)

        data = serializer.validated_data
        self.get_service().mark_read(data["chatId"], data["userId"])
        return chat_response("Chat marked as read", {"unread": 0})

    @extend_schema(
        operation_id="chats_for_user",
        summary="Chats of a user, most recent first",
        request=ChatUserSerializer,
        responses={200: ChatResponseSerializer},
        tags=["Chat"],
    )
    @action(detail=False, methods=["post"], url_path="for-user")
    @handle_chat_errors
    def for_user(self, request):
        serializer = ChatUserSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid(serializer)

        chats = self.get_service().chats_for_user(serializer.validated_data["userId"])
        return chat_response("Chats fetched successfully", chats)

    @extend_schema(
        operation_id="chats_unread_count",
        summary="Total unread messages of a user",
        request=ChatUserSerializer,
        responses={200: ChatResponseSerializer},
        tags=["Chat"],
    )
    @action(detail=False, methods=["post"], url_path="unread-count")
    @handle_chat_errors
    def unread_count(self, request):
        serializer = ChatUserSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid(serializer)

        count = self.get_service().unread_count(serializer.validated_data["userId"])
        return chat_response("Unread count fetched", {"unread": count})

    @extend_schema(
        operation_id="chats_update_unread",
        summary="Set the unread count of a user in a chat",
        request=ChatUnreadSerializer,
        responses={200: ChatResponseSerializer, 400: ChatResponseSerializer, 404: ChatResponseSerializer},
        tags=["Chat"],
    )
    @action(detail=False, methods=["post"], url_path="update-unread")
    @handle_chat_errors
    def update_unread(self, request):
        serializer = ChatUnreadSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid(serializer)

        data = serializer.validated_data
        count = self.get_service().update_unread(data["chatId"], data["userId"], data["count"])
        return chat_response("Unread count updated", {"unread": count})

    @extend_schema(
        operation_id="chats_for_product",
        summary="Chats about a product, most recent first",
        request=ChatProductSerializer,
        responses={200: ChatResponseSerializer},
        tags=["Chat"],
    )
    @action(detail=False, methods=["post"], url_path="for-product")
    @handle_chat_errors
    def for_product(self, request):
        serializer = ChatProductSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid(serializer)

        chats = self.get_service().chats_for_product(serializer.validated_data["product"])
        return chat_response("Chats fetched successfully", chats)

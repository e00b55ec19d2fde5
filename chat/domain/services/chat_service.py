import logging
from datetime import datetime, timezone

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied, ValidationError
from pymongo import DESCENDING, ReturnDocument

from chat.domain.documents import build_chat_document, build_message
from chat.infra.observability.metrics import chat_messages_total, chats_created_total
from infrastructure.database import CHATS, parse_object_id


logger = logging.getLogger(__name__)

# Fields identifying a chat, unique together
CHAT_KEY = ("product", "buyer", "seller")
# Chat listings carry only the most recent message
LAST_MESSAGE_PROJECTION = {"messages": {"$slice": -1}}


class ChatService:
    """
    Chats between a buyer and a seller about a product.

    Missing chats raise ObjectDoesNotExist and users outside a chat raise
    PermissionDenied. Database errors propagate to the caller.
    """

    def __init__(self, db):
        self.collection = db[CHATS]

    def get_chat(self, chat_id):
        object_id = parse_object_id(chat_id)
        chat = self.collection.find_one({"_id": object_id}) if object_id else None
        if chat is None:
            raise ObjectDoesNotExist("Chat not found")
        return chat

    def find_chat(self, product, buyer, seller):
        return self.collection.find_one({"product": product, "buyer": buyer, "seller": seller})

    def get_chat_id(self, product, buyer, seller):
        chat = self.find_chat(product, buyer, seller)
        if chat is None:
            raise ObjectDoesNotExist("Chat not found")
        return chat["_id"]

    def create_chat(self, product, buyer, seller, text=None):
        """
        Return ``(chat_id, is_new)`` for the chat about ``product``.

        An existing chat for the same product, buyer and seller is reused; a
        first message given for an existing chat is appended to it.
        """
        if buyer == seller:
            raise ValidationError("You cannot start a chat with yourself")

        key = {"product": product, "buyer": buyer, "seller": seller}
        document = build_chat_document(product, buyer, seller, text)
        existing = self.collection.find_one_and_update(
            key,
            {"$setOnInsert": {name: value for name, value in document.items() if name not in CHAT_KEY}},
            projection={"_id": 1},
            upsert=True,
            return_document=ReturnDocument.BEFORE,
        )
        if existing is not None:
            if text:
                self.add_message(existing["_id"], buyer, text)
            return existing["_id"], False

        chat_id = self.find_chat(product, buyer, seller)["_id"]
        chats_created_total.inc()
        if text:
            chat_messages_total.inc()
        logger.info(f"Created chat {chat_id} for product {product}")
        return chat_id, True

    def add_message(self, chat_id, sender, text):
        """
        Append a message and bump the unread count of every other participant.
        """
        chat = self._participant_chat(chat_id, sender)

        now = datetime.now(timezone.utc)
        message = build_message(sender, text, now)
        unread = {f"unread.{user}": 1 for user in chat["participants"] if user != sender}

        update = {"$push": {"messages": message}, "$set": {"lastUpdated": now}}
        if unread:
            update["$inc"] = unread
        self.collection.update_one({"_id": chat["_id"]}, update)
        chat_messages_total.inc()
        return message

    def _participant_chat(self, chat_id, user_id):
        chat = self.get_chat(chat_id)
        if user_id not in chat["participants"]:
            raise PermissionDenied("User is not a participant of this chat")
        return chat

    def mark_read(self, chat_id, user_id):
        return self.update_unread(chat_id, user_id, 0)

    def update_unread(self, chat_id, user_id, count):
        if count < 0:
            raise ValidationError("Unread count must not be negative")
        chat = self._participant_chat(chat_id, user_id)
        self.collection.update_one({"_id": chat["_id"]}, {"$set": {f"unread.{user_id}": count}})
        return count

    def chats_for_user(self, user_id):
        """Chats the user takes part in, most recent activity first."""
        cursor = self.collection.find({"participants": user_id}, LAST_MESSAGE_PROJECTION)
        return list(cursor.sort("lastUpdated", DESCENDING))

    def unread_count(self, user_id):
        chats = self.collection.find({"participants": user_id}, {"unread": 1})
        return sum((chat.get("unread") or {}).get(user_id, 0) for chat in chats)

    def chats_for_product(self, product):
        cursor = self.collection.find({"product": product}, LAST_MESSAGE_PROJECTION)
        return list(cursor.sort("lastUpdated", DESCENDING))

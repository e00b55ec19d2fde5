"""Chat document construction."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


def build_message(sender: str, text: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    return {"sender": sender, "text": text, "created": now or datetime.now(timezone.utc)}


def build_chat_document(
    product: str,
    buyer: str,
    seller: str,
    text: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    New chat between a buyer and a seller about a product.

    When ``text`` is given it becomes the first message, sent by the buyer,
    and counts as unread for the seller.
    """
    now = now or datetime.now(timezone.utc)
    messages = [build_message(buyer, text, now)] if text else []
    return {
        "product": product,
        "buyer": buyer,
        "seller": seller,
        "participants": [buyer, seller],
        "messages": messages,
        "unread": {buyer: 0, seller: len(messages)},
        "created": now,
        "lastUpdated": now,
    }

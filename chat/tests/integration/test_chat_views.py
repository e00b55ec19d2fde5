from unittest.mock import patch

import pytest
from bson import ObjectId
from django.urls import reverse
from pymongo.errors import ServerSelectionTimeoutError
from rest_framework import status
from rest_framework.test import APIClient


PRODUCT = str(ObjectId())


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def chat_id(api_client, wired_container):
    response = api_client.post(
        reverse("chat:chat-list"),
        {"product": PRODUCT, "buyer": "buyer1", "seller": "seller1", "text": "Is this available?"},
        format="json",
    )
    return response.data["chatId"]


@pytest.mark.integration
@pytest.mark.usefixtures("wired_container")
class TestChatViews:
    def test_create_chat(self, api_client, mongo_db):
        response = api_client.post(
            reverse("chat:chat-list"), {"product": PRODUCT, "buyer": "buyer1", "seller": "seller1"}, format="json"
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["isNew"] is True
        assert mongo_db["chats"].count_documents({}) == 1

    def test_create_existing_chat(self, api_client, chat_id):
        response = api_client.post(
            reverse("chat:chat-list"), {"product": PRODUCT, "buyer": "buyer1", "seller": "seller1"}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"chatId": chat_id, "isNew": False}

    def test_create_chat_with_yourself(self, api_client):
        response = api_client.post(
            reverse("chat:chat-list"), {"product": PRODUCT, "buyer": "seller1", "seller": "seller1"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_chat_rejects_bad_ids(self, api_client):
        response = api_client.post(
            reverse("chat:chat-list"), {"product": PRODUCT, "buyer": "a.b", "seller": "seller1"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "buyer" in response.data["errors"]

    def test_retrieve_chat(self, api_client, chat_id):
        response = api_client.get(reverse("chat:chat-detail", kwargs={"pk": chat_id}))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["data"]["_id"] == chat_id
        assert response.data["data"]["messages"][0]["text"] == "Is this available?"

    def test_retrieve_missing_chat(self, api_client):
        response = api_client.get(reverse("chat:chat-detail", kwargs={"pk": str(ObjectId())}))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["data"] is None

    def test_lookup(self, api_client, chat_id):
        url = reverse("chat:chat-lookup")

        found = api_client.post(url, {"product": PRODUCT, "buyer": "buyer1", "seller": "seller1"}, format="json")
        missing = api_client.post(url, {"product": PRODUCT, "buyer": "buyer9", "seller": "seller1"}, format="json")

        assert found.status_code == status.HTTP_200_OK
        assert found.data["data"] == {"chatId": chat_id}
        assert missing.status_code == status.HTTP_404_NOT_FOUND

    def test_send_message(self, api_client, mongo_db, chat_id):
        response = api_client.post(
            reverse("chat:chat-update-chat"), {"chatId": chat_id, "sender": "seller1", "text": "Yes"}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["data"]["text"] == "Yes"
        chat = mongo_db["chats"].find_one({"_id": ObjectId(chat_id)})
        assert chat["unread"] == {"buyer1": 1, "seller1": 1}

    def test_send_message_non_participant(self, api_client, chat_id):
        response = api_client.post(
            reverse("chat:chat-update-chat"), {"chatId": chat_id, "sender": "intruder", "text": "Hi"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_send_message_unknown_chat(self, api_client):
        response = api_client.post(
            reverse("chat:chat-update-chat"),
            {"chatId": str(ObjectId()), "sender": "seller1", "text": "Hi"},
            format="json",
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unread_flow(self, api_client, chat_id):
        count_url = reverse("chat:chat-unread-count")

        before = api_client.post(count_url, {"userId": "seller1"}, format="json")
        api_client.post(reverse("chat:chat-mark-read"), {"chatId": chat_id, "userId": "seller1"}, format="json")
        after = api_client.post(count_url, {"userId": "seller1"}, format="json")

        assert before.data["data"] == {"unread": 1}
        assert after.data["data"] == {"unread": 0}

    def test_update_unread(self, api_client, chat_id):
        url = reverse("chat:chat-update-unread")

        response = api_client.post(url, {"chatId": chat_id, "userId": "buyer1", "count": 3}, format="json")
        negative = api_client.post(url, {"chatId": chat_id, "userId": "buyer1", "count": -1}, format="json")
        missing = api_client.post(url, {"chatId": str(ObjectId()), "userId": "buyer1", "count": 1}, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["data"] == {"unread": 3}
        assert negative.status_code == status.HTTP_400_BAD_REQUEST
        assert missing.status_code == status.HTTP_404_NOT_FOUND

    def test_chats_for_user_and_product(self, api_client, chat_id):
        for_user = api_client.post(reverse("chat:chat-for-user"), {"userId": "buyer1"}, format="json")
        for_product = api_client.post(reverse("chat:chat-for-product"), {"product": PRODUCT}, format="json")
        nothing = api_client.post(reverse("chat:chat-for-product"), {"product": str(ObjectId())}, format="json")

        assert [chat["_id"] for chat in for_user.data["data"]] == [chat_id]
        assert [chat["_id"] for chat in for_product.data["data"]] == [chat_id]
        assert nothing.data["data"] == []

    def test_database_unavailable(self, api_client, wired_container):
        service = wired_container.chat_service()
        with patch.object(service.collection, "find", side_effect=ServerSelectionTimeoutError("down")):
            response = api_client.post(reverse("chat:chat-for-user"), {"userId": "buyer1"}, format="json")

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.data == {"message": "Service Unavailable", "data": None}

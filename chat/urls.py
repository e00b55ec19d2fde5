from django.urls import include, path
from rest_framework.routers import DefaultRouter

from chat.api.views import ChatViewSet


app_name = "chat"

router = DefaultRouter()
router.register(r"chats", ChatViewSet, basename="chat")

urlpatterns = [
    path("", include(router.urls)),
]

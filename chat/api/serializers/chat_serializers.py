from rest_framework import serializers


# Users and products are referenced by the ids the owning services issue
ID_PATTERN = r"^[\w-]+$"


class ChatKeySerializer(serializers.Serializer):
    product = serializers.RegexField(ID_PATTERN, max_length=64)
    buyer = serializers.RegexField(ID_PATTERN, max_length=64)
    seller = serializers.RegexField(ID_PATTERN, max_length=64)


class ChatCreateSerializer(ChatKeySerializer):
    text = serializers.CharField(required=False, allow_blank=True, max_length=4000)


class ChatMessageSerializer(serializers.Serializer):
    chatId = serializers.CharField()
    sender = serializers.RegexField(ID_PATTERN, max_length=64)
    text = serializers.CharField(max_length=4000)


class ChatUserSerializer(serializers.Serializer):
    userId = serializers.RegexField(ID_PATTERN, max_length=64)


class ChatReadSerializer(ChatUserSerializer):
    chatId = serializers.CharField()


class ChatUnreadSerializer(ChatReadSerializer):
    count = serializers.IntegerField(min_value=0)


class ChatProductSerializer(serializers.Serializer):
    product = serializers.RegexField(ID_PATTERN, max_length=64)


class ChatCreatedResponseSerializer(serializers.Serializer):
    chatId = serializers.CharField()
    isNew = serializers.BooleanField()


class ChatResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    data = serializers.JSONField(allow_null=True)

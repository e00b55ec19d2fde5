import json

from rest_framework import serializers

from marketplace.catalog.domain.category_config import PRODUCT_CATEGORIES, is_known_state


class FlexibleJSONField(serializers.Field):
    """Accepts either decoded JSON or a JSON string, as multipart form clients send it"""

    def __init__(self, *args, expected_type=list, **kwargs):
        self.expected_type = expected_type
        super().__init__(*args, **kwargs)

    def to_internal_value(self, data):
        if isinstance(data, str):
            try:
                data = json.loads(data) if data.strip() else self.expected_type()
            except (json.JSONDecodeError, ValueError):
                raise serializers.ValidationError("Value must be valid JSON")
        elif data is None:
            data = self.expected_type()

        if not isinstance(data, self.expected_type):
            raise serializers.ValidationError(f"Expected a {self.expected_type.__name__}")
        return data

    def to_representation(self, value):
        return value if value is not None else self.expected_type()


class ProductCreateSerializer(serializers.Serializer):
    """Validates the create-product form"""

    name = serializers.CharField(max_length=255)
    price = serializers.FloatField(min_value=0)
    description = serializers.CharField()
    category = serializers.ChoiceField(choices=PRODUCT_CATEGORIES)
    seller = serializers.CharField(max_length=64)
    tag = serializers.RegexField(r"^[0-9a-f]{32}$", help_text="Product tag issued before image upload")
    state = serializers.CharField(max_length=64)
    pincode = serializers.CharField(max_length=6, min_length=6)
    longitude = serializers.FloatField(min_value=-180, max_value=180)
    latitude = serializers.FloatField(min_value=-90, max_value=90)
    note = serializers.CharField(required=False, allow_blank=True, default="")
    modelNo = serializers.CharField(required=False, allow_blank=True, default="")
    hashtags = FlexibleJSONField(required=False, default=list)
    metadata = FlexibleJSONField(required=False, expected_type=dict, default=dict)
    locationMeta = FlexibleJSONField(required=False, default=list)

    def validate_hashtags(self, value):
        if not all(isinstance(tag, str) for tag in value):
            raise serializers.ValidationError("Hashtags must be strings")
        return value

    def is_location_error(self) -> bool:
        """True when the only problems are the state/PIN pair."""
        return bool(self.errors) and set(self.errors) <= {"state", "pincode"}

    def validate_state(self, value):
        if not is_known_state(value):
            raise serializers.ValidationError("Unknown state")
        return value

    def validate_pincode(self, value):
        if not value.isdigit():
            raise serializers.ValidationError("PIN must be six digits")
        return value


class ProductIdListSerializer(serializers.Serializer):
    idList = serializers.ListField(child=serializers.CharField(max_length=64), allow_empty=True)

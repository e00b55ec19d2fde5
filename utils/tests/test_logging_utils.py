import pytest

from utils.logging_utils import mask_value, sanitize_payload


@pytest.mark.unit
class TestSanitizePayload:
    def test_only_allowed_keys_are_kept(self):
        payload = {"name": "Desk", "seller": "64f1c2a9e4b0a1b2c3d4e5f6", "password": "hunter2"}

        assert sanitize_payload(payload, ["name", "seller"], visible_keys=["name"]) == {
            "name": "Desk",
            "seller": "64f1...e5f6",
        }

    def test_masking(self):
        assert mask_value("ravi@example.com") == "ra***@example.com"
        assert mask_value("560001") == "***"
        assert mask_value(42) == 42

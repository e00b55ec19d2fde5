from io import StringIO
from unittest.mock import MagicMock, patch

import pytest
from django.core.management import CommandError, call_command
from pymongo.errors import ServerSelectionTimeoutError


@pytest.mark.unit
class TestEnsureIndexesCommand:
    @patch("marketplace.management.commands.ensure_indexes.ensure_indexes", return_value=["category_1", "tag_1"])
    @patch("marketplace.management.commands.ensure_indexes.container")
    def test_reports_indexes(self, mock_container, mock_ensure):
        mock_container.database.return_value = MagicMock(name="db")
        out = StringIO()

        call_command("ensure_indexes", stdout=out)

        mock_ensure.assert_called_once_with(mock_container.database.return_value)
        assert "Ensured index: tag_1" in out.getvalue()
        assert "2 indexes ensured" in out.getvalue()

    @patch("marketplace.management.commands.ensure_indexes.ensure_indexes")
    @patch("marketplace.management.commands.ensure_indexes.container")
    def test_database_unavailable(self, mock_container, mock_ensure):
        mock_ensure.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(CommandError):
            call_command("ensure_indexes", stdout=StringIO())

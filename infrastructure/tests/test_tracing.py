from unittest.mock import MagicMock, patch

import pytest

from infrastructure.observability import tracing


@pytest.mark.unit
class TestTracing:
    @patch("infrastructure.observability.tracing.DjangoInstrumentor")
    @patch("infrastructure.observability.tracing.trace.set_tracer_provider")
    def test_disabled_tracing_installs_nothing(self, mock_set_provider, mock_instrumentor):
        tracing.setup_tracing(service_name="bazaar-test", enable=False)

        mock_set_provider.assert_not_called()
        mock_instrumentor.assert_not_called()

    @patch("infrastructure.observability.tracing.DjangoInstrumentor")
    @patch("infrastructure.observability.tracing.trace.set_tracer_provider")
    def test_enabled_tracing_initializes_once(self, mock_set_provider, mock_instrumentor):
        with patch.object(tracing, "_initialized", False):
            tracing.setup_tracing(service_name="bazaar-test", enable=True)
            tracing.setup_tracing(service_name="bazaar-test", enable=True)

        mock_set_provider.assert_called_once()
        mock_instrumentor.return_value.instrument.assert_called_once_with()

    def test_add_span_attributes_stringifies(self):
        span = MagicMock()

        tracing.add_span_attributes(span, page=2, category=None)

        span.set_attribute.assert_any_call("page", "2")
        span.set_attribute.assert_any_call("category", "None")

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from detector.analysis.exceptions import ServiceError, TransportError
from detector.analysis.openai_client_adapter import OpenAIClientAdapter


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _make_adapter(mock_client: MagicMock) -> OpenAIClientAdapter:
    with patch(
        "detector.analysis.openai_client_adapter.openai.AsyncOpenAI",
        return_value=mock_client,
    ):
        return OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)


def _mock_client(**create_kwargs: object) -> MagicMock:
    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock(**create_kwargs)
    return mock_client


def _analyze(adapter: OpenAIClientAdapter) -> str:
    return asyncio.run(
        adapter.create_image_analysis(
            model="m",
            prompt="Is it real?",
            image_mime_type="image/jpeg",
            image_payload="QUJD",
        )
    )


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = _mock_client(return_value=_make_mock_response("## Report"))
        assert _analyze(_make_adapter(mock_client)) == "## Report"

    def test_sends_prompt_and_image_data_url(self) -> None:
        mock_client = _mock_client(return_value=_make_mock_response("ok"))
        _analyze(_make_adapter(mock_client))

        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "m"
        content = kwargs["messages"][0]["content"]
        assert content[0] == {"type": "text", "text": "Is it real?"}
        assert content[1]["image_url"]["url"] == "data:image/jpeg;base64,QUJD"

    def test_client_built_without_internal_retries(self) -> None:
        with patch(
            "detector.analysis.openai_client_adapter.openai.AsyncOpenAI"
        ) as mock_cls:
            OpenAIClientAdapter(api_key="k", timeout_seconds=12, base_url="http://x/v1")
        mock_cls.assert_called_once_with(
            api_key="k", timeout=12, base_url="http://x/v1", max_retries=0
        )

    def test_raises_service_error_for_empty_content(self) -> None:
        mock_client = _mock_client(return_value=_make_mock_response(None))
        with pytest.raises(ServiceError, match="No analysis generated"):
            _analyze(_make_adapter(mock_client))

    def test_raises_service_error_for_no_choices(self) -> None:
        response = MagicMock()
        response.choices = []
        mock_client = _mock_client(return_value=response)
        with pytest.raises(ServiceError, match="no choices"):
            _analyze(_make_adapter(mock_client))

    def test_raises_transport_error_on_connection_failure(self) -> None:
        mock_client = _mock_client(side_effect=openai.APIConnectionError(request=MagicMock()))
        with pytest.raises(TransportError, match="network error"):
            _analyze(_make_adapter(mock_client))

    def test_raises_transport_error_on_timeout(self) -> None:
        mock_client = _mock_client(side_effect=httpx.TimeoutException("timeout"))
        with pytest.raises(TransportError, match="network error"):
            _analyze(_make_adapter(mock_client))

    def test_raises_service_error_on_api_error(self) -> None:
        mock_client = _mock_client(
            side_effect=openai.APIError(message="server error", request=MagicMock(), body=None)
        )
        with pytest.raises(ServiceError, match="API error"):
            _analyze(_make_adapter(mock_client))

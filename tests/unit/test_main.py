"""Unit tests for the uvicorn entry point."""

import pytest
from pytest_mock import MockerFixture, MockType

from main import UVICORN_LOG_CONFIG, main
from src.core.config import Settings


@pytest.fixture
def mock_run(mocker: MockerFixture) -> MockType:
    mocker.patch("main.setup_logging")
    return mocker.patch("main.uvicorn.run")


@pytest.mark.unit
class TestMain:
    """Test server startup parameters."""

    def test_uses_configured_port(
        self,
        mocker: MockerFixture,
        mock_run: MockType,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv("PORT", raising=False)
        mocker.patch("main.get_settings", return_value=Settings(debug=False))

        main()

        kwargs = mock_run.call_args.kwargs
        assert mock_run.call_args.args[0] == "src.api.main:app"
        assert kwargs["port"] == 5000
        assert kwargs["reload"] is False
        assert kwargs["log_config"] is UVICORN_LOG_CONFIG

    def test_port_env_overrides(
        self,
        mocker: MockerFixture,
        mock_run: MockType,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("PORT", "8080")
        mocker.patch("main.get_settings", return_value=Settings(debug=True))

        main()

        assert mock_run.call_args.kwargs["port"] == 8080
        assert mock_run.call_args.kwargs["reload"] is True

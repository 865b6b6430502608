"""Tests for server module."""

from pathlib import Path
from unittest.mock import patch

import pytest
from wikinav.app_keys import source_dir_key
from wikinav.config import Config, DocsConfig, ServerConfig
from wikinav.core.scanner import ScanNotFoundError
from wikinav.server import check_source_dir, create_app, run_server


class TestCreateApp:
    """Tests for create_app()."""

    def test__valid_config__returns_configured_app(self, test_config: Config) -> None:
        app = create_app(test_config)

        assert app[source_dir_key] == test_config.docs.source_dir

    def test__registers_navigation_routes(self, test_config: Config) -> None:
        app = create_app(test_config)

        paths = {route.resource.canonical for route in app.router.routes()}
        assert "/api/navigation" in paths
        assert "/api/navigation/{path}" in paths


class TestRunServer:
    """Tests for run_server()."""

    def test__missing_source_dir__raises(self, tmp_path: Path) -> None:
        config = Config(server=ServerConfig(), docs=DocsConfig(source_dir=tmp_path / "missing"))

        with patch("wikinav.server.web.run_app") as run_app, pytest.raises(ScanNotFoundError):
            run_server(config)

        run_app.assert_not_called()

    def test__valid_source_dir__runs_app(self, test_config: Config) -> None:
        with patch("wikinav.server.web.run_app") as run_app:
            run_server(test_config)

        run_app.assert_called_once()
        assert run_app.call_args.kwargs == {"host": "127.0.0.1", "port": 8080}

    def test__check_source_dir__accepts_existing(self, test_config: Config) -> None:
        check_source_dir(test_config)

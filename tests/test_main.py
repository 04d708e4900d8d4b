"""Tests for the command line entry point"""
from unittest.mock import patch

from click.testing import CliRunner

from config import VERSION
from main import cli


class TestCli:
    """Test argument handling and server bootstrap"""

    def setup_method(self):
        """Setup test fixtures"""
        self.runner = CliRunner()
        # Keep the root logger away from the runner's captured stdout
        self.logging_patcher = patch('main.setup_structured_logging')
        self.logging_patcher.start()

    def teardown_method(self):
        self.logging_patcher.stop()

    def test_version(self):
        """Test the version flag"""
        result = self.runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert VERSION in result.output

    def test_help_short_flag(self):
        """Test -h prints usage"""
        result = self.runner.invoke(cli, ["-h"])

        assert result.exit_code == 0
        assert "--web.listen-address" in result.output

    def test_missing_credentials(self):
        """Test the server command requires all three credentials"""
        with patch('main.uvicorn.run') as mock_run:
            result = self.runner.invoke(cli, ["server", "user", "pass"])

        assert result.exit_code != 0
        mock_run.assert_not_called()

    def test_server_starts_with_defaults(self):
        """Test the server binds to the default address"""
        with patch('main.uvicorn.run') as mock_run:
            result = self.runner.invoke(cli, ["server", "user", "pass", "key"])

        assert result.exit_code == 0, result.output
        _, kwargs = mock_run.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8000

    def test_server_flags(self):
        """Test listen address and metrics path flags are applied"""
        args = [
            "--web.listen-address", "127.0.0.1:9158",
            "--web.metrics-path", "/pingdom",
            "--log.level", "debug",
            "server", "user", "pass", "key",
        ]

        with patch('main.uvicorn.run') as mock_run:
            result = self.runner.invoke(cli, args)

        assert result.exit_code == 0, result.output
        app = mock_run.call_args[0][0]
        _, kwargs = mock_run.call_args
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9158
        assert "/pingdom" in [route.path for route in app.routes]

    def test_invalid_configuration_exits(self):
        """Test invalid settings are fatal before binding"""
        with patch('main.uvicorn.run') as mock_run:
            result = self.runner.invoke(cli, ["--web.metrics-path", "metrics", "server", "user", "pass", "key"])

        assert result.exit_code == 1
        mock_run.assert_not_called()

    def test_client_closed_after_server_stops(self):
        """Test the Pingdom connection pool is released when uvicorn returns"""
        with patch('main.uvicorn.run'), patch('main.PingdomClient.close') as mock_close:
            result = self.runner.invoke(cli, ["server", "user", "pass", "key"])

        assert result.exit_code == 0, result.output
        mock_close.assert_called_once_with()

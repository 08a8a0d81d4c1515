"""Unit tests for version command."""

from devtimer import __version__
from devtimer.commands.version_command import version


class TestVersionCommand:
    """Tests for the 'version' command."""

    def test_version_output(self, capsys):
        """Test that the version command outputs the correct version."""
        version()
        assert __version__ in capsys.readouterr().out

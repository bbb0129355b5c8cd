"""Integration tests for config command and global CLI options."""

import pytest
from click.testing import CliRunner
from minigit import __version__
from minigit.cli.main import cli


class TestConfigCommand:
    """Tests for minigit config command."""

    @pytest.fixture(autouse=True)
    def cli_in_repo(self, in_repo):
        self.runner = CliRunner()
        self.repo = in_repo

    def test_config_set_and_get(self):
        """Test setting then reading a repository value."""
        result = self.runner.invoke(cli, ['config', 'user.name', 'Test User'])
        assert result.exit_code == 0
        assert 'Set user.name = Test User' in result.output

        result = self.runner.invoke(cli, ['config', 'user.name'])
        assert result.output.strip() == 'Test User'
        assert 'Test User' in self.repo.config_file.read_text()

    def test_config_global(self, isolated_config):
        """Test --global writes the user config file."""
        result = self.runner.invoke(cli, ['config', '--global', 'user.name', 'Global User'])

        assert result.exit_code == 0
        assert 'Global User' in (isolated_config / '.minigitconfig').read_text()

    def test_config_get_unset(self):
        """Test reading a value that is not set."""
        result = self.runner.invoke(cli, ['config', 'nothing.here'])

        assert result.exit_code == 1
        assert 'nothing.here is not set' in result.output

    def test_config_list(self):
        """Test listing all values."""
        self.runner.invoke(cli, ['config', 'user.name', 'Lister'])

        result = self.runner.invoke(cli, ['config', '--list'])

        assert 'user.name=Lister' in result.output

    def test_config_bad_key(self):
        """Test a key without a section."""
        result = self.runner.invoke(cli, ['config', 'name', 'x'])

        assert result.exit_code == 1
        assert "section.key" in result.output


def test_version():
    """Test --version."""
    result = CliRunner().invoke(cli, ['--version'])
    assert __version__ in result.output


def test_help_shows_banner_and_commands():
    """Test --help lists every command."""
    result = CliRunner().invoke(cli, ['--help'])

    assert result.exit_code == 0
    assert 'mini-git' in result.output
    for name in ('init', 'add', 'rm', 'status', 'commit', 'reset', 'log', 'checkout',
                 'branch-create', 'branch-remove', 'show-branches', 'merge', 'config'):
        assert name in result.output


def test_verbose_logs_debug(in_repo):
    """Test -v turns on debug logging."""
    (in_repo.work_tree / 'f.txt').write_text('x')

    result = CliRunner().invoke(cli, ['-v', 'add', 'f.txt'])

    assert result.exit_code == 0

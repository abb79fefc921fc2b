"""Integration tests for repository initialization."""

from click.testing import CliRunner

from rit.cli.main import cli


def test_init_command(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    runner = CliRunner()

    result = runner.invoke(cli, ['init'])

    assert result.exit_code == 0
    assert 'Initialized empty Rit repository' in result.output
    assert (temp_dir / '.rit' / 'objects').is_dir()


def test_init_creates_target_directory(temp_dir):
    runner = CliRunner()
    target = temp_dir / 'project'

    result = runner.invoke(cli, ['init', str(target)])

    assert result.exit_code == 0
    assert (target / '.rit' / 'refs' / 'heads').is_dir()


def test_init_twice_fails(temp_dir):
    runner = CliRunner()
    runner.invoke(cli, ['init', str(temp_dir)])

    result = runner.invoke(cli, ['init', str(temp_dir)])

    assert result.exit_code != 0
    assert 'already exists' in result.output


def test_help_lists_commands():
    result = CliRunner().invoke(cli, ['--help'])
    assert result.exit_code == 0
    for name in ('init', 'add', 'commit', 'status', 'remote'):
        assert name in result.output


def test_commands_outside_repository(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    result = CliRunner().invoke(cli, ['status'])
    assert result.exit_code != 0
    assert 'Not a rit repository' in result.output

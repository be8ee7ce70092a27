from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from voltpath.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("VOLTPATH", raising=False)
    monkeypatch.delenv("VOLT_VIM", raising=False)
    return tmp_path


class TestMain:
    def test_no_command_shows_help(self, runner: CliRunner) -> None:
        result = runner.invoke(main)
        assert result.exit_code == 0
        assert "Resolve volt repository names" in result.output

    def test_help_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "normalize" in result.output

    def test_missing_home_aborts(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("HOME", raising=False)
        monkeypatch.delenv("USERPROFILE", raising=False)
        result = runner.invoke(main, ["env"])
        assert result.exit_code == 1
        assert "Couldn't look up HOME" in result.output


class TestNormalize:
    def test_normalize_without_home(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("HOME", raising=False)
        monkeypatch.delenv("USERPROFILE", raising=False)
        result = runner.invoke(main, ["normalize", "tyru/caw.vim"])
        assert result.exit_code == 0
        assert result.output.strip() == "github.com/tyru/caw.vim"

    def test_normalize(self, runner: CliRunner, home: Path) -> None:
        result = runner.invoke(
            main, ["normalize", "tyru/caw.vim", "https://gitlab.com/org/proj.git"]
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "github.com/tyru/caw.vim",
            "gitlab.com/org/proj",
        ]

    def test_normalize_local(self, runner: CliRunner, home: Path) -> None:
        result = runner.invoke(main, ["normalize", "--local", "myplugin"])
        assert result.exit_code == 0
        assert result.output.strip() == "localhost/local/myplugin"

    def test_normalize_invalid(self, runner: CliRunner, home: Path) -> None:
        result = runner.invoke(main, ["normalize", "myplugin"])
        assert result.exit_code == 1
        assert "invalid format of repository: myplugin" in result.output


class TestPath:
    def test_path(self, runner: CliRunner, home: Path) -> None:
        result = runner.invoke(main, ["path", "tyru/caw.vim.git"])
        assert result.exit_code == 0
        assert "github.com/tyru/caw.vim" in result.output
        assert "https://github.com/tyru/caw.vim" in result.output
        assert str(home / "volt" / "repos" / "github.com") in result.output
        assert "github.com_tyru_caw.vim" in result.output

    def test_path_honors_voltpath(
        self, runner: CliRunner, home: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("VOLTPATH", str(home / "custom"))
        result = runner.invoke(main, ["path", "tyru/caw.vim"])
        assert result.exit_code == 0
        assert str(home / "custom" / "plugconf") in result.output

    def test_path_invalid(self, runner: CliRunner, home: Path) -> None:
        result = runner.invoke(main, ["path", "a/b/c/d"])
        assert result.exit_code == 1
        assert "invalid format" in result.output


class TestDecode:
    def test_decode_without_home(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("HOME", raising=False)
        monkeypatch.delenv("USERPROFILE", raising=False)
        result = runner.invoke(main, ["decode", "github.com_tyru_caw.vim"])
        assert result.exit_code == 0
        assert result.output.strip() == "github.com/tyru/caw.vim"

    def test_decode(self, runner: CliRunner, home: Path) -> None:
        result = runner.invoke(
            main,
            ["decode", "github.com_tyru_caw.vim", "github.com_tyru_open__browser.vim"],
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "github.com/tyru/caw.vim",
            "github.com/tyru/open_browser.vim",
        ]


class TestProfile:
    def test_profile_without_home(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("HOME", raising=False)
        monkeypatch.delenv("USERPROFILE", raising=False)
        result = runner.invoke(main, ["profile", "default"])
        assert result.exit_code == 1
        assert "Couldn't look up HOME" in result.output

    def test_profile(self, runner: CliRunner, home: Path) -> None:
        result = runner.invoke(main, ["profile", "default"])
        assert result.exit_code == 0
        assert str(home / "volt" / "rc" / "default") in result.output
        assert "vimrc.vim" in result.output
        assert "gvimrc.vim" in result.output


class TestEnv:
    def test_env(self, runner: CliRunner, home: Path) -> None:
        (home / ".vimrc").touch()
        with patch("shutil.which", return_value="/usr/bin/vim"):
            result = runner.invoke(main, ["env"])
        assert result.exit_code == 0
        assert str(home / "volt" / "lock.json") in result.output
        assert "bundled_plugconf.vim" in result.output
        assert "/usr/bin/vim" in result.output
        assert str(home / ".vimrc") in result.output
        assert "(none)" in result.output

    def test_env_vim_missing(self, runner: CliRunner, home: Path) -> None:
        with patch("shutil.which", return_value=None):
            result = runner.invoke(main, ["env"])
        assert result.exit_code == 0
        assert "executable file not found" in result.output

    def test_env_vim_override(
        self, runner: CliRunner, home: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("VOLT_VIM", "/opt/vim/bin/vim")
        result = runner.invoke(main, ["env"])
        assert result.exit_code == 0
        assert "/opt/vim/bin/vim" in result.output

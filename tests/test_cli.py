"""Tests for the semcmp command line."""

import pytest
from unittest.mock import patch

from semcmp import __version__
from semcmp.cli import run, main, EXIT_OK, EXIT_INVALID


@pytest.fixture(autouse=True)
def isolated(clean_env):
    """Keep CLI runs away from the caller's env and .env files."""
    yield clean_env


class TestCompareCommand:
    """Test comparing two versions."""

    @pytest.mark.parametrize("a,b,printed", [
        ("1.0.0", "2.0.0", "-1"),
        ("1.0.0-rc.1", "1.0.0", "-1"),
        ("1.0.0+exp.sha.5114f85", "1.0.0+20130313144700", "0"),
        ("1.0.0-beta.11", "1.0.0-beta.2", "1"),
    ])
    def test_prints_result(self, capsys, a, b, printed):
        """Should print -1, 0 or 1 and exit 0."""
        assert run([a, b]) == EXIT_OK
        out, err = capsys.readouterr()
        assert out.strip() == printed
        assert err == ""

    def test_invalid_first(self, capsys):
        """Should report the invalid argument on stderr."""
        assert run(["1.01.0", "1.0.0"]) == EXIT_INVALID
        out, err = capsys.readouterr()
        assert out == ""
        assert "Invalid version: '1.01.0' (leading zero in minor)" in err

    def test_invalid_second(self, capsys):
        """Should report the second argument when the first is valid."""
        assert run(["1.0.0", "1.0.0-"]) == EXIT_INVALID
        _, err = capsys.readouterr()
        assert "'1.0.0-'" in err

    def test_no_trimming(self, capsys):
        """Should reject arguments with surrounding whitespace."""
        assert run([" 1.0.0", "1.0.0"]) == EXIT_INVALID

    @pytest.mark.parametrize("argv", [[], ["1.0.0"], ["1.0.0", "1.0.1", "1.0.2"]])
    def test_wrong_argument_count(self, argv):
        """Should exit with a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            run(argv)
        assert exc_info.value.code == 2


class TestValidateCommand:
    """Test --validate."""

    def test_all_valid(self, capsys):
        """Should print valid for each argument and exit 0."""
        assert run(["--validate", "1.0.0", "1.0.0-rc.1+build"]) == EXIT_OK
        out, _ = capsys.readouterr()
        assert out.splitlines() == ["1.0.0: valid", "1.0.0-rc.1+build: valid"]

    def test_some_invalid(self, capsys):
        """Should exit 1 when any argument is invalid."""
        assert run(["--validate", "1.0.0", "1.0"]) == EXIT_INVALID
        out, _ = capsys.readouterr()
        assert "1.0: invalid" in out

    def test_requires_argument(self):
        """Should need at least one version."""
        with pytest.raises(SystemExit) as exc_info:
            run(["--validate"])
        assert exc_info.value.code == 2


class TestMisc:
    """Test version flag, logging and main()."""

    def test_version_flag(self, capsys):
        """Should print the package version."""
        assert run(["--version"]) == EXIT_OK
        out, _ = capsys.readouterr()
        assert out.strip() == f"semcmp v{__version__}"

    def test_log_level_flag(self, capsys):
        """Should log the comparison at info level."""
        assert run(["--log-level", "INFO", "1.0.0", "2.0.0"]) == EXIT_OK
        _, err = capsys.readouterr()
        assert "compare('1.0.0', '2.0.0') = LESS" in err

    def test_log_level_case_insensitive(self, capsys):
        """Should accept a lower-case level name."""
        assert run(["--log-level", "info", "1.0.0", "2.0.0"]) == EXIT_OK
        _, err = capsys.readouterr()
        assert "= LESS" in err

    def test_unknown_log_level_is_usage_error(self, capsys):
        """Should reject a mistyped level instead of falling back."""
        with pytest.raises(SystemExit) as exc_info:
            run(["--log-level", "chatty", "1.0.0", "2.0.0"])
        assert exc_info.value.code == 2
        _, err = capsys.readouterr()
        assert "--log-level" in err

    def test_quiet_by_default(self, capsys):
        """Should keep stderr empty at the default level."""
        run(["1.0.0", "2.0.0"])
        _, err = capsys.readouterr()
        assert err == ""

    def test_main_exits_with_status(self):
        """Should pass the status to sys.exit."""
        with patch("sys.argv", ["semcmp", "1.0.0", "nope"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == EXIT_INVALID

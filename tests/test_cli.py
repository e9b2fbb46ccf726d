"""
End-to-end CLI tests.

Each test points SWAY_SCALE_SWAPPER_CONFIG at a temporary config and
replaces subprocess.Popen so no real swaymsg is spawned.
"""

import pytest

from sway_scale_swapper.cli import build_parser, main
from sway_scale_swapper.models import DEFAULT_CONFIG_PATH, SwapperSettings


SECTION = [
    "# Scale Options Start",
    "# Target Display = eDP-1",
    "# Scale Options = 1.0, 1.25, 1.5",
    "# Scale Options End",
]


@pytest.fixture
def use_config(monkeypatch, write_config):
    """Write config lines and point the CLI at them."""
    def _use(lines):
        path = write_config("\n".join(lines) + "\n")
        monkeypatch.setenv("SWAY_SCALE_SWAPPER_CONFIG", str(path))
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        return path

    return _use


class TestSwapMode:
    """Test --swap."""

    def test_cycles_to_next_scale(self, use_config, spawned_commands, capsys):
        path = use_config(SECTION + ['output "eDP-1" scale 1.25'])

        assert main(["--swap"]) == 0

        assert path.read_text().splitlines() == SECTION + ['output "eDP-1" scale 1.5']
        assert spawned_commands == [["swaymsg", "reload"]]
        out = capsys.readouterr().out
        assert "Swapping scale from 1.25 to 1.5" in out
        assert "Successfully reloaded Sway configuration." in out

    def test_wraps_to_smallest(self, use_config, spawned_commands):
        path = use_config(SECTION + ['output "eDP-1" scale 1.5'])

        assert main(["-s"]) == 0

        assert path.read_text().splitlines()[-1] == 'output "eDP-1" scale 1.0'

    def test_no_output_line_starts_from_default(self, use_config, spawned_commands, capsys):
        """Without a current reading the scale is taken as 1.0 and advanced."""
        path = use_config(SECTION + ['output "HDMI-A-1" scale 2.0'])

        assert main(["--swap"]) == 0

        assert path.read_text().splitlines() == SECTION + ['output "HDMI-A-1" scale 2.0']
        assert "No current scale found" in capsys.readouterr().err

    def test_reload_failure_does_not_fail_run(self, use_config, monkeypatch, capsys):
        path = use_config(SECTION + ['output "eDP-1" scale 1.0'])

        def missing_binary(command, *args, **kwargs):
            raise FileNotFoundError(2, "No such file or directory")

        monkeypatch.setattr("subprocess.Popen", missing_binary)

        assert main(["--swap"]) == 0

        assert path.read_text().splitlines()[-1] == 'output "eDP-1" scale 1.25'
        assert "Failed to reload Sway configuration." in capsys.readouterr().err


class TestInteractiveMode:
    """Test the menu flow."""

    def test_selection_applied(self, use_config, spawned_commands, scripted_input):
        path = use_config(SECTION + ['output "eDP-1" scale 1.0 pos 0 0'])

        assert main([], input_func=scripted_input(["abc", "9", "3"])) == 0

        assert path.read_text().splitlines()[-1] == 'output "eDP-1" scale 1.5 pos 0 0'
        assert spawned_commands == [["swaymsg", "reload"]]

    def test_quit_makes_no_changes(self, use_config, spawned_commands, scripted_input, capsys):
        path = use_config(SECTION + ['output "eDP-1" scale 1.0'])
        before = path.read_bytes()

        assert main([], input_func=scripted_input(["Q"])) == 0

        assert path.read_bytes() == before
        assert spawned_commands == []
        assert "No changes made. Exiting." in capsys.readouterr().out


class TestFatalErrors:
    """Test configuration errors that stop the run."""

    def test_missing_end_marker(self, use_config, spawned_commands, capsys):
        lines = SECTION[:-1] + ['output "eDP-1" scale 1.25']
        path = use_config(lines)
        before = path.read_bytes()

        assert main(["--swap"]) == 1

        assert path.read_bytes() == before
        assert sorted(p.name for p in path.parent.iterdir()) == ["config"]
        assert spawned_commands == []
        assert "'Scale Options End' marker not found" in capsys.readouterr().err

    def test_missing_start_marker(self, use_config, spawned_commands, capsys):
        use_config(SECTION[1:])

        assert main(["--swap"]) == 1

        assert "'Scale Options Start' marker not found" in capsys.readouterr().err

    def test_no_target_displays(self, use_config, spawned_commands, capsys):
        use_config([SECTION[0], SECTION[2], SECTION[3]])

        assert main(["--swap"]) == 1

        assert "No target displays found" in capsys.readouterr().err

    def test_no_scale_values(self, use_config, spawned_commands, capsys):
        use_config([SECTION[0], SECTION[1], SECTION[3]])

        assert main(["--swap"]) == 1

        assert "No scale options found" in capsys.readouterr().err

    def test_missing_config_file(self, monkeypatch, tmp_path, spawned_commands, capsys):
        monkeypatch.setenv("SWAY_SCALE_SWAPPER_CONFIG", str(tmp_path / "absent"))

        assert main(["--swap"]) == 1

        assert "Failed to open config file" in capsys.readouterr().err

    def test_invalid_log_level(self, use_config, monkeypatch, capsys):
        use_config(SECTION)
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        assert main(["--swap"]) == 1

        assert "Invalid settings" in capsys.readouterr().err


class TestArguments:
    """Test the argument parser and settings."""

    def test_swap_flag_default_off(self):
        assert build_parser().parse_args([]).swap is False
        assert build_parser().parse_args(["-s"]).swap is True

    def test_unknown_flag_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--scale", "2"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "sway-scale-swapper 1.0.0" in capsys.readouterr().out

    def test_default_settings(self, monkeypatch):
        monkeypatch.delenv("SWAY_SCALE_SWAPPER_CONFIG", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = SwapperSettings.from_env()

        assert settings.config_path == DEFAULT_CONFIG_PATH
        assert settings.reload_command == ["swaymsg", "reload"]
        assert settings.log_level == "WARNING"

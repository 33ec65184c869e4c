"""
Integration tests for CLI volume commands.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from lvmkit.cli.cli import app
from lvmkit.cli.lib.exceptions import LvmCommandError, VolumeCreatedButNotFound
from lvmkit.cli.lib.lvm import LogicalVolume
from tests._util import completed, lv_row, report_output


class TestVolumeCreate:
    """Tests for volume create command."""

    @pytest.mark.integration
    def test_create_volume_success(self, mock_subprocess, no_config):
        """Test successful volume creation."""
        mock_subprocess.side_effect = [
            completed(),
            completed(stdout=report_output("lv", [lv_row("data1")])),
        ]

        runner = CliRunner()
        result = runner.invoke(app, ["volume", "create", "data1", "--vg", "vg0", "--size", "1073741824"])

        assert result.exit_code == 0
        assert "Creating volume: data1" in result.output
        assert "Volume data1 created at /dev/vg0/data1" in result.output
        mock_subprocess.assert_any_call(
            ["lvcreate", "-V", "1073741824B", "-T", "vg0/thinpool", "-n", "data1"],
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
        )

    @pytest.mark.integration
    @patch("lvmkit.cli.commands.volume.VolumeGroup.create_volume")
    def test_create_volume_thinpool_option(self, mock_create, no_config):
        """Test overriding the thin pool name."""
        mock_create.return_value = LogicalVolume(name="data1", path=Path("/dev/vg0/data1"))

        runner = CliRunner()
        result = runner.invoke(
            app, ["volume", "create", "data1", "--vg", "vg0", "--size", "4096", "--thinpool", "pool"]
        )

        assert result.exit_code == 0
        mock_create.assert_called_once_with("data1", 4096, thinpool_name="pool")

    @pytest.mark.integration
    @patch("lvmkit.cli.commands.volume.VolumeGroup.create_volume")
    def test_create_volume_thinpool_from_config(self, mock_create, monkeypatch, temp_dir):
        """Test the thin pool name defaults to the configured one."""
        config_path = temp_dir / "lvmkit.conf"
        config_path.write_text("[lvm]\nthinpool_name = pool_test\n", encoding="utf-8")
        monkeypatch.setenv("LVMKIT_CONFIG_PATH", str(config_path))
        mock_create.return_value = LogicalVolume(name="data1", path=Path("/dev/vg0/data1"))

        runner = CliRunner()
        result = runner.invoke(app, ["volume", "create", "data1", "--vg", "vg0", "--size", "4096"])

        assert result.exit_code == 0
        mock_create.assert_called_once_with("data1", 4096, thinpool_name="pool_test")

    @pytest.mark.integration
    @patch("lvmkit.cli.commands.volume.VolumeGroup.create_volume")
    def test_create_volume_fails(self, mock_create, no_config):
        """Test lvcreate failing."""
        mock_create.side_effect = LvmCommandError(["lvcreate"], 5, "Insufficient free space")

        runner = CliRunner()
        result = runner.invoke(app, ["volume", "create", "data1", "--vg", "vg0", "--size", "4096"])

        assert result.exit_code == 1
        assert "Error creating volume" in result.output
        assert "Insufficient free space" in result.output

    @pytest.mark.integration
    @patch("lvmkit.cli.commands.volume.VolumeGroup.create_volume")
    def test_create_volume_not_found(self, mock_create, no_config):
        """Test a created volume that cannot be found afterwards."""
        mock_create.side_effect = VolumeCreatedButNotFound("Volume vg0/data1 was created but could not be found")

        runner = CliRunner()
        result = runner.invoke(app, ["volume", "create", "data1", "--vg", "vg0", "--size", "4096"])

        assert result.exit_code == 1
        assert "check lvs before retrying" in result.output

    @pytest.mark.integration
    def test_create_volume_invalid_name(self, mock_subprocess, no_config):
        """Test an invalid volume name."""
        runner = CliRunner()
        result = runner.invoke(app, ["volume", "create", "bad name", "--vg", "vg0", "--size", "4096"])

        assert result.exit_code == 1
        assert "Error creating volume" in result.output
        mock_subprocess.assert_not_called()

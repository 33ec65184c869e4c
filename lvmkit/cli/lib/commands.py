"""
LVM command invocation.

Every call runs the LVM tool exactly once and returns only after the process
has exited; nothing is cached between calls.
"""

import json
import logging
import subprocess
from typing import Any, List, Sequence

from lvmkit.cli.lib.exceptions import LvmCommandError, LvmInvocationError, ReportDecodeError
from lvmkit.cli.lib.report import SIZE_UNIT, LogicalVolumeReport, VolumeGroupReport, parse_rows

logger = logging.getLogger(__name__)

REPORT_ARGS = ["--verbose", "--report-format=json", f"--units={SIZE_UNIT}"]


def run_lvm(cmd: Sequence[str]) -> subprocess.CompletedProcess:
    """
    Run an LVM command and check its exit status.

    Args:
        cmd: Command and arguments

    Returns:
        The completed process

    Raises:
        LvmInvocationError: If the command could not be started
        LvmCommandError: If the command exited with a non-zero status
    """
    cmd = list(cmd)
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, errors="replace", check=False)
    except OSError as e:
        raise LvmInvocationError(cmd, str(e)) from e

    if result.returncode != 0:
        logger.warning("%s exited with status %s", cmd[0], result.returncode)
        raise LvmCommandError(cmd, result.returncode, result.stderr or "")

    return result


def _report_rows(tool: str, key: str) -> List[Any]:
    result = run_lvm([tool, *REPORT_ARGS])

    try:
        data = json.loads(result.stdout)
    except (TypeError, ValueError) as e:
        raise ReportDecodeError(f"failed to parse {tool} output as json: {e}") from e

    try:
        rows = data["report"][0][key]
    except (KeyError, IndexError, TypeError) as e:
        raise ReportDecodeError(f"{tool} output has no report[0].{key} list") from e

    if not isinstance(rows, list):
        raise ReportDecodeError(f"{tool} report[0].{key} is not a list")

    return rows


def list_logical_volumes() -> List[LogicalVolumeReport]:
    """
    List every logical volume known to LVM.

    Returns:
        One record per `lvs` row, in report order
    """
    return parse_rows(LogicalVolumeReport, _report_rows("lvs", "lv"))


def list_volume_groups() -> List[VolumeGroupReport]:
    """
    List every volume group known to LVM.

    Returns:
        One record per `vgs` row, in report order
    """
    return parse_rows(VolumeGroupReport, _report_rows("vgs", "vg"))


def create_thin_volume(vg_name: str, lv_name: str, size_bytes: int, thinpool_name: str) -> None:
    """
    Create a thin logical volume in `<vg_name>/<thinpool_name>`.

    Args:
        vg_name: Volume group name
        lv_name: Logical volume name
        size_bytes: Virtual size in bytes
        thinpool_name: Thin pool LV name

    Raises:
        LvmInvocationError: If lvcreate could not be started
        LvmCommandError: If lvcreate fails
    """
    run_lvm(
        [
            "lvcreate",
            "-V", f"{size_bytes}{SIZE_UNIT}",
            "-T", f"{vg_name}/{thinpool_name}",
            "-n", lv_name,
        ]
    )

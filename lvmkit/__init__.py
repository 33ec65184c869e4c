"""
lvmkit - typed access to LVM volume groups and thin logical volumes.

The library lives in `lvmkit.cli.lib`; the `lvmkit` command is built on it.
"""

from lvmkit.cli.lib.exceptions import (
    FieldConversionError,
    LogicalVolumeNotFound,
    LvmCommandError,
    LvmError,
    LvmInvocationError,
    LvmNotFound,
    PathIdentificationError,
    ReportDecodeError,
    VolumeCreatedButNotFound,
    VolumeGroupNotFound,
)
from lvmkit.cli.lib.commands import list_logical_volumes, list_volume_groups
from lvmkit.cli.lib.lvm import LogicalVolume, VolumeGroup
from lvmkit.cli.lib.report import LogicalVolumeReport, VolumeGroupReport

__version__ = "0.1.0"
__all__ = [
    "FieldConversionError",
    "LogicalVolume",
    "LogicalVolumeNotFound",
    "LogicalVolumeReport",
    "LvmCommandError",
    "LvmError",
    "LvmInvocationError",
    "LvmNotFound",
    "PathIdentificationError",
    "ReportDecodeError",
    "VolumeCreatedButNotFound",
    "VolumeGroup",
    "VolumeGroupNotFound",
    "VolumeGroupReport",
    "list_logical_volumes",
    "list_volume_groups",
]

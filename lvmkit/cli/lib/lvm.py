"""
Volume group and logical volume handles.

A handle carries only a name and a path. Attributes are always read from a
fresh `lvs`/`vgs` report, since LVM state can change under us at any time.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from lvmkit.cli.lib import commands
from lvmkit.cli.lib.config import DEFAULT_THINPOOL_NAME
from lvmkit.cli.lib.exceptions import (
    LogicalVolumeNotFound,
    PathIdentificationError,
    VolumeCreatedButNotFound,
    VolumeGroupNotFound,
)
from lvmkit.cli.lib.report import LogicalVolumeReport, VolumeGroupReport
from lvmkit.cli.lib.validators import validate_name, validate_size

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _name_from_path(path: Path, kind: str) -> str:
    name = path.name
    if not name or name == "..":
        raise PathIdentificationError(f"{kind} path has no filename: {str(path)!r}")
    return name


@dataclass(frozen=True)
class VolumeGroup:
    name: str
    path: Path

    @classmethod
    def from_path(cls, path: PathLike) -> VolumeGroup:
        """
        Build a handle whose name is the last component of `path`.

        Raises:
            PathIdentificationError: If `path` has no final component
        """
        path = Path(path)
        return cls(name=_name_from_path(path, "VolumeGroup"), path=path)

    def report(self) -> VolumeGroupReport:
        """
        Get the current `vgs` row for this volume group.

        Raises:
            VolumeGroupNotFound: If LVM does not report this volume group
        """
        for vg in commands.list_volume_groups():
            if vg.vg_name == self.name:
                return vg
        raise VolumeGroupNotFound(f"Unable to get report for volume group {self.name}")

    def volumes(self) -> List[LogicalVolume]:
        """
        List the logical volumes in this volume group, in report order.

        An empty list means the group currently has no volumes.
        """
        return [
            LogicalVolume.from_report(self, lv)
            for lv in commands.list_logical_volumes()
            if lv.vg_name == self.name
        ]

    def volume(self, name: str) -> LogicalVolume:
        """
        Get the logical volume named `name` in this volume group.

        Raises:
            LogicalVolumeNotFound: If no such volume is reported
        """
        for lv in self.volumes():
            if lv.name == name:
                return lv
        raise LogicalVolumeNotFound(f"Logical volume {self.name}/{name} not found")

    def create_volume(
        self, name: str, size_bytes: int, *, thinpool_name: str = DEFAULT_THINPOOL_NAME
    ) -> LogicalVolume:
        """
        Create a thin logical volume in this group's thin pool.

        The new volume is looked up in a fresh report after lvcreate returns.
        The two steps are not atomic and nothing is rolled back.

        Args:
            name: Logical volume name, unique within the group
            size_bytes: Virtual size in bytes
            thinpool_name: Thin pool LV name (default: thinpool)

        Returns:
            The new logical volume

        Raises:
            ValueError: If name or size is invalid
            LvmInvocationError: If lvcreate could not be started
            LvmCommandError: If lvcreate fails
            VolumeCreatedButNotFound: If lvcreate succeeded but the volume is not reported
        """
        validate_name(name)
        validate_size(size_bytes)

        logger.info("Creating thin volume %s/%s (%d bytes) in pool %s", self.name, name, size_bytes, thinpool_name)
        commands.create_thin_volume(self.name, name, size_bytes, thinpool_name)

        for lv in self.volumes():
            if lv.name == name:
                return lv

        # lvcreate may well have succeeded; callers must check LVM before retrying
        raise VolumeCreatedButNotFound(f"Volume {self.name}/{name} was created but could not be found")


@dataclass(frozen=True)
class LogicalVolume:
    name: str
    path: Path

    @classmethod
    def from_path(cls, path: PathLike) -> LogicalVolume:
        """
        Build a handle whose name is the last component of `path`.

        Raises:
            PathIdentificationError: If `path` has no final component
        """
        path = Path(path)
        return cls(name=_name_from_path(path, "LogicalVolume"), path=path)

    @classmethod
    def from_report(cls, vg: VolumeGroup, report: LogicalVolumeReport) -> LogicalVolume:
        # report.vg_name is not checked against vg.name; callers filter first
        return cls(name=report.lv_name, path=vg.path / report.lv_name)

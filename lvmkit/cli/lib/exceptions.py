"""Exceptions raised by the LVM access layer."""

from typing import Sequence


class LvmError(Exception):
    """Base exception for LVM access errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class LvmInvocationError(LvmError):
    """An LVM command could not be started."""

    def __init__(self, command: Sequence[str], reason: str):
        self.command = list(command)
        self.reason = reason
        super().__init__(f"{self.command[0]} could not start: {reason}")


class LvmCommandError(LvmError):
    """An LVM command exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"{self.command[0]} failed (exit {returncode}): {stderr.strip()}")


class ReportDecodeError(LvmError):
    """Report output was not JSON or did not have the expected shape."""

    pass


class FieldConversionError(LvmError):
    """A report field could not be converted to its typed value."""

    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"invalid value {value!r} for field '{field}': {reason}")


class LvmNotFound(LvmError):
    """A named volume group or logical volume is not in the report."""

    pass


class VolumeGroupNotFound(LvmNotFound):
    """Volume group not found."""

    pass


class LogicalVolumeNotFound(LvmNotFound):
    """Logical volume not found."""

    pass


class VolumeCreatedButNotFound(LvmNotFound):
    """lvcreate succeeded but the new volume is missing from the report."""

    pass


class PathIdentificationError(LvmError, ValueError):
    """A path has no final component to name a volume by."""

    pass

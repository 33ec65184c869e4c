"""
Typed records for LVM JSON reports.

`lvs` and `vgs` render every column as a JSON string, so numeric columns arrive
quoted (e.g. "253") and size columns carry a unit suffix when the tools are run
with `--units=B` (e.g. "1073741824B").
"""

import re
from typing import Any, ClassVar, Dict, Iterable, List, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from lvmkit.cli.lib.exceptions import FieldConversionError, ReportDecodeError

SIZE_UNIT = "B"

# lvs/vgs report sizes as u64 and counts as u32
MAX_SIZE = 2**64 - 1
MAX_COUNT = 2**32 - 1

_NUMBER_RE = re.compile(r"[+-]?[0-9]+")

ReportT = TypeVar("ReportT", bound="Report")


def parse_number(value: Any) -> int:
    """
    Convert a quoted number to an int.

    Args:
        value: Column value as rendered by the LVM tools

    Returns:
        The integer value

    Raises:
        ValueError: If the value is not a string holding an integer
    """
    if not isinstance(value, str):
        raise ValueError(f"expected a quoted number, got {type(value).__name__}")
    if not _NUMBER_RE.fullmatch(value):
        raise ValueError(f"not a number: {value!r}")
    return int(value)


def parse_size(value: Any, unit: str = SIZE_UNIT) -> int:
    """
    Convert a unit-suffixed size (e.g. "4194304B") to an int.

    Every occurrence of the unit letter is removed before conversion.

    Raises:
        ValueError: If the remaining text is not an integer
    """
    if not isinstance(value, str):
        raise ValueError(f"expected a quoted size, got {type(value).__name__}")
    return parse_number(value.replace(unit, ""))


def parse_unsigned(value: int, maximum: int, what: str) -> int:
    """Check that a parsed value fits an unsigned field of the given maximum."""
    if value < 0:
        raise ValueError(f"{what} cannot be negative: {value}")
    if value > maximum:
        raise ValueError(f"{what} out of range: {value} > {maximum}")
    return value


def _error_reason(error: Dict[str, Any]) -> str:
    cause = error.get("ctx", {}).get("error")
    if cause is not None:
        return str(cause)
    return error.get("msg", "invalid value")


class Report(BaseModel):
    """Base class for one row of an LVM report."""

    model_config = ConfigDict(frozen=True)

    number_fields: ClassVar[Tuple[str, ...]] = ()
    size_fields: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def from_row(cls: Type[ReportT], row: Any) -> ReportT:
        """
        Build a record from one decoded JSON row.

        Raises:
            FieldConversionError: If a numeric or size column cannot be converted
            ReportDecodeError: If the row is not an object or a column is missing
        """
        if not isinstance(row, dict):
            raise ReportDecodeError(f"expected a report row object, got {type(row).__name__}")
        try:
            return cls.model_validate(row)
        except ValidationError as e:
            error = e.errors()[0]
            loc = error.get("loc") or ("?",)
            field = str(loc[0])
            if error.get("type") == "missing":
                raise ReportDecodeError(f"{cls.__name__} row is missing field '{field}'") from e
            if field in cls.number_fields or field in cls.size_fields:
                raise FieldConversionError(field, error.get("input"), _error_reason(error)) from e
            raise ReportDecodeError(f"invalid {cls.__name__} field '{field}': {error.get('msg')}") from e


class LogicalVolumeReport(Report):
    """One row of `lvs --verbose` output."""

    number_fields: ClassVar[Tuple[str, ...]] = (
        "seg_count",
        "lv_major",
        "lv_minor",
        "lv_kernel_major",
        "lv_kernel_minor",
    )
    size_fields: ClassVar[Tuple[str, ...]] = ("lv_size",)

    lv_name: str
    vg_name: str
    seg_count: int
    lv_attr: str
    lv_size: int
    # -1 while the volume is inactive
    lv_major: int
    lv_minor: int
    lv_kernel_major: int
    lv_kernel_minor: int
    pool_lv: str
    origin: str
    data_percent: str
    metadata_percent: str
    move_pv: str
    copy_percent: str
    mirror_log: str
    convert_lv: str
    lv_uuid: str
    lv_profile: str

    @field_validator(*number_fields, mode="before")
    def convert_numbers(cls, v: Any) -> int:
        return parse_number(v)

    @field_validator(*size_fields, mode="before")
    def convert_sizes(cls, v: Any) -> int:
        return parse_unsigned(parse_size(v), MAX_SIZE, "size")


class VolumeGroupReport(Report):
    """One row of `vgs --verbose` output."""

    number_fields: ClassVar[Tuple[str, ...]] = ("pv_count", "lv_count", "snap_count")
    size_fields: ClassVar[Tuple[str, ...]] = ("vg_extent_size", "vg_size", "vg_free")

    vg_name: str
    vg_attr: str
    vg_extent_size: int
    pv_count: int
    lv_count: int
    snap_count: int
    vg_size: int
    vg_free: int
    vg_uuid: str
    vg_profile: str

    @field_validator(*number_fields, mode="before")
    def convert_counts(cls, v: Any) -> int:
        return parse_unsigned(parse_number(v), MAX_COUNT, "count")

    @field_validator(*size_fields, mode="before")
    def convert_sizes(cls, v: Any) -> int:
        return parse_unsigned(parse_size(v), MAX_SIZE, "size")


def parse_rows(model: Type[ReportT], rows: Iterable[Any]) -> List[ReportT]:
    """Convert decoded JSON rows into report records, failing on the first bad row."""
    return [model.from_row(row) for row in rows]

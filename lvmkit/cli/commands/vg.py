"""
Volume group commands.
"""

import typer

from lvmkit.cli.lib.commands import list_volume_groups
from lvmkit.cli.lib.config import load_config
from lvmkit.cli.lib.exceptions import LvmError
from lvmkit.cli.lib.lvm import VolumeGroup

app = typer.Typer(help="Volume group commands")


@app.command("list")
def list_vgs():
    """
    List volume groups.
    """
    try:
        vgs = list_volume_groups()
        if not vgs:
            typer.echo("No volume groups found")
            return
        for report in vgs:
            typer.echo(
                f"{report.vg_name} size={report.vg_size}B free={report.vg_free}B "
                f"pvs={report.pv_count} lvs={report.lv_count}"
            )
    except LvmError as e:
        typer.echo(f"Error listing volume groups: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def show(
    name: str = typer.Argument(..., help="Volume group name or path"),
):
    """
    Show the report for one volume group.
    """
    try:
        group = VolumeGroup.from_path(load_config().vg_path(name))
        report = group.report()
        typer.echo(f"name: {report.vg_name}")
        typer.echo(f"uuid: {report.vg_uuid}")
        typer.echo(f"path: {group.path}")
        typer.echo(f"attr: {report.vg_attr}")
        typer.echo(f"size: {report.vg_size}B")
        typer.echo(f"free: {report.vg_free}B")
        typer.echo(f"extent_size: {report.vg_extent_size}B")
        typer.echo(f"pv_count: {report.pv_count}")
        typer.echo(f"lv_count: {report.lv_count}")
        typer.echo(f"snap_count: {report.snap_count}")
    except LvmError as e:
        typer.echo(f"Error showing volume group: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def volumes(
    name: str = typer.Argument(..., help="Volume group name or path"),
):
    """
    List the logical volumes of a volume group.
    """
    try:
        group = VolumeGroup.from_path(load_config().vg_path(name))
        lvs = group.volumes()
        if not lvs:
            typer.echo(f"No logical volumes in {group.name}")
            return
        for lv in lvs:
            typer.echo(f"{lv.name} {lv.path}")
    except LvmError as e:
        typer.echo(f"Error listing logical volumes: {e}", err=True)
        raise typer.Exit(1)

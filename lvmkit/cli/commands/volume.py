"""
Logical volume commands.
"""

from typing import Optional

import typer

from lvmkit.cli.lib.config import load_config
from lvmkit.cli.lib.exceptions import LvmError, VolumeCreatedButNotFound
from lvmkit.cli.lib.lvm import VolumeGroup

app = typer.Typer(help="Logical volume commands")


@app.command()
def create(
    name: str = typer.Argument(..., help="Logical volume name"),
    vg: str = typer.Option(..., "--vg", help="Volume group name or path"),
    size: int = typer.Option(..., "--size", help="Virtual size in bytes"),
    thinpool: Optional[str] = typer.Option(None, "--thinpool", help="Thin pool name (default: from config)"),
):
    """
    Create a thin logical volume.
    """
    try:
        cfg = load_config()
        group = VolumeGroup.from_path(cfg.vg_path(vg))

        typer.echo(f"Creating volume: {name} in volume group: {group.name}")

        lv = group.create_volume(name, size, thinpool_name=thinpool or cfg.thinpool_name)

        typer.echo(f"Volume {lv.name} created at {lv.path}")

    except VolumeCreatedButNotFound as e:
        typer.echo(f"Error creating volume: {e} (check lvs before retrying)", err=True)
        raise typer.Exit(1)
    except (LvmError, ValueError) as e:
        typer.echo(f"Error creating volume: {e}", err=True)
        raise typer.Exit(1)

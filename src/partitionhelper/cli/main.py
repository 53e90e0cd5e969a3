"""
PartitionHelper CLI Main Entry Point.

Provides a command-line interface for partition table operations.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, NoReturn

import click
import humanize
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from partitionhelper import __version__
from partitionhelper.core.config import PartitionHelperConfig, load_config
from partitionhelper.core.errors import PartitionHelperError
from partitionhelper.core.logging import setup_logging
from partitionhelper.core.models import SUPPORTED_TABLE_TYPES
from partitionhelper.platform import get_partitioner, is_admin
from partitionhelper.platform.base import Partitioner

console = Console()


def get_partitioner_from_ctx(ctx: click.Context) -> Partitioner:
    """Get or create the partitioner from context."""
    if "partitioner" not in ctx.obj:
        config = ctx.obj.get("config") or load_config()
        ctx.obj["partitioner"] = get_partitioner(config)
    return ctx.obj["partitioner"]


def emit(ctx: click.Context, data: dict[str, Any], message: str) -> None:
    """Print a result as JSON or as a rich message."""
    if ctx.obj.get("json_output", False):
        click.echo(json.dumps(data, indent=2, default=str))
    else:
        console.print(message, soft_wrap=True)


def fail(error: PartitionHelperError) -> NoReturn:
    console.print(f"[red]✗ {escape(str(error))}[/red]", soft_wrap=True)
    sys.exit(1)


def confirm_change(description: str, yes: bool) -> None:
    """Ask before modifying a partition table; exit if declined."""
    if not is_admin():
        console.print("[yellow]⚠️  Not running as root; the partitioning tools will likely fail[/yellow]")
    if yes:
        return
    console.print(f"[red]⚠️  {escape(description)}[/red]")
    if not click.confirm("Continue?", default=False):
        console.print("[red]Confirmation failed - operation cancelled[/red]")
        sys.exit(1)


def show_plan(title: str, command: str) -> None:
    console.print(
        Panel(
            f"[yellow]DRY RUN - No changes will be made[/yellow]\n\nWould run: {escape(command)}",
            title=title,
        )
    )


def planned_command(ctx: click.Context, template: str, **values: str) -> str:
    config: PartitionHelperConfig = ctx.obj["config"]
    return getattr(config.templates, template).format(**values)


yes_option = click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
dry_run_option = click.option("--dry-run", is_flag=True, help="Show what would be done")


@click.group()
@click.version_option(version=__version__, prog_name="PartitionHelper")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    json_output: bool,
    verbose: bool,
) -> None:
    """
    PartitionHelper - partition table tool for Linux block devices.

    Wraps parted, partprobe and sgdisk.
    """
    ctx.ensure_object(dict)

    if "config" not in ctx.obj:
        ctx.obj["config"] = PartitionHelperConfig.load(config) if config else load_config()

    if verbose:
        ctx.obj["config"].logging.level = "DEBUG"
    setup_logging(ctx.obj["config"].logging)

    ctx.obj["json_output"] = json_output


@cli.command("exists")
@click.argument("device")
@click.argument("number")
@click.pass_context
def partition_exists(ctx: click.Context, device: str, number: str) -> None:
    """Check whether DEVICE has partitions."""
    partitioner = get_partitioner_from_ctx(ctx)

    try:
        exists = partitioner.is_partition_exists(device, number)
    except PartitionHelperError as e:
        fail(e)

    emit(
        ctx,
        {"device": device, "partition": number, "exists": exists},
        f"[green]Partitions present on {escape(device)}[/green]"
        if exists
        else f"[yellow]No partitions on {escape(device)}[/yellow]",
    )


@cli.command("table-type")
@click.argument("device")
@click.pass_context
def table_type(ctx: click.Context, device: str) -> None:
    """Show the partition table type of DEVICE."""
    partitioner = get_partitioner_from_ctx(ctx)

    try:
        pt_type = partitioner.get_partition_table_type(device)
    except PartitionHelperError as e:
        fail(e)

    emit(
        ctx,
        {"device": device, "table_type": pt_type},
        f"[cyan]{escape(device)}:[/cyan] {escape(pt_type)}",
    )


@cli.command("mklabel")
@click.argument("device")
@click.option(
    "--type",
    "pt_type",
    type=click.Choice(list(SUPPORTED_TABLE_TYPES)),
    default=SUPPORTED_TABLE_TYPES[0],
    help="Partition table type",
)
@yes_option
@dry_run_option
@click.pass_context
def make_label(ctx: click.Context, device: str, pt_type: str, yes: bool, dry_run: bool) -> None:
    """Create a new partition table on DEVICE."""
    if dry_run:
        show_plan(
            "Create Partition Table Plan",
            planned_command(ctx, "create_table", device=device, table_type=pt_type),
        )
        return

    confirm_change(f"This will replace the partition table on {device}", yes)
    partitioner = get_partitioner_from_ctx(ctx)

    try:
        with console.status("Creating partition table..."):
            partitioner.create_partition_table(device, pt_type)
    except PartitionHelperError as e:
        fail(e)

    emit(
        ctx,
        {"device": device, "table_type": pt_type},
        f"[green]✓ Created {escape(pt_type)} partition table on {escape(device)}[/green]",
    )


@cli.command("mkpart")
@click.argument("device")
@click.argument("name")
@yes_option
@dry_run_option
@click.pass_context
def make_partition(ctx: click.Context, device: str, name: str, yes: bool, dry_run: bool) -> None:
    """Create partition NAME over the free space of DEVICE."""
    if dry_run:
        show_plan(
            "Create Partition Plan",
            planned_command(ctx, "create_partition", device=device, part_name=name),
        )
        return

    confirm_change(f"This will modify the partition table on {device}", yes)
    partitioner = get_partitioner_from_ctx(ctx)

    try:
        with console.status("Creating partition..."):
            partitioner.create_partition(device, name)
    except PartitionHelperError as e:
        fail(e)

    emit(
        ctx,
        {"device": device, "name": name},
        f"[green]✓ Created partition {escape(name)} on {escape(device)}[/green]",
    )


@cli.command("rm")
@click.argument("device")
@click.argument("number")
@yes_option
@dry_run_option
@click.pass_context
def remove_partition(ctx: click.Context, device: str, number: str, yes: bool, dry_run: bool) -> None:
    """Delete partition NUMBER from DEVICE."""
    if dry_run:
        show_plan(
            "Delete Partition Plan",
            planned_command(ctx, "delete_partition", device=device, part_num=number),
        )
        return

    confirm_change(f"This will PERMANENTLY DELETE partition {number} on {device}", yes)
    partitioner = get_partitioner_from_ctx(ctx)

    try:
        with console.status("Deleting partition..."):
            partitioner.delete_partition(device, number)
    except PartitionHelperError as e:
        fail(e)

    emit(
        ctx,
        {"device": device, "partition": number},
        f"[green]✓ Deleted partition {escape(number)} from {escape(device)}[/green]",
    )


@cli.command("set-guid")
@click.argument("device")
@click.argument("number")
@click.argument("guid")
@yes_option
@dry_run_option
@click.pass_context
def set_guid(
    ctx: click.Context,
    device: str,
    number: str,
    guid: str,
    yes: bool,
    dry_run: bool,
) -> None:
    """Set the unique GUID of partition NUMBER on DEVICE."""
    if dry_run:
        show_plan(
            "Set Partition GUID Plan",
            planned_command(
                ctx, "set_partition_guid", device=device, part_num=number, part_uuid=guid
            ),
        )
        return

    confirm_change(f"This will change the GUID of partition {number} on {device}", yes)
    partitioner = get_partitioner_from_ctx(ctx)

    try:
        partitioner.set_partition_uuid(device, number, guid)
    except PartitionHelperError as e:
        fail(e)

    emit(
        ctx,
        {"device": device, "partition": number, "guid": guid},
        f"[green]✓ Set GUID of partition {escape(number)} on {escape(device)} to {escape(guid)}[/green]",
    )


@cli.command("get-guid")
@click.argument("device")
@click.argument("number")
@click.pass_context
def get_guid(ctx: click.Context, device: str, number: str) -> None:
    """Show the unique GUID of partition NUMBER on DEVICE."""
    partitioner = get_partitioner_from_ctx(ctx)

    try:
        guid = partitioner.get_partition_uuid(device, number)
    except PartitionHelperError as e:
        fail(e)

    emit(ctx, {"device": device, "partition": number, "guid": guid}, escape(guid))


@cli.command("info")
@click.argument("device")
@click.argument("number")
@click.option("--sector-size", type=int, default=512, help="Logical sector size in bytes")
@click.pass_context
def partition_info(ctx: click.Context, device: str, number: str, sector_size: int) -> None:
    """Show GPT details of partition NUMBER on DEVICE."""
    partitioner = get_partitioner_from_ctx(ctx)

    try:
        info = partitioner.get_partition_info(device, number)
    except PartitionHelperError as e:
        fail(e)

    if ctx.obj.get("json_output", False):
        click.echo(json.dumps(info.to_dict(sector_size), indent=2, default=str))
        return

    size_bytes = info.size_bytes(sector_size)
    table = Table(title=f"Partition {escape(number)} on {escape(device)}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Unique GUID", info.unique_guid)
    table.add_row("Type GUID", info.type_guid)
    table.add_row("Type", info.type_name)
    table.add_row("Name", info.name or "(none)")
    table.add_row("First sector", str(info.first_sector) if info.first_sector is not None else "")
    table.add_row("Last sector", str(info.last_sector) if info.last_sector is not None else "")
    table.add_row(
        "Size",
        humanize.naturalsize(size_bytes, binary=True) if size_bytes is not None else "",
    )
    table.add_row("Attribute flags", info.attribute_flags)
    console.print(table)


@cli.command("sync")
@click.argument("device", required=False, default="")
@click.pass_context
def sync_table(ctx: click.Context, device: str) -> None:
    """Re-read the partition table of DEVICE (all devices if omitted)."""
    partitioner = get_partitioner_from_ctx(ctx)

    try:
        partitioner.sync_partition_table(device)
    except PartitionHelperError as e:
        fail(e)

    emit(
        ctx,
        {"device": device or None, "synced": True},
        f"[green]✓ Re-read partition table of {escape(device) or 'all devices'}[/green]",
    )


def main() -> None:
    """Main entry point."""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled[/yellow]")
        sys.exit(130)
    except RuntimeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()

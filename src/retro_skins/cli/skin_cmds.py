"""Skin CLI commands.

This module provides the ``retro-skins`` command group: listing and previewing
skins, generating terminal configs, interactive apply, and validation.
"""

import click
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.markup import escape

from .. import __version__
from ..adapters import available_targets, get_adapter, resolve_colors, ADAPTERS
from ..config import get_config, load_config
from ..errors import MalformedColorError, RetroSkinsError, UnknownPresetError, UnknownTargetError
from ..skin_engine import SkinConfig, SkinRegistry

logger = logging.getLogger(__name__)


def _fail(message: str, hint: Optional[str] = None) -> NoReturn:
    """Report a fatal error on stderr and exit non-zero."""
    console = Console(stderr=True)
    console.print(f"[red]❌ {escape(message)}[/red]", soft_wrap=True)
    if hint:
        console.print(f"   {escape(hint)}", soft_wrap=True)
    sys.exit(1)


def _handle_error(error: Exception) -> NoReturn:
    if isinstance(error, UnknownPresetError):
        _fail(f"Unknown skin: {error.key}", f"Available: {', '.join(error.available)}")
    if isinstance(error, UnknownTargetError):
        _fail(f"Invalid terminal: {error.key}", f"Valid options: {', '.join(error.available)}")
    if isinstance(error, MalformedColorError):
        _fail(str(error))
    _fail(f"Error: {error}")


def _registry(ctx: click.Context) -> SkinRegistry:
    return ctx.obj['registry']


def _summarize_skin(console: Console, key: str, skin: SkinConfig, show_effects: bool = True) -> None:
    colors = skin.colors
    console.print(f"\n🎨 [bold]{escape(skin.name)}[/bold] ({escape(key)})")
    console.print("   Colors:")
    console.print(f"     Background: {escape(colors.background)}")
    console.print(f"     Foreground: {escape(colors.foreground)}")
    console.print(f"     Accent:     {escape(colors.accent)}")
    console.print(f"     Glow:       {escape(colors.glow)}")
    if show_effects:
        effects = ', '.join(effect.type.value for effect in skin.effects) or 'none'
        console.print(f"   Effects: {effects}", soft_wrap=True)


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="retro-skins")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              help='Path to a config.yaml file')
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Optional[Path]):
    """Generate retro terminal skins with CRT effects."""
    config = load_config(config_path) if config_path else get_config()

    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    ctx.obj['registry'] = SkinRegistry.from_config(config)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(name='list')
@click.pass_context
def list_skins(ctx: click.Context):
    """List all available retro skins."""
    console = Console()
    registry = _registry(ctx)

    table = Table(title="🎨 Available Skins", show_header=True, header_style="bold")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Name", no_wrap=True)
    table.add_column("Type", style="blue", width=8)
    table.add_column("Effects", style="magenta")

    for skin_info in registry.list_skins():
        if skin_info.get('error'):
            table.add_row(skin_info['key'], "[red]error[/red]", skin_info['type'],
                          escape(skin_info['error']))
            continue
        table.add_row(
            skin_info['key'],
            escape(skin_info['name']),
            skin_info['type'],
            str(len(skin_info['effects'])),
        )

    console.print()
    console.print(table)
    console.print(Panel(
        Text.assemble(
            ("💡 Use ", "dim"),
            ("retro-skins preview <skin-name>", "cyan"),
            (" to inspect a skin, or ", "dim"),
            ("retro-skins generate <terminal> <skin-name>", "cyan"),
            (" to build a config.", "dim"),
        ),
        border_style="blue",
    ))


@cli.command()
@click.argument('skin', required=False)
@click.option('--terminal', '-t',
              help=f"Preview for specific terminal ({', '.join(available_targets())})")
@click.pass_context
def preview(ctx: click.Context, skin: Optional[str], terminal: Optional[str]):
    """Preview a skin configuration (shows all if no name given)."""
    console = Console()
    registry = _registry(ctx)
    config = ctx.obj['config']

    try:
        adapter = get_adapter(terminal) if terminal else None

        if skin is None:
            console.print("\n🎨 [bold]All Skins Preview[/bold]\n")
            for skin_info in registry.list_skins():
                console.print(f"  [cyan]{escape(skin_info['key'])}[/cyan]:")
                if skin_info.get('error'):
                    console.print(f"    [red]Error:[/red]     {escape(skin_info['error'])}",
                                  soft_wrap=True)
                    continue
                console.print(f"    Name:      {escape(skin_info['name'])}")
                console.print(f"    Colors:    {escape(skin_info['background'])} → "
                              f"{escape(skin_info['foreground'])}")
                console.print(f"    Effects:   {len(skin_info['effects'])} active")
            console.print()
            return

        skin_config = registry.require(skin)
        _summarize_skin(console, skin, skin_config, config.show_effects)

        if adapter is not None:
            rendered = adapter.render(skin_config)
            console.print(f"\n📄 {adapter.target.value.upper()} Preview:")
            console.print('─' * 40)
            click.echo(rendered, nl=False)
        console.print()

    except (RetroSkinsError, ValueError) as e:
        _handle_error(e)


@cli.command()
@click.argument('terminal')
@click.argument('skin')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output file path (stdout if not specified)')
@click.option('--dry-run', is_flag=True, help='Preview without writing files')
@click.pass_context
def generate(ctx: click.Context, terminal: str, skin: str, output: Optional[Path], dry_run: bool):
    """Generate terminal config for a skin (non-interactive)."""
    registry = _registry(ctx)

    try:
        adapter = get_adapter(terminal)
        skin_config = registry.require(skin)
        rendered = adapter.render(skin_config)
    except (RetroSkinsError, ValueError) as e:
        _handle_error(e)

    if dry_run:
        console = Console()
        console.print(f"\n🔍 Dry Run - {adapter.target.value.upper()} config for "
                      f"\"{escape(skin_config.name)}\":\n", soft_wrap=True)
        click.echo(rendered, nl=False)
        console.print(f"\n✅ Would output to: {escape(str(output)) if output else 'stdout'}",
                      soft_wrap=True)
        return

    if output:
        _write_output(output, rendered)
    else:
        click.echo(rendered, nl=False)


def _write_output(output: Path, content: str) -> None:
    output_path = output.expanduser().resolve()
    try:
        output_path.write_text(content, encoding='utf-8')
    except OSError as e:
        _fail(f"Error writing {output_path}: {e}")
    logger.info(f"Wrote {len(content)} characters to {output_path}")
    Console().print(f"✅ Config written to {escape(str(output_path))}", soft_wrap=True)


@cli.command()
@click.argument('terminal', required=False)
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output file path (stdout if not specified)')
@click.pass_context
def apply(ctx: click.Context, terminal: Optional[str], output: Optional[Path]):
    """Interactive: apply a skin to your terminal.

    TERMINAL defaults to ``default_terminal`` from the config file.
    """
    registry = _registry(ctx)
    console = Console()

    if terminal is None:
        terminal = ctx.obj['config'].default_terminal
        logger.debug(f"No terminal given; using configured default {terminal!r}")

    try:
        adapter = get_adapter(terminal)
    except UnknownTargetError as e:
        _handle_error(e)

    keys = registry.keys()
    console.print("\n🎨 Available Skins:")
    for index, key in enumerate(keys, start=1):
        console.print(f"  {index}. [cyan]{escape(key)}[/cyan]")

    choice = click.prompt("Choose a skin", type=click.Choice(keys), default=keys[0])

    try:
        rendered = adapter.render(registry.require(choice))
    except (RetroSkinsError, ValueError) as e:
        _handle_error(e)

    banner = adapter.install_banner()
    if banner:
        rendered = f"{banner}\n\n{rendered}"
    else:
        console.print(f"[dim]{escape(adapter.install_hint)}[/dim]")

    if output:
        _write_output(output, rendered)
    else:
        console.print("\n📄 Generated Config:\n")
        click.echo(rendered, nl=False)


@cli.command()
@click.argument('skin', required=False)
@click.pass_context
def validate(ctx: click.Context, skin: Optional[str]):
    """Validate skins and report color or intensity issues."""
    console = Console()
    registry = _registry(ctx)

    if skin is not None and skin not in registry:
        _handle_error(UnknownPresetError(skin, registry.keys()))

    keys = [skin] if skin else registry.keys()
    broken = 0
    warnings = 0

    console.print(f"\n[bold]Validating {len(keys)} skin(s)...[/bold]\n")

    for key in keys:
        issues = registry.validate(key)

        renderable = True
        try:
            resolve_colors(registry.require(key))
        except (RetroSkinsError, ValueError):
            renderable = False

        if not renderable:
            console.print(f"[cyan]{escape(key)}[/cyan] [red]❌ ERROR[/red]")
            broken += 1
        elif issues:
            console.print(f"[cyan]{escape(key)}[/cyan] [yellow]⚠️  {len(issues)} warning(s)[/yellow]")
            warnings += len(issues)
        else:
            console.print(f"[cyan]{escape(key)}[/cyan] [green]✅ Valid[/green]")

        for issue in issues:
            console.print(f"  • {escape(issue)}", soft_wrap=True)

    console.print()
    if broken:
        console.print(f"[red]❌ {broken} skin(s) cannot be rendered.[/red]")
        sys.exit(1)
    if warnings:
        console.print(f"[yellow]⚠️  Found {warnings} warning(s); skins still render.[/yellow]")
    else:
        console.print(f"[green]✅ All {len(keys)} skin(s) are valid![/green]")


@cli.command()
def targets():
    """List supported terminal emulators."""
    console = Console()

    table = Table(title="Supported Terminals", show_header=True, header_style="bold")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Terminal")
    table.add_column("File", style="magenta")

    for target, adapter in ADAPTERS.items():
        table.add_row(target.value, adapter.display_name, adapter.filename)

    console.print(table)

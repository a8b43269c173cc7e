"""Command-line interface package for Retro Skins."""

__all__ = ["main"]


def main(*args, **kwargs):
    """Entry point that defers heavy imports until needed."""
    from .skin_cmds import cli

    return cli(*args, **kwargs)

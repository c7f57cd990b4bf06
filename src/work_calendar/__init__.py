"""Personal work calendar application package."""

from __future__ import annotations


def main() -> None:
    from .ui.app import run_gui

    run_gui()


__all__ = ["main"]

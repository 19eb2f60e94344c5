"""Passive observers notified once per simulated day."""

from grassland.observers.console_display import ConsoleMapDisplay, render_world

__all__ = ["ConsoleMapDisplay", "render_world"]

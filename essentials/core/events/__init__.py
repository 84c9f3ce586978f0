"""
Event System - Change notification.

Provides:
- Signal: Simple synchronous observer used by commands to announce
  availability changes and by ConfigManager to announce setting changes.

Usage:
    from essentials.core.events import Signal

    changed = Signal("CanExecuteChanged")
    changed.connect(on_changed)
    changed.emit(command)
"""
from .observer import Signal


__all__ = ["Signal"]

"""Local state persistence for the CLI."""

from .store import DEFAULT_STATE_PATH, STATE_VERSION, StateStore

__all__ = ["DEFAULT_STATE_PATH", "STATE_VERSION", "StateStore"]

"""Chess rules engine over an immutable, append-only move history."""

__version__ = "0.1.0"

"""Framework-agnostic domain types, settings, and logging."""

"""Output schemas for nodelinks commands, registered per (domain, command)."""

"""npm subcommands that receive the configured ``--registry``."""

REGISTRY_COMMANDS = frozenset({"install", "uninstall", "ci"})

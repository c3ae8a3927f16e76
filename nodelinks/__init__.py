"""nodelinks - shared node_modules store with registry mirror selection."""

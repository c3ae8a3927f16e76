"""Safety violation error."""

from pathlib import Path


class UnsafePathError(Exception):
    """Raised when a shared store path contains the tool's own global install.

    npm would treat that install as a managed package and delete it on the next
    install/uninstall run in the store.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(
            f"Refusing to use {self.path}: its node_modules contains the nodelinks installation; "
            "npm would remove nodelinks itself"
        )

"""Link management error."""

from pathlib import Path


class LinkError(Exception):
    """Raised when a project link cannot be created or removed safely."""

    def __init__(self, message: str, path: str | Path):
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")

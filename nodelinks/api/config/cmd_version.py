"""Version command - returns nodelinks version information."""

from collections.abc import Iterator

from ...utils.get_package_version import get_package_version
from ..StageResult import StageResult
from . import ConfigVersionOutput


def cmd_version() -> StageResult:
    """Get nodelinks version information."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Getting package version...")
        version = get_package_version()

        yield (1.0, "Complete")
        result_obj.result = f"nodelinks version: {version}"
        result_obj.output = ConfigVersionOutput(
            errors=[],
            warnings=[],
            version=version,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Getting version information...", progress_callback=do_work)

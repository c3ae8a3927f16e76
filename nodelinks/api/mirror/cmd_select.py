"""Probe mirrors, rank them and let the user pick one."""

import asyncio
from collections.abc import Iterator

from ..config.InitializationCancelled import InitializationCancelled
from ..config.read_mirror_timeout import read_mirror_timeout
from ..guard.UnsafePathError import UnsafePathError
from ..prompt.Prompt import Prompt
from ..registry.RegistryCatalog import RegistryCatalog
from ..StageResult import StageResult
from . import MirrorSelectOutput
from .describe_result import describe_result
from .MirrorSelector import MirrorSelector
from .probe_one import probe_one
from .Prober import Prober
from .rank_all import rank_all
from .set_repo import set_repo


def cmd_select(
    catalog: RegistryCatalog,
    prompt: Prompt,
    target: str | None = None,
    prober: Prober | None = None,
) -> StageResult:
    """Interactive mirror choice.

    With a concrete ``target`` only that mirror is probed and the user is asked
    whether to switch to it. Otherwise every mirror is probed and shown in
    pages of ten, fastest first, with the custom slot last.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        timeout = read_mirror_timeout()
        resolved = catalog.resolve_input(target)
        results: list[dict] = []

        try:
            if resolved.is_address:
                yield (0.2, f"Probing {resolved.address}...")
                probe = asyncio.run(probe_one(resolved.address, timeout, prober))
                results = [describe_result(probe, catalog)]
                if not probe.ok:
                    yield (1.0, "Complete")
                    result_obj.result = f"{resolved.address}: probe failed ({probe.error})"
                    result_obj.output = MirrorSelectOutput(
                        errors=[f"{resolved.address}: {probe.error}"],
                        warnings=[],
                        selected="",
                        changed=False,
                        results=results,
                    ).model_dump(mode="python")
                    result_obj.success = False
                    return
                prompt.say(f"{resolved.address}: {probe.elapsed_ms}ms")
                answer = prompt.ask("Use this mirror? (y/n): ").lower()
                selected = resolved.address if answer == "y" else None
            else:
                yield (0.2, f"Probing {len(catalog.probe_targets())} mirrors (timeout {timeout}ms)...")
                ranking = asyncio.run(rank_all(catalog, timeout, prober))
                results = [describe_result(r, catalog) for r in ranking.results]
                yield (0.6, "Waiting for selection...")
                selected = MirrorSelector(ranking.entries(catalog), prompt).run()

            if not selected:
                yield (1.0, "Complete")
                result_obj.result = "No mirror selected; settings unchanged"
                result_obj.output = MirrorSelectOutput(
                    errors=[],
                    warnings=[],
                    selected="",
                    changed=False,
                    results=results,
                ).model_dump(mode="python")
                result_obj.success = True
                return

            yield (0.8, "Saving settings...")
            config, _previous = set_repo(catalog, prompt, selected)
        except (InitializationCancelled, UnsafePathError, RuntimeError, EOFError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Mirror not changed: {e}"
            result_obj.output = MirrorSelectOutput(
                errors=[str(e)],
                warnings=[],
                selected="",
                changed=False,
                results=results,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Registry mirror set to {config.repo}"
        result_obj.output = MirrorSelectOutput(
            errors=[],
            warnings=[],
            selected=config.repo,
            changed=True,
            results=results,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Ranking registry mirrors...", progress_callback=do_work)

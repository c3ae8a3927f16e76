"""Interactive first-run initialization."""

import asyncio
from pathlib import Path

from ...constants import DEFAULT_MIRROR_TIMEOUT_MS
from ...utils.get_home_dir import get_home_dir
from ...utils.get_logger import get_logger
from ...utils.normalize_path import normalize_path
from ..guard.is_dangerous_path import is_dangerous_path
from ..mirror.Prober import Prober
from ..mirror.rank_all import rank_all
from ..mirror.RankingResult import RankingResult
from ..prompt.Prompt import Prompt
from ..registry.RegistryCatalog import RegistryCatalog
from ..registry.TargetKind import TargetKind
from .InitializationCancelled import InitializationCancelled
from .NodelinksConfig import NodelinksConfig

logger = get_logger("config")


def _ask_folder_path(prompt: Prompt, default_path: Path) -> Path:
    while True:
        answer = prompt.ask(f"Shared dependency directory (default: {default_path}, q to quit): ")
        if answer.lower() == "q":
            raise InitializationCancelled()

        folder_path = normalize_path(answer or default_path)
        if is_dangerous_path(folder_path):
            prompt.say(f"{folder_path} contains the global nodelinks installation; choose another directory.")
            continue

        if prompt.ask(f"Use {folder_path}? (y/n): ").lower() == "y":
            return folder_path
        prompt.say("Enter the directory again.")


def _ask_mirror(catalog: RegistryCatalog, prompt: Prompt, ranking: RankingResult) -> str:
    by_target = {r.target: r for r in ranking.results}
    prompt.say("Registry mirrors:")
    for i, mirror in enumerate(catalog.mirrors, start=1):
        if mirror.is_custom:
            prompt.say(f"  {i}. {mirror.name} (custom)")
            continue
        result = by_target.get(mirror.value)
        latency = f"{result.elapsed_ms}ms" if result is not None and result.ok else "unreachable"
        prompt.say(f"  {i}. {mirror.name} ({mirror.value}) [{latency}]")

    default_index = catalog.index_of(ranking.recommended) or 1
    answer = prompt.ask(f"Mirror index, alias or address (default: {default_index}): ") or str(default_index)

    target = catalog.resolve_input(answer)
    if target.kind is TargetKind.CUSTOM:
        custom = prompt.ask("Custom registry address (https:// recommended): ")
        return custom or ranking.recommended
    if target.kind is TargetKind.ALL or (answer.isdigit() and target.address == answer):
        prompt.say(f"'{answer}' is not a mirror index, using {ranking.recommended}")
        return ranking.recommended
    return target.address


def initialize(
    catalog: RegistryCatalog,
    prompt: Prompt,
    path: Path | None = None,
    prober: Prober | None = None,
) -> NodelinksConfig:
    """Ask for the shared directory and mirror, then save the settings.

    Raises:
        InitializationCancelled: If the user quits at the directory question
        UnsafePathError: If the chosen directory became unsafe before saving
    """
    prompt.say("Setting up nodelinks...")
    folder_path = _ask_folder_path(prompt, get_home_dir("deps"))
    folder_path.mkdir(parents=True, exist_ok=True)

    prompt.say("Probing registry mirrors, please wait...")
    ranking = asyncio.run(rank_all(catalog, DEFAULT_MIRROR_TIMEOUT_MS, prober))
    repo = _ask_mirror(catalog, prompt, ranking)

    config = NodelinksConfig(folder_path=folder_path, repo=repo, mirror_timeout=DEFAULT_MIRROR_TIMEOUT_MS)
    config.save(catalog, path)
    logger.info("Initialized settings: folderPath=%s repo=%s", config.folder_path, config.repo)

    prompt.say("Initialization complete.")
    prompt.say(f"  Shared dependency directory: {config.folder_path}")
    prompt.say(f"  Registry mirror: {config.repo}")
    return config

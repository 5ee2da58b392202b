"""Suite loader — runs suite-definition files and collects their suites."""

from __future__ import annotations

import logging
import runpy
from pathlib import Path
from typing import Iterable

from src.api.suite_api import SuiteApi
from src.models.config import ProjectConfig
from src.models.suite import Suite

logger = logging.getLogger(__name__)


def collect_suite_files(paths: Iterable[str | Path]) -> list[Path]:
    """Expand directories into the ``*.py`` files they contain, sorted."""
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if not path.exists():
            raise FileNotFoundError(f"Suite path not found: {path}")
        if path.is_dir():
            files.extend(
                p for p in sorted(path.rglob("*.py")) if not p.name.startswith("_")
            )
        else:
            files.append(path)
    return files


def load_suites(paths: Iterable[str | Path], config: ProjectConfig) -> Suite:
    """Run every suite file with ``qa`` bound to a suite API and return the root suite."""
    root = Suite.create_root()
    files = collect_suite_files(paths)
    for file in files:
        logger.debug("Loading suites from %s", file)
        api = SuiteApi(root, config.browser_ids, file=str(file), tolerance=config.tolerance)
        runpy.run_path(str(file), init_globals={"qa": api})

    logger.info(
        "Loaded %d suites with %d states from %d files",
        sum(1 for _ in root.iter_suites()) - 1, len(root.deep_states), len(files),
    )
    return root

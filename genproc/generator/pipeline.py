"""Per-file processing and the generator run loop."""

import logging
from collections.abc import Iterable
from pathlib import Path

from . import golang
from .config import GeneratorConfig
from .metadata import build_specs, missing
from .parser import parse_imports
from .scanner import scan_file
from .search import search_files
from .types import GenerationReport, MessageSpec

log = logging.getLogger(__name__)


def process_file(
    path: str | Path,
    config: GeneratorConfig,
    report: GenerationReport,
    owners: dict[Path, MessageSpec],
) -> None:
    """Generate handlers for every valid annotated type in one file.

    owners maps each output path written during the run to the record that
    wrote it, so a second write to the same path is reported as a conflict.
    """
    imports = parse_imports(path)

    for candidate in scan_file(path, imports):
        for spec in build_specs(candidate):
            parts = missing(spec)
            if parts:
                log.warning(
                    "%s: %s (sig %s) invalid, missing %s; skipping",
                    spec.source,
                    spec.type_name or "<unnamed>",
                    spec.signature or "<none>",
                    ", ".join(parts),
                )
                report.skipped.append(spec)
                continue

            target = golang.output_path(spec, config)
            previous = owners.get(target)
            if previous is not None:
                log.warning(
                    "%s: %s (sig %s) overwrites output of %s (sig %s)",
                    target,
                    spec.type_name,
                    spec.signature,
                    previous.source,
                    previous.signature,
                )
                if target not in report.conflicts:
                    report.conflicts.append(target)

            golang.emit(spec, config)
            if previous is None:
                report.written.append(target)
            owners[target] = spec


def process_files(paths: Iterable[Path], config: GeneratorConfig) -> GenerationReport:
    """Process files one after another until the feed is exhausted."""
    report = GenerationReport()
    owners: dict[Path, MessageSpec] = {}

    for path in paths:
        report.files += 1
        process_file(path, config, report, owners)

    return report


def run(config: GeneratorConfig) -> GenerationReport:
    """Search the configured root and generate handlers for everything found."""
    log.info("Searching %s for net.Msg specs...", config.root)
    return process_files(search_files(config.root, config.pattern), config)

"""The build: compile, transform, write."""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from functools import partial

from ..blobs import CssBlob, Stage
from ..css.amp import sanitize_amp
from ..css.media import split_media
from ..css.minify import minify_blobs
from ..css.svg_inline import inline_svg_blobs
from ..errors import BuildError
from ..models import BuildConfig, BuildReport
from .compiler import compile_sources
from .writer import write_blobs

logger = logging.getLogger(__name__)


def build_stages(config: BuildConfig) -> list[Stage]:
    """Ordered transforms between the compiler and the writer."""
    stages: list[Stage] = [
        inline_svg_blobs,
        partial(split_media, buckets=config.buckets),
        partial(sanitize_amp, amp_filename=config.amp_filename),
    ]
    if config.minify:
        stages.append(minify_blobs)
    return stages


def _stage_name(stage: Stage) -> str:
    func = stage.func if isinstance(stage, partial) else stage
    return getattr(func, "__name__", repr(func))


def run_stages(blobs: list[CssBlob], stages: list[Stage]) -> list[CssBlob]:
    for stage in stages:
        blobs = stage(blobs)
        logger.debug("%s -> %s", _stage_name(stage), [b.path for b in blobs])
    return blobs


def build_styles(config: BuildConfig | None = None) -> BuildReport:
    """Run one full build.

    Nothing is written unless every stage succeeds, so a failed build
    leaves the previous output in place.

    Raises:
        BuildError: compilation, SVG encoding or bucket problems
    """
    config = config or BuildConfig()
    started = time.perf_counter()

    sources = compile_sources(config)
    blobs = run_stages(sources, build_stages(config))

    paths = [b.path for b in blobs]
    if len(set(paths)) != len(paths):
        raise BuildError(f"pipeline produced duplicate outputs: {paths}")

    outputs = write_blobs(blobs, config.output_dir)
    duration_ms = (time.perf_counter() - started) * 1000.0

    report = BuildReport(
        finished_at=datetime.now(UTC),
        duration_ms=round(duration_ms, 1),
        entries=[b.path for b in sources],
        outputs=outputs,
    )
    logger.info(
        "Built %d stylesheet(s) in %.0f ms (%d changed)",
        len(outputs),
        duration_ms,
        report.changed_count,
    )
    return report

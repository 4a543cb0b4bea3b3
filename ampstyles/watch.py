"""Rebuild stylesheets whenever a source file changes."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable
from fnmatch import fnmatch
from functools import partial
from pathlib import Path
from typing import Any

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from .build.pipeline import build_styles
from .config import DEBOUNCE_SECONDS, WATCH_GLOB
from .errors import BuildError
from .models import BuildConfig

logger = logging.getLogger(__name__)

_CHANGE_EVENTS = {EVENT_TYPE_CREATED, EVENT_TYPE_DELETED, EVENT_TYPE_MODIFIED, EVENT_TYPE_MOVED}


class RebuildScheduler:
    """Runs builds one at a time on a worker thread.

    Requests that arrive while a build is running collapse into a single
    follow-up build. A build starts only once no request has arrived for
    ``debounce`` seconds, so a burst of saves triggers one rebuild.
    """

    def __init__(self, build: Callable[[], Any], debounce: float = DEBOUNCE_SECONDS):
        self._build = build
        self._debounce = max(0.0, float(debounce))
        self._cond = threading.Condition()
        self._pending = False
        self._running = False
        self._requests = 0
        self._stopping = False
        self._thread: threading.Thread | None = None
        self.builds = 0
        self.failures = 0

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._loop, name="ampstyles-rebuild", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        with self._cond:
            self._stopping = True
            self._cond.notify_all()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def request(self) -> None:
        with self._cond:
            self._pending = True
            self._requests += 1
            self._cond.notify_all()

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until no build is pending or running."""
        with self._cond:
            return self._cond.wait_for(lambda: not self._pending and not self._running, timeout)

    def run_once(self) -> bool:
        """Build now on the calling thread. Returns False if the build failed."""
        self.builds += 1
        try:
            self._build()
        except BuildError as e:
            self.failures += 1
            logger.error("Build failed, keeping previous output: %s", e)
            return False
        except Exception:
            self.failures += 1
            logger.exception("Unexpected error during build")
            return False
        return True

    def _loop(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._pending or self._stopping)
                if self._stopping:
                    return
                while self._debounce:
                    seen = self._requests
                    self._cond.wait_for(
                        lambda: self._stopping or self._requests != seen, timeout=self._debounce
                    )
                    if self._stopping:
                        return
                    if self._requests == seen:
                        break
                self._pending = False
                self._running = True
            try:
                self.run_once()
            finally:
                with self._cond:
                    self._running = False
                    self._cond.notify_all()


class ScssChangeHandler(FileSystemEventHandler):
    """Asks the scheduler for a rebuild when a stylesheet source changes."""

    def __init__(self, scheduler: RebuildScheduler, pattern: str = WATCH_GLOB):
        super().__init__()
        self.scheduler = scheduler
        self.pattern = pattern

    def _matches(self, path: str | bytes) -> bool:
        return bool(path) and fnmatch(Path(os.fsdecode(path)).name, self.pattern)

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type not in _CHANGE_EVENTS:
            return
        dest = getattr(event, "dest_path", "")
        if self._matches(event.src_path) or self._matches(dest):
            logger.info("%s %s", event.event_type.capitalize(), os.fsdecode(event.src_path))
            self.scheduler.request()


def watch(config: BuildConfig | None = None, debounce: float = DEBOUNCE_SECONDS) -> None:
    """Build once, then rebuild on every source change until interrupted."""
    config = config or BuildConfig()
    scheduler = RebuildScheduler(partial(build_styles, config), debounce=debounce)
    scheduler.run_once()

    observer = Observer()
    observer.schedule(ScssChangeHandler(scheduler), str(config.source_dir), recursive=True)
    scheduler.start()
    observer.start()
    logger.info("Watching %s for changes (Ctrl+C to stop)", config.source_dir)
    try:
        while observer.is_alive():
            observer.join(1.0)
    except KeyboardInterrupt:
        logger.info("Stopping watcher")
    finally:
        observer.stop()
        observer.join()
        scheduler.stop()

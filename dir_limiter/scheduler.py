from __future__ import annotations

import logging
from datetime import datetime

from apscheduler.events import EVENT_JOB_ERROR, JobExecutionEvent
from apscheduler.schedulers.blocking import BlockingScheduler

from .eviction import enforce_size_limit
from .models import EvictionResult, LimitConfig


LOGGER = logging.getLogger("dir_limiter")


class LimitScheduler:
    """Re-runs the size limit on an interval until stopped or a run fails."""

    def __init__(self, *, config: LimitConfig, interval_seconds: int):
        if int(interval_seconds) <= 0:
            raise ValueError("interval_seconds must be greater than 0")
        self._config = config
        self._interval_seconds = int(interval_seconds)
        self._failure: BaseException | None = None
        self.last_result: EvictionResult | None = None

        self._scheduler = BlockingScheduler()
        self._scheduler.add_listener(self._on_job_error, EVENT_JOB_ERROR)
        self._scheduler.add_job(
            self.run_once,
            "interval",
            seconds=self._interval_seconds,
            next_run_time=datetime.now(),
            max_instances=1,
            coalesce=True,
        )

    @property
    def is_running(self) -> bool:
        return bool(self._scheduler.running)

    def run_once(self) -> EvictionResult:
        result = enforce_size_limit(self._config)
        self.last_result = result
        return result

    def run_forever(self) -> None:
        LOGGER.info(
            "[LIMITER]: checking %s every %s seconds",
            self._config.root_directory,
            self._interval_seconds,
        )
        try:
            self._scheduler.start()
        except KeyboardInterrupt:
            self.stop()
        if self._failure is not None:
            raise self._failure

    def stop(self) -> None:
        if not self.is_running:
            return
        self._scheduler.shutdown(wait=False)

    def _on_job_error(self, event: JobExecutionEvent) -> None:
        self._failure = event.exception
        LOGGER.error("[LIMITER]: run failed, stopping scheduler: %s", event.exception)
        self.stop()

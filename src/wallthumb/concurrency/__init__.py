"""Concurrency: windowed batch scheduling and in-flight de-duplication."""

from wallthumb.concurrency.batch import BatchScheduler
from wallthumb.concurrency.inflight import InFlightRegistry

__all__ = ["BatchScheduler", "InFlightRegistry"]

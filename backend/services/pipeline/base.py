"""Abstract base class for lazily loaded model services."""

import asyncio
from abc import ABC, abstractmethod
import logging

logger = logging.getLogger(__name__)


class BaseModelService(ABC):
    """Base class for services backed by a model that is slow to load.

    Subclasses must implement:
        - model_name: identifier used in logs and health output
        - load(): load model artifacts into memory (blocking, runs in a thread)

    Loading is single-flight: concurrent callers of ensure_loaded() wait on
    the same in-flight load instead of starting their own.
    """

    model_name: str = ""

    def __init__(self) -> None:
        self._loaded = False
        self._load_lock = asyncio.Lock()

    @abstractmethod
    def load(self) -> None:
        """Load model weights/artifacts. Called at most once per success."""

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    async def ensure_loaded(self) -> None:
        """Load model if not already loaded."""
        if self._loaded:
            return
        async with self._load_lock:
            if self._loaded:
                return
            logger.info("Loading model: %s", self.model_name)
            await asyncio.to_thread(self.load)
            self._loaded = True
            logger.info("Model loaded: %s", self.model_name)

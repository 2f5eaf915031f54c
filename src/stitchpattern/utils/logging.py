"""Logging utilities for Stitchpattern."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class PipelineStats:
    """Statistics from an editing session."""

    scheduled_count: int = 0
    recompute_count: int = 0
    superseded_count: int = 0
    error_count: int = 0
    errors: list[tuple[int, str]] = field(default_factory=list)
    durations_ms: list[float] = field(default_factory=list)

    @property
    def avg_recompute_ms(self) -> float | None:
        """Average recomputation time, None before the first run."""
        if not self.durations_ms:
            return None
        return sum(self.durations_ms) / len(self.durations_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    # Repeated runs in one process must not stack handlers
    for handler in list(root_logger.handlers):
        if getattr(handler, "_stitchpattern", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._stitchpattern = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._stitchpattern = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("stitchpattern")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class PatternLogger:
    """Logger for tracking recomputations and their statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = PipelineStats()

    def log_scheduled(self, generation: int, superseded: int | None) -> None:
        """Log a recomputation request, and the request it replaced."""
        self._stats.scheduled_count += 1
        if superseded is not None:
            self._stats.superseded_count += 1
            self._logger.debug(
                "Recompute superseded",
                generation=superseded,
                replaced_by=generation,
            )
        self._logger.debug("Recompute scheduled", generation=generation)

    def log_complete(
        self,
        generation: int,
        width: int,
        height: int,
        stitches: int,
        contours: int,
        duration_ms: float,
    ) -> None:
        """Log a finished recomputation."""
        self._logger.info(
            "Pattern generated",
            generation=generation,
            width=width,
            height=height,
            stitches=stitches,
            contours=contours,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.recompute_count += 1
        self._stats.durations_ms.append(duration_ms)

    def log_error(self, generation: int, error: Exception) -> None:
        """Log a failed recomputation."""
        self._logger.error(
            "Pattern generation failed",
            generation=generation,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((generation, str(error)))

    @property
    def stats(self) -> PipelineStats:
        """Get current pipeline statistics."""
        return self._stats

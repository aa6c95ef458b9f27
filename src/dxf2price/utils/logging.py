"""Logging utilities for dxf2price."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ProcessingStats:
    """Statistics from processing one drawing."""

    entity_count: int = 0
    unknown_count: int = 0
    shape_count: int = 0
    open_shape_count: int = 0
    dropped_count: int = 0
    invalid_count: int = 0
    errors: list[str] = field(default_factory=list)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
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

    logger = structlog.get_logger("dxf2price")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking pipeline events and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_drawing_loaded(self, path: str, entity_count: int) -> None:
        """Log a loaded drawing."""
        self._logger.info("Drawing loaded", path=path, entities=entity_count)
        self._stats.entity_count = entity_count

    def log_unknown_entities(self, unknown: dict[str, int]) -> None:
        """Log primitives that were not interpreted."""
        if not unknown:
            return
        self._logger.info("Unknown entities", **unknown)
        self._stats.unknown_count += sum(unknown.values())

    def log_shapes_found(self, total: int, closed: int) -> None:
        """Log stitching results."""
        self._logger.debug("Shapes stitched", total=total, closed=closed, open=total - closed)
        self._stats.shape_count = total
        self._stats.open_shape_count = total - closed

    def log_shape_dropped(self, message: str) -> None:
        """Log a shape that could not be measured."""
        self._logger.warning("Shape dropped", error=message)
        self._stats.dropped_count += 1
        self._stats.errors.append(message)

    def log_shape_invalid(self, message: str) -> None:
        """Log a shape kept despite an invalid polygon."""
        self._logger.warning("Shape invalid", error=message)
        self._stats.invalid_count += 1
        self._stats.errors.append(message)

    def log_main_shape(self, area: float, shape_count: int) -> None:
        """Log the resolved outer contour."""
        self._logger.debug("Main shape resolved", area=round(area, 3), shapes=shape_count)

    def log_includes_check_skipped(self, timeout_ms: float) -> None:
        """Log a nesting check that ran out of time."""
        self._logger.warning("Nesting check skipped", timeout_ms=timeout_ms)

    def log_file_error(self, error: Exception) -> None:
        """Log a file-level failure."""
        self._logger.error(
            "Drawing processing failed",
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.errors.append(str(error))

    def log_complete(
        self,
        area: float,
        perimeter: float,
        width: float,
        height: float,
        duration_ms: float,
    ) -> None:
        """Log a completed measurement."""
        self._logger.info(
            "Drawing measured",
            area=round(area, 3),
            perimeter=round(perimeter, 3),
            width=round(width, 3),
            height=round(height, 3),
            duration_ms=round(duration_ms, 2),
        )

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats

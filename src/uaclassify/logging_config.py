"""Logging configuration for the uaclassify command-line tool.

Console output goes to stderr so that classification results on stdout stay
machine-readable. An optional log file captures DEBUG+ with logger names.
The library modules never call this; only the CLI does.
"""

import logging
from pathlib import Path


def setup_logging(
    console_level: int = logging.WARNING,
    log_file: str | None = None,
) -> Path | None:
    """Configure logging with a console handler and an optional file handler.

    Attaches handlers to the root logger:

    * **Console** -- ``console_level`` (default WARNING), short time format.
    * **File** -- DEBUG, full datetime with logger name (only if
      ``log_file`` is given).

    Existing handlers on the root logger are cleared first so that calling
    this function multiple times (e.g. in tests) does not produce duplicate
    output.

    Args:
        console_level: Minimum level for console output.
        log_file: Optional path of a log file. Parent directories are
            created as needed.

    Returns:
        Path to the log file, or None when logging to console only.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    # Console handler: concise format with short time.
    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-5s %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(console)

    if log_file is None:
        return None

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # File handler: full format with logger name for diagnostics.
    file_handler = logging.FileHandler(str(log_path), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-5s [%(name)s] %(message)s")
    )
    root.addHandler(file_handler)

    return log_path

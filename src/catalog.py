"""
Catalog - Runs the design pattern demos.

The Singleton family (conceptual, thread-safe, naive and the shared
Logger) plus Memento, Observer, Builder and Visitor. Each demo is a
self-contained example with its own entry point. The catalog only wires
up configuration and diagnostic logging, applies the configured threshold
to the shared Logger, and runs the requested demos:

    python src/catalog.py                  # all demos
    python src/catalog.py logger           # a single demo
"""

import os
import sys
import logging
from functools import partial
from pathlib import Path
from dotenv import load_dotenv

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from log_utils import DEFAULT_LEVEL, Level, parse_level
from patterns import builder, memento, observer, visitor
from singletons import (
    conceptual_singleton,
    logger_singleton,
    naive_singleton,
    thread_safe_singleton,
)

load_dotenv()


def resolve_log_level(value: str | None) -> str:
    """Return a valid stdlib logging level name, falling back to INFO."""
    value = (value or "INFO").upper()
    if not isinstance(getattr(logging, value, None), int):
        return "INFO"
    return value


def resolve_demo_delay(value: str | None, default: float = 0.1) -> float:
    """Parse the simulated slow start in seconds. Never negative."""
    try:
        return max(0.0, float(value if value is not None else default))
    except ValueError:
        return default


# Configuration from environment with validation
LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL", "INFO"))
LOG_FILE = os.getenv("LOG_FILE", None)
LOGGER_LEVEL = os.getenv("LOGGER_LEVEL", DEFAULT_LEVEL.name)
DEMO = os.getenv("DEMO", None)
DEMO_DELAY = resolve_demo_delay(os.getenv("DEMO_DELAY"))

logger = logging.getLogger("Catalog")

DEMOS = {
    "singleton": conceptual_singleton.main,
    "thread-safe-singleton": partial(thread_safe_singleton.main, delay=DEMO_DELAY),
    "naive-singleton": partial(naive_singleton.main, delay=DEMO_DELAY),
    "logger": logger_singleton.main,
    "memento": memento.main,
    "observer": observer.main,
    "builder": builder.main,
    "visitor": visitor.main,
}


def setup_logging(log_file: str = LOG_FILE) -> None:
    """Configure diagnostics on stderr, plus a file when one is configured."""
    handlers = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        handlers=handlers,
    )


def resolve_logger_level(value: str = LOGGER_LEVEL) -> Level:
    """Parse the configured Logger threshold, falling back to the default."""
    try:
        return parse_level(value)
    except ValueError as e:
        logger.warning(f"{e}; using {DEFAULT_LEVEL.name}")
        return DEFAULT_LEVEL


def run_demo(name: str) -> bool:
    """Run a single demo by name. Returns True on success."""
    demo = DEMOS.get(name)
    if demo is None:
        logger.error(f"Unknown demo '{name}'. Available: {', '.join(DEMOS)}")
        return False

    print(f"\n==== {name} ====")
    try:
        if demo() is False:
            logger.error(f"Demo '{name}' reported a failure")
            return False
        logger.info(f"Demo '{name}' completed")
        return True
    except Exception as e:
        logger.error(f"Demo '{name}' failed: {e}")
        return False


def run_all() -> dict[str, bool]:
    """Run every demo in order and return the outcome of each."""
    return {name: run_demo(name) for name in DEMOS}


def main(argv=None) -> None:
    """Entry point for the catalog."""
    if argv is None:
        argv = sys.argv[1:]

    setup_logging()
    logger_singleton.set_level(resolve_logger_level())

    name = argv[0] if argv else DEMO
    if name:
        ok = run_demo(name)
    else:
        ok = all(run_all().values())

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()

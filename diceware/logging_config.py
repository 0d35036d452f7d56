"""
Logging configuration
Generation events are logged but never include the drawn words
"""

import logging
import sys
from typing import Set


class SensitiveDataFilter(logging.Filter):
    """Filter that redacts passphrase material"""

    SENSITIVE_KEYS: Set[str] = {
        "words",
        "phrase",
        "passphrase",
        "seed",
        "secret",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        # Never log drawn words or the seed that reproduces them
        if hasattr(record, "msg"):
            msg = str(record.msg).lower()
            for key in self.SENSITIVE_KEYS:
                if key in msg and "=" in str(record.msg):
                    record.msg = "[REDACTED - Sensitive data filtered]"
                    record.args = None
                    break
        return True


def setup_logging(level: str = "WARNING"):
    """Configure application logging"""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SensitiveDataFilter())

    root = logging.getLogger()
    root.setLevel(level.upper())

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)


# Generation event logger
logger = logging.getLogger("diceware")


def log_generation(count: int, pool_size: int, allow_duplicates: bool):
    """Log a passphrase generation (no words)"""
    mode = "with repeats" if allow_duplicates else "unique"
    logger.info(f"Generated {count} words ({mode}) from a pool of {pool_size}")


def log_rejected_request(reason: str):
    """Log a request the sampler or configuration refused"""
    logger.warning(f"Request rejected: {reason}")

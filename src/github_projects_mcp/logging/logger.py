"""Logging configuration. Outputs to stderr to avoid conflict with stdio MCP transport."""

import logging
import re
import sys

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

# Classic (ghp_, gho_, ghu_, ghs_, ghr_) and fine-grained personal access tokens.
_TOKEN_PATTERN = re.compile(r"\b(?:gh[pousr]_[A-Za-z0-9]{20,}|github_pat_[A-Za-z0-9_]{20,})")


class RedactTokenFilter(logging.Filter):
    """Replace GitHub token literals in a record's rendered message."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _TOKEN_PATTERN.sub("[REDACTED]", message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


def setup_logger(name: str = "github_projects_mcp", level: str = "INFO") -> logging.Logger:
    """Return the server logger writing to stderr.

    Safe to call more than once: later calls only change the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RedactTokenFilter())
    logger.addHandler(handler)
    return logger

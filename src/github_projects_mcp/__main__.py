"""Entry point for running the GitHub Projects MCP server: python -m github_projects_mcp"""

import sys

from pydantic import ValidationError

from github_projects_mcp.lifespan import load_settings
from github_projects_mcp.logging.logger import setup_logger
from github_projects_mcp.server import mcp


def main() -> None:
    logger = setup_logger()
    try:
        settings = load_settings()
    except ValidationError as e:
        invalid = ", ".join(f"GITHUB_{str(err['loc'][0]).upper()}" for err in e.errors() if err["loc"])
        logger.error("Invalid configuration (%s). GITHUB_TOKEN must be set.", invalid)
        sys.exit(1)

    setup_logger(level=settings.log_level)
    try:
        mcp.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
        sys.exit(0)
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()

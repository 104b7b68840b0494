"""Main entry point for Repo Manager."""

import sys

from .core.config import get_config
from .core.errors import AuthenticationError
from .core.logging_ import get_logger, setup_logging

logger = get_logger(__name__)

USAGE = """
Repo Manager - GitHub repository visibility manager

Usage: repo-manager [command]

Commands:
    api       Run the FastAPI server (default)
    check     Verify the configured GitHub token and print the login

Options:
    --help, -h    Show this help message
"""


def run_api_server() -> None:
    """Run the FastAPI server."""
    import uvicorn

    from .api.main import create_app

    config = get_config()

    uvicorn.run(
        create_app(config),
        host=config.app.host,
        port=config.app.port,
        log_level=config.app.log_level.lower(),
    )


def run_check() -> int:
    """Authenticate once and report the identity."""
    from .github import SessionManager

    session = SessionManager(get_config())
    try:
        session.initialize()
    except AuthenticationError as e:
        logger.error(str(e))
        return 1

    print(f"Authenticated as {session.state.identity}")
    return 0


def main() -> int:
    """Main entry point."""
    setup_logging()

    command = sys.argv[1].lower() if len(sys.argv) > 1 else "api"

    if command == "api":
        run_api_server()
        return 0

    elif command == "check":
        return run_check()

    elif command in ("--help", "-h", "help"):
        print(USAGE)
        return 0

    logger.info(f"Unknown command '{command}'. Use 'api' or 'check'")
    return 1


if __name__ == "__main__":
    sys.exit(main())

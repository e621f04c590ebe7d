"""
CLI entry point for the Postboard API.

Usage:
    # Serve the API
    python -m postboard.cli serve --port 8000

    # Serve with a demo user and session (token from POSTBOARD_DEMO_SESSION_TOKEN)
    python -m postboard.cli serve --seed-demo

    # List the mounted routes
    python -m postboard.cli routes
"""

import argparse
import logging

from fastapi.routing import APIRoute

from postboard.core.config import Settings
from postboard.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API under uvicorn."""
    import uvicorn

    from postboard.main import create_app

    app_settings = Settings()
    if args.seed_demo:
        app_settings = app_settings.model_copy(update={"seed_demo_data": True})

    configure_logging(level=app_settings.log_level, force=True)
    app = create_app(app_settings=app_settings)
    logger.info(
        "Starting %s at http://%s:%d%s",
        app_settings.project_name,
        args.host,
        args.port,
        app_settings.api_prefix,
    )
    uvicorn.run(app, host=args.host, port=args.port, reload=False)


def cmd_routes(args: argparse.Namespace) -> None:
    """Print every API route with its methods."""
    from postboard.main import create_app

    app = create_app()
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ",".join(sorted(route.methods))
            print(f"{methods:<40} {route.path}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Postboard API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Serve the API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument(
        "--seed-demo",
        action="store_true",
        help="Seed a demo user and session into the in-memory stores",
    )
    serve_parser.set_defaults(func=cmd_serve)

    routes_parser = subparsers.add_parser("routes", help="List API routes")
    routes_parser.set_defaults(func=cmd_routes)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()

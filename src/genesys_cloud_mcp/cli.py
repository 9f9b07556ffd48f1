"""CLI entry point for running the Genesys Cloud MCP server."""

from __future__ import annotations

import argparse
import logging

from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response

from .genesys import build_genesys_server
from .logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def _add_preflight_handler(app, path: str) -> None:
    async def options_endpoint(request):
        origin = request.headers.get("origin", "*")
        requested_headers = request.headers.get(
            "access-control-request-headers",
            "authorization, content-type, accept, mcp-session-id, mcp-protocol-version",
        )
        headers = {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Methods": "GET, POST, DELETE, OPTIONS",
            "Access-Control-Allow-Headers": requested_headers,
            "Access-Control-Allow-Credentials": "true",
            "Access-Control-Max-Age": "600",
        }
        return Response(status_code=204, headers=headers)

    app.add_route(path, options_endpoint, methods=["OPTIONS"])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the Genesys Cloud MCP server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mechanism for MCP (default: stdio)",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host for http transport")
    parser.add_argument("--port", type=int, default=8080, help="Port for http transport")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Minimum level of log events written to stderr",
    )
    return parser


def main() -> None:
    args = build_parser().parse_args()

    configure_logging(getattr(logging, args.log_level))
    server = build_genesys_server()

    if args.transport == "stdio":
        LOGGER.info("server_starting", transport="stdio")
        server.run()
    elif args.transport == "http":
        import uvicorn

        app = server.streamable_http_app()
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
            allow_headers=["*"],
            expose_headers=["mcp-session-id", "mcp-protocol-version"],
            allow_credentials=True,
        )
        _add_preflight_handler(app, server.settings.streamable_http_path)
        LOGGER.info("server_starting", transport="http", host=args.host, port=args.port)
        uvicorn.run(app, host=args.host, port=args.port)
    else:
        raise ValueError(f"Unsupported transport {args.transport}")


if __name__ == "__main__":  # pragma: no cover
    main()

"""Main entry point for the ad service.

Starts the transport named by ``TRANSPORT`` (``grpc`` by default).

Usage:
    python -m adservice.main
    # or via the script entrypoint:
    adservice-server
"""

from __future__ import annotations

from .config.runtime import RuntimeSettings, Transport, get_settings
from .interface.observability import configure_logging, get_logger
from .wiring import build_ad_service


def run(settings: RuntimeSettings | None = None) -> None:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    get_logger().info("adservice_starting", extra={"transport": settings.transport.value})
    service = build_ad_service(settings)
    if settings.transport is Transport.mcp:
        from .interface.mcp.server import run_server
        run_server(service)
    else:
        from .interface.grpc_server import serve
        serve(service, settings)


def main() -> None:
    """Main function for the ad service server."""
    run()


if __name__ == "__main__":
    main()

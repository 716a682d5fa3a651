"""CLI commands for running and inspecting the ad service."""

import argparse
import json

from .config.runtime import RuntimeSettings, Transport, get_settings
from .domain.catalog import get_catalog
from .models.requests import AdRequest
from .wiring import build_ad_service


def list_categories() -> dict[str, int]:
    """Return each known category with its ad count."""
    catalog = get_catalog()
    return {key: len(catalog.get(key)) for key in catalog.categories}


def get_ads(context_keys: list[str]) -> dict:
    """Run the matcher in-process and return the response as a dict."""
    svc = build_ad_service()
    response = svc.get_ads(AdRequest(context_keys=context_keys))
    return response.model_dump()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Serve and inspect context ads")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the ad service")
    serve_parser.add_argument(
        "--transport",
        choices=[t.value for t in Transport],
        default=None,
        help="Transport to start (default: TRANSPORT env or 'grpc')",
    )
    serve_parser.add_argument("--port", type=int, default=None, help="gRPC listen port (default: PORT env or 9555)")

    # Categories command
    subparsers.add_parser("categories", help="List known categories and their ad counts")

    # Get command
    get_parser = subparsers.add_parser("get", help="Match ads for context keys and print them")
    get_parser.add_argument("keys", nargs="*", help="Context keys; none for random ads")

    args = parser.parse_args(argv)

    if args.command == "serve":
        from .main import run

        overrides = {}
        if args.transport is not None:
            overrides["transport"] = Transport(args.transport)
        if args.port is not None:
            overrides["port"] = args.port
        run(RuntimeSettings(**overrides) if overrides else get_settings())
    elif args.command == "categories":
        print(json.dumps(list_categories(), indent=2))
    elif args.command == "get":
        print(json.dumps(get_ads(args.keys), indent=2))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()

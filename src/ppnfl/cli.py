"""Command-line interface for serving or fetching projections."""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path
from typing import Optional, Sequence

import uvicorn

from ppnfl.api import create_app
from ppnfl.config import Settings
from ppnfl.fetch import FetchError, status_of
from ppnfl.service import ProjectionService


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve or fetch normalized NFL projections")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    serve.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (defaults to PORT or 8080)",
    )

    fetch = subparsers.add_parser("fetch", help="Fetch projections once and print them as JSON")
    fetch.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write records to this path instead of stdout",
    )
    return parser.parse_args(argv)


def _fetch(settings: Settings, output: Path | None) -> int:
    service = ProjectionService(settings)
    try:
        records = asyncio.run(service.get_projections())
    except FetchError as exc:
        print(f"fetch via {service.strategy.value} failed (status={status_of(exc)}): {exc}")
        return 1

    payload = json.dumps([record.model_dump() for record in records], indent=2)
    if output:
        output.write_text(payload, encoding="utf-8")
        print(f"Wrote {len(records)} projections to {output}")
    else:
        print(payload)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    settings = Settings.from_env()

    if args.command == "fetch":
        return _fetch(settings, args.output)

    port = args.port if args.port is not None else settings.port
    uvicorn.run(create_app(settings), host=args.host, port=port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

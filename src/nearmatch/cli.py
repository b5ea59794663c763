"""
NearMatch CLI entrypoint.

- `serve`: run the HTTP API with uvicorn.
- `distance`: quick haversine check between two points against the match radius.
"""

from __future__ import annotations

import argparse
import json
from typing import Any

from nearmatch.config.settings import get_settings
from nearmatch.core.env import env_flag
from nearmatch.core.geo import GeoPoint, haversine_m
from nearmatch.core.logging import configure_logging


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "nearmatch.api.app:app",
        host=str(args.host or settings.server.host),
        port=int(args.port or settings.server.port),
        reload=bool(args.reload),
        log_config=None,
    )
    return 0


def _cmd_distance(args: argparse.Namespace) -> int:
    settings = get_settings()
    a = GeoPoint(lat=float(args.lat1), lon=float(args.lon1))
    b = GeoPoint(lat=float(args.lat2), lon=float(args.lon2))
    d = haversine_m(a, b)
    radius = settings.matching.radius_m
    within = d <= radius

    if args.json:
        print(json.dumps({"distance_m": d, "radius_m": radius, "within_radius": within}, indent=2))
        return 0

    verdict = "within" if within else "outside"
    print(f"{d:.1f} m ({verdict} the {radius:g} m match radius)")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the NearMatch CLI."""
    parser = argparse.ArgumentParser(prog="nearmatch")
    sub = parser.add_subparsers(dest="command", required=True)

    srv = sub.add_parser("serve", help="Run the HTTP API (in-memory; state is lost on exit).")
    srv.add_argument("--host", type=str, default=None, help="Defaults to settings.server.host / $HOST")
    srv.add_argument("--port", type=int, default=None, help="Defaults to settings.server.port / $PORT")
    srv.add_argument(
        "--reload",
        action="store_true",
        default=env_flag("NEARMATCH_RELOAD"),
        help="Auto-reload on code changes (or set NEARMATCH_RELOAD=1).",
    )
    srv.set_defaults(func=_cmd_serve)

    dist = sub.add_parser("distance", help="Haversine distance between two points, in meters.")
    dist.add_argument("lat1", type=float)
    dist.add_argument("lon1", type=float)
    dist.add_argument("lat2", type=float)
    dist.add_argument("lon2", type=float)
    dist.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    dist.set_defaults(func=_cmd_distance)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m nearmatch.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())

"""Command-line preview of coverage paths from a field preview request YAML.

Reads the same request format the dashboard saves (see ``core.request``) and
prints the preview path, the ``ros2 param set`` lines for the robot-side
planner, or the field polygon payload, so shell scripts do not need to
duplicate any of the planning logic.
"""
from __future__ import annotations

import argparse
import json
import logging
import shlex
import sys
from pathlib import Path
from typing import List, Sequence

from .core import PreviewRequest, RequestFormatError, export_path_csv, load_request, path_stats
from .core.geometry import Point
from .rosio import PLANNER_NODE, field_polygon_message, field_polygon_ops, param_commands

logger = logging.getLogger("field_coverage")


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _quote(value: object) -> str:
    return shlex.quote("" if value is None else str(value))


def preview_payload(request: PreviewRequest, path: Sequence[Point]) -> dict:
    return {
        "name": request.name,
        "style": request.style.as_params(),
        "start_corner": request.start_corner,
        "stats": path_stats(path).as_dict(),
        "path": [list(p.as_tuple()) for p in path],
    }


def emit_path_shell(path: Sequence[Point]) -> str:
    lines = [f"PATH_COUNT={len(path)}"]
    for idx, point in enumerate(path):
        lines.append(f"PATH_X[{idx}]={_quote(f'{point.x:.4f}')}")
        lines.append(f"PATH_Y[{idx}]={_quote(f'{point.y:.4f}')}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Preview boustrophedon coverage paths for a field polygon")
    parser.add_argument("--file", required=True, help="Path to the preview request YAML")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    preview = subparsers.add_parser("preview", help="Compute the preview path")
    preview.add_argument("--format", choices=["json", "csv", "shell"], default="json")
    preview.add_argument("--output-dir", default=".", help="Directory for --format csv")

    params = subparsers.add_parser("params", help="Emit ros2 param set commands for the planner node")
    params.add_argument("--node", default=PLANNER_NODE)
    params.add_argument("--namespace", default=None)

    polygon = subparsers.add_parser("polygon", help="Emit the PolygonStamped payload for the field")
    polygon.add_argument("--frame-id", default="map")
    polygon.add_argument("--namespace", default=None)
    polygon.add_argument(
        "--rosbridge",
        action="store_true",
        help="Emit rosbridge advertise/publish operations, one JSON object per line",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def main(argv: List[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        request = load_request(Path(args.file))
    except (OSError, RequestFormatError) as exc:
        logger.error("Cannot load preview request %s: %s", args.file, exc)
        return 1

    if args.command == "preview":
        path = request.path()
        if not path:
            logger.warning("Field '%s' produced an empty path; select 4 distinct corners", request.name)
        if args.format == "json":
            print(json.dumps(preview_payload(request, path)))
        elif args.format == "shell":
            print(emit_path_shell(path))
        else:
            output = export_path_csv(path, Path(args.output_dir), request.name)
            logger.info("Preview path exported to %s", output)
            print(output)
        return 0

    if args.command == "params":
        commands = param_commands(
            request.style,
            request.start_corner,
            node=args.node,
            namespace=args.namespace,
        )
        print("\n".join(commands))
        return 0

    if args.command == "polygon":
        message = field_polygon_message(request.points, frame_id=args.frame_id)
        if args.rosbridge:
            for op in field_polygon_ops(message, namespace=args.namespace):
                print(json.dumps(op))
        else:
            print(json.dumps(message))
        return 0

    return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

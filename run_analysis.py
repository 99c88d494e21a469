#!/usr/bin/env python3
"""Run one analysis tool against the sample datasets and write the result as GeoJSON."""

import json
import sys
from pathlib import Path
from typing import Dict, List, Optional, Union

import structlog

from py_geolab import perform_analysis, sample_datasets, visibility_for
from py_geolab.config import list_tools
from py_geolab.utils.logging import configure_logging

logger = structlog.get_logger()


def parse_params(pairs: List[str]) -> Dict[str, Union[float, str]]:
    """Turn ``key=value`` strings into a parameter bag."""
    params: Dict[str, Union[float, str]] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Parameter must look like key=value: {pair!r}")
        try:
            params[key.strip()] = float(value)
        except ValueError:
            params[key.strip()] = value.strip()
    return params


def print_tools() -> None:
    category = None
    for definition in list_tools():
        if definition.category_title != category:
            category = definition.category_title
            print(f"\n{category}")
        suffix = " *" if definition.requires_params else ""
        print(f"  {definition.id.value:<24} {definition.label}{suffix}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main function."""
    import argparse

    parser = argparse.ArgumentParser(description="Run a spatial analysis tool on the sample data")
    parser.add_argument("--tool", help="Tool identifier, e.g. BUFFER")
    parser.add_argument(
        "--param", action="append", default=[], metavar="KEY=VALUE",
        help="Tool parameter, may be repeated (e.g. --param radius=1.5)",
    )
    parser.add_argument("--output", help="Write the result layer to this GeoJSON file")
    parser.add_argument("--list-tools", action="store_true", help="List the available tools")
    parser.add_argument("--log-level", default=None, help="Log level (defaults to GEOLAB_LOG_LEVEL)")

    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)

    if args.list_tools:
        print_tools()
        return 0
    if not args.tool:
        parser.error("--tool is required unless --list-tools is given")

    try:
        params = parse_params(args.param)
    except ValueError as e:
        parser.error(str(e))

    data = sample_datasets()
    result = perform_analysis(args.tool, data.points, data.polygons, data.lines, params)

    print(result.message)
    for key, value in result.stats.items():
        print(f"  {key}: {value}")
    layers = visibility_for(args.tool)
    print(f"  Base layers: {', '.join(k for k, v in layers.as_dict().items() if v) or '-'}")

    if result.geojson is None:
        return 1

    if args.output:
        path = Path(args.output)
        path.write_text(json.dumps(result.to_geojson(), ensure_ascii=False, indent=2), encoding="utf-8")
        logger.info("Result written", path=str(path), features=len(result.geojson))
    return 0


if __name__ == "__main__":
    sys.exit(main())

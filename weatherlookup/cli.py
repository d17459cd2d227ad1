"""CLI entry point for weather lookups."""

import argparse
import logging

from pydantic import ValidationError

from weatherlookup.config.defaults import DEFAULT_CONFIG_PATH
from weatherlookup.config.loader import get_config_value, load_config, set_config_value
from weatherlookup.forecast.labels import get_labels
from weatherlookup.lookup.orchestrator import WeatherLookup
from weatherlookup.models.lookup import LookupResult
from weatherlookup.reporting.formatters import (
    format_lookup_chat,
    format_lookup_json,
    format_lookup_text,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherlookup",
        description="Current weather and forecast lookup",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG_PATH, help="Config YAML path"
    )
    parser.add_argument(
        "--locale", choices=["en", "id"], help="Override display locale"
    )
    parser.add_argument(
        "--format", choices=["text", "json", "chat"], default="text",
        help="Output format",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # city / coords / here
    city_p = sub.add_parser("city", help="Look up by place name")
    city_p.add_argument("name", nargs="*", help="Place name")

    coords_p = sub.add_parser("coords", help="Look up by coordinates")
    coords_p.add_argument("lat", type=float)
    coords_p.add_argument("lon", type=float)

    sub.add_parser("here", help="Look up the configured default location")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except ValidationError as e:
        print(f"Error: invalid config {args.config}: {e}")
        return 1
    if args.locale:
        config = set_config_value(config, "display.locale", args.locale)

    if args.command == "config":
        return _cmd_config(config, args)

    lookup = WeatherLookup.from_config(config)
    if args.command == "city":
        result = lookup.lookup_by_name(" ".join(args.name))
    elif args.command == "coords":
        result = lookup.lookup_by_location(args.lat, args.lon)
    elif args.command == "here":
        loc = config.default_location
        result = lookup.lookup_by_location(loc.lat, loc.lon)
    else:
        parser.print_help()
        return 1
    return _print_result(result, args.format, config.display.locale.value)


def _print_result(result: LookupResult, fmt: str, locale: str) -> int:
    labels = get_labels(locale)
    if fmt == "json":
        print(format_lookup_json(result))
    elif fmt == "chat":
        print(format_lookup_chat(result, labels))
    else:
        print(format_lookup_text(result, labels))
    return 0 if result.is_ready else 1


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2, exclude={"api": {"api_key"}}))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1

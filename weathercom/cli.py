"""CLI entry point for the weather.com client."""

import argparse
import logging

import yaml

from weathercom.client import WeatherClient
from weathercom.config.loader import load_config
from weathercom.config.schema import ClientConfig
from weathercom.errors import WeatherClientError
from weathercom.models.common import UnitSystem

COMMANDS = {
    "current": ("get_current", "Current conditions"),
    "wwir": ("get_wwir", "Imminent precipitation narrative"),
    "forecast10": ("get_forecast10", "10-day daily forecast"),
    "hourly": ("get_hourly", "Hourly forecast"),
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weathercom",
        description="Query the weather.com v1 geocode API",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--api-key", default=None, help="Overrides api_key from config")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")
    for name, (_, help_text) in COMMANDS.items():
        cmd_p = sub.add_parser(name, help=help_text)
        cmd_p.add_argument("--lat", type=float, required=True, help="Latitude")
        cmd_p.add_argument("--lng", type=float, required=True, help="Longitude")
        cmd_p.add_argument(
            "--units",
            choices=[u.value for u in UnitSystem],
            default=None,
            help="Unit system code (default from config, else e)",
        )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs, API key included, at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    try:
        config = load_config(args.config) if args.config else ClientConfig()
    except (OSError, ValueError, yaml.YAMLError) as e:
        # pydantic's ValidationError is a ValueError
        print(f"Error: invalid config {args.config}: {e}")
        return 1
    if args.api_key:
        config = config.model_copy(update={"api_key": args.api_key})
    if not config.api_key:
        print("Error: no API key (use --api-key or api_key in config)")
        return 1

    return _cmd_fetch(config, args)


def _cmd_fetch(config: ClientConfig, args) -> int:
    method_name, _ = COMMANDS[args.command]
    units = args.units or config.units
    with WeatherClient.from_config(config) as client:
        try:
            resp = getattr(client, method_name)(args.lat, args.lng, units)
        except WeatherClientError as e:
            print(f"Error: {e}")
            return 1
    print(resp.to_json(indent=2))
    return 0

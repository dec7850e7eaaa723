# gamma_mcp/main.py
import argparse
import sys
from typing import Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from gamma_mcp.config import Config, ConfigError, load_config
from gamma_mcp.features.generation.tool import register_generation_tools
from gamma_mcp.logger import configure_logging, get_logger

SERVER_NAME = "gamma-presentation"

log = get_logger(__name__)


def create_server(config: Config) -> FastMCP:
    server = FastMCP(SERVER_NAME)
    register_generation_tools(server, config)
    return server


def _parse_header(raw: str) -> tuple:
    name, sep, value = raw.partition(":")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"header must look like 'Name: Value', got {raw!r}")
    return name.strip(), value.strip()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="gamma-mcp", description="Gamma presentation MCP server (stdio).")
    p.add_argument("--api-key", help="Gamma API key (overrides GAMMA_API_KEY)")
    p.add_argument("--api-base", help="Gamma API base URL (overrides GAMMA_API_BASE)")
    p.add_argument(
        "--header",
        dest="headers",
        action="append",
        type=_parse_header,
        default=[],
        metavar="'NAME: VALUE'",
        help="Extra HTTP header for Gamma calls; repeatable",
    )
    p.add_argument("--env-file", help="dotenv settings file (default: ./.env)")
    p.add_argument("--poll-interval-ms", type=float)
    p.add_argument("--poll-timeout-ms", type=float)
    p.add_argument("--http-timeout", type=float, help="per-request timeout in seconds")
    p.add_argument("--output-dir", help="where exported files are saved")
    p.add_argument("--log-level")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    headers: Dict[str, str] = dict(args.headers)
    return load_config(
        env_file=args.env_file,
        api_key=args.api_key,
        api_base=args.api_base,
        headers=headers,
        poll_interval_ms=args.poll_interval_ms,
        poll_timeout_ms=args.poll_timeout_ms,
        http_timeout=args.http_timeout,
        output_dir=args.output_dir,
        log_level=args.log_level,
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config.log_level, force=True)

    if not config.has_credentials():
        print(
            "GAMMA_API_KEY is missing. Put GAMMA_API_KEY=... in a .env file, export it, "
            "or pass --api-key / --header 'X-API-KEY: ...'.",
            file=sys.stderr,
        )
        sys.exit(1)

    server = create_server(config)
    log.info(f"Gamma MCP server running on stdio (api base {config.api_base})")
    server.run()


if __name__ == "__main__":
    main()

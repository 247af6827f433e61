# solax_cloud/main.py

from dataclasses import replace
from pathlib import Path
import sys

from .cli import build_parser
from .config import AppConfig, Config, LoggingConfig, SolaxAPIConfig, parse_brand
from .logging import ConsoleLog

from .services.solax_api_client import SolaxCloudAPIClient
from .services.output_formatter import emit_json, emit_human


def load_app_config(args) -> AppConfig:
    """Read the config file, letting CLI flags fill in or override [solax]."""
    if Path(args.config).exists():
        app_cfg = Config.load(args.config)
    elif args.token and args.sn:
        app_cfg = AppConfig(
            solax=SolaxAPIConfig(token_id=args.token, sn=args.sn),
            logging=LoggingConfig(),
        )
    else:
        raise FileNotFoundError(
            f"Config file not found: {args.config} (or pass --token and --sn)"
        )

    overrides = {}
    if args.token:
        overrides["token_id"] = args.token
    if args.sn:
        overrides["sn"] = args.sn
    if args.brand:
        overrides["brand"] = parse_brand(args.brand)
    if overrides:
        app_cfg = replace(app_cfg, solax=replace(app_cfg.solax, **overrides))
    return app_cfg


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        app_cfg = load_app_config(args)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    console_logger = ConsoleLog(
        level="DEBUG" if args.debug else app_cfg.logging.console_level,
        quiet=args.quiet or app_cfg.logging.console_quiet,
        debug_modules=app_cfg.logging.debug_modules,
    )
    log = console_logger.setup()

    client = SolaxCloudAPIClient.from_config(app_cfg.solax)
    log.debug("Querying %s cloud (%s)", app_cfg.solax.brand.name, args.command)
    envelope = client.fetch_raw()

    raw = args.command == "raw"
    if args.json:
        emit_json(envelope, raw=raw)
    else:
        emit_human(envelope, raw=raw)

    return 0 if envelope.success else 1


if __name__ == "__main__":
    sys.exit(main())

# solax_cloud/cli.py
import argparse


def _add_overrides(cmd):
    cmd.add_argument(
        "--sn",
        help="Override [solax] sn (inverter registration number)",
    )
    cmd.add_argument(
        "--token",
        help="Override [solax] token_id",
    )
    cmd.add_argument(
        "--brand",
        choices=("solax", "qcells"),
        help="Override [solax] brand",
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="solax-cloud",
        description="Solax Cloud real-time inverter reader"
    )

    parser.add_argument(
        "--config",
        default="solax_cloud.conf",
        help="Path to configuration file"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging"
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress log output (cron-friendly)"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON instead of human-readable text"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    # Derived energy flows
    cmd_realtime = sub.add_parser(
        "realtime",
        help="Fetch real-time data and print the energy-flow summary",
    )
    _add_overrides(cmd_realtime)

    # Untouched cloud response
    cmd_raw = sub.add_parser(
        "raw",
        help="Fetch real-time data and print the cloud response fields",
    )
    _add_overrides(cmd_raw)

    return parser

"""
Command line interface for pressflow.

Two subcommands wrap the extractor for releases saved on disk:

* ``report`` prints a readable summary of one release: header,
  contacts, about-company text, certified adviser, regulatory
  disclosure, sections and attachments.
* ``extract`` writes the extracted content as JSON, to a file or to
  stdout.

Report preview lengths and the log level come from a YAML config file
(``pressflow/config.yaml`` by default).  Fetching releases from the
news API is left to other tools; point ``--file`` at a saved JSON feed
response, a single feed item or an HTML body.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Dict, List

import yaml  # type: ignore

from .extract.content import extract_content
from .feed.item import load_press_release
from .report import render_report

logger = logging.getLogger("pressflow.cli")

DEFAULT_CONFIG = os.path.join(os.path.dirname(__file__), "config.yaml")

DEFAULTS: Dict[str, Dict[str, object]] = {
    "report": {"about_preview_chars": 500, "section_preview_chars": 200},
    "logging": {"level": "INFO"},
}


def _load_config(config_path: str) -> Dict[str, Dict[str, object]]:
    """Read the YAML config and fill in defaults for missing keys."""
    with open(config_path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{config_path}: expected a mapping at the top level")
    config: Dict[str, Dict[str, object]] = {}
    for section, values in DEFAULTS.items():
        overrides = loaded.get(section) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"{config_path}: section '{section}' must be a mapping")
        merged = dict(values)
        merged.update(overrides)
        config[section] = merged
    return config


def cmd_report(args: argparse.Namespace) -> None:
    """Print the extraction report for one saved release."""
    release = load_press_release(args.file)
    if not release.html:
        print("No HTML content available for extraction.")
        return
    content = extract_content(release.html)
    report_cfg = args.config_data["report"]
    print(
        render_report(
            release,
            content,
            about_limit=int(report_cfg["about_preview_chars"]),
            section_limit=int(report_cfg["section_preview_chars"]),
        )
    )


def cmd_extract(args: argparse.Namespace) -> None:
    """Write the extracted content of one saved release as JSON."""
    release = load_press_release(args.file)
    content = extract_content(release.html)
    payload = json.dumps(content.to_dict(), indent=2, ensure_ascii=False)
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(payload + "\n")
        logger.info("Extracted %d contacts from %s into %s", len(content.contacts), args.file, args.out)
    else:
        print(payload)


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="pressflow", description="Press release content extractor")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="YAML config file")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Report
    report_cmd = subparsers.add_parser("report", help="Print a readable report for a saved release")
    report_cmd.add_argument("--file", required=True, help="Saved feed JSON, feed item JSON or HTML body")
    report_cmd.set_defaults(func=cmd_report)

    # Extract
    extract_cmd = subparsers.add_parser("extract", help="Write extracted content as JSON")
    extract_cmd.add_argument("--file", required=True, help="Saved feed JSON, feed item JSON or HTML body")
    extract_cmd.add_argument("--out", help="Output JSON path (default: stdout)")
    extract_cmd.set_defaults(func=cmd_extract)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    try:
        args.config_data = _load_config(args.config)
        level = "DEBUG" if args.verbose else str(args.config_data["logging"]["level"]).upper()
        logging.getLogger().setLevel(getattr(logging, level, logging.INFO))
        args.func(args)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])

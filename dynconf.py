"""Command-line access to the configuration store.

    python dynconf.py -n gtm set token abc
    python dynconf.py -n gtm get token
    python dynconf.py dump
"""
from __future__ import annotations
import argparse
import json
import sys
from pathlib import Path
from typing import Iterable, Optional

from dynconf_lib.bootstrap import create_configuration
from dynconf_lib.errors import ConfigurationError
from dynconf_lib.logging_config import configure_logging
from dynconf_lib.settings import load_settings


def get_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dynconf", description="Read and write namespaced configuration values")
    p.add_argument("--config", type=Path, default=None, help="Path to the YAML settings file")
    p.add_argument("--data-dir", default=None, help="Override the storage directory")
    p.add_argument("-n", "--namespace", default=None, help="Namespace of the keys")
    sub = p.add_subparsers(dest="command", required=True)

    get = sub.add_parser("get", help="Print the value of a key")
    get.add_argument("key")

    set_ = sub.add_parser("set", help="Store a value")
    set_.add_argument("key")
    set_.add_argument("value")

    remove = sub.add_parser("remove", help="Remove a key")
    remove.add_argument("key")

    inc = sub.add_parser("increment", help="Add to a numeric value")
    inc.add_argument("key")
    inc.add_argument("--by", type=int, default=1)

    sub.add_parser("dump", help="Print every stored value as JSON")
    return p


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = get_parser().parse_args(list(argv) if argv is not None else None)
    settings = load_settings(args.config)
    logger = configure_logging(settings)
    if args.data_dir:
        settings.data_dir = args.data_dir

    try:
        configuration = create_configuration(settings)
        if args.command == "get":
            value = configuration.get(args.key, args.namespace)
            if value is None:
                return 2
            print(value)
        elif args.command == "set":
            configuration.save(args.key, args.value, args.namespace)
        elif args.command == "remove":
            configuration.remove(args.key, args.namespace)
        elif args.command == "increment":
            configuration.increment(args.key, args.by, args.namespace)
            print(configuration.get(args.key, args.namespace))
        elif args.command == "dump":
            print(json.dumps(configuration.load_all(), indent=4, sort_keys=True, ensure_ascii=False))
    except ConfigurationError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

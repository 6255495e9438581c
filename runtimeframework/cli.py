from __future__ import annotations
import argparse
import logging
from typing import Any, Dict, List, Optional
from runtimeframework.core.errors import RuntimeFrameworkError
from runtimeframework.core.framework import RuntimeFramework
from runtimeframework.io.json_io import save_json
from runtimeframework.io import load_config, build_from_config
from runtimeframework.reporting import format_text_report, build_json_report
from runtimeframework import __version__

def _parse_framework(parser: argparse.ArgumentParser, text: str) -> RuntimeFramework:
    try:
        if "," in text:
            return RuntimeFramework.from_framework_name(text)
        return RuntimeFramework.parse(text)
    except RuntimeFrameworkError as e:
        parser.error(str(e))
        raise  # parser.error exits; keeps type checkers happy

def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="runtimeframework", description="Runtime framework CLI")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version", help="Show runtimeframework version and exit")

    p_parse = sub.add_parser("parse", help="Parse a framework id or framework name and describe it")
    p_parse.add_argument("framework", help="e.g. net-4.5 or '.NETFramework,Version=v4.0,Profile=Client'")

    p_sup = sub.add_parser("supports", help="Can something built for TARGET run under FRAMEWORK?")
    p_sup.add_argument("framework")
    p_sup.add_argument("target")

    p_load = sub.add_parser("can-load", help="Can FRAMEWORK load something requesting REQUESTED?")
    p_load.add_argument("framework")
    p_load.add_argument("requested")

    p_matrix = sub.add_parser("matrix", help="Compatibility of configured frameworks against targets")
    p_matrix.add_argument("--config", required=True, help="Path to configuration file (JSON/YAML)")
    p_matrix.add_argument("--target", action="append", required=True, help="Target framework id (repeatable)")
    p_matrix.add_argument("--out", required=False, help="Path to write JSON report")

    args = parser.parse_args(argv)
    logging.basicConfig(level=str(args.log_level).upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "version":
        print(__version__)
        return

    if args.cmd == "parse":
        fw = _parse_framework(parser, args.framework)
        print(f"id:             {fw.id}")
        print(f"display name:   {fw.display_name}")
        print(f"runtime:        {fw.runtime.name}")
        print(f"framework:      {fw.framework_version}")
        print(f"clr version:    {fw.clr_version}")
        print(f"profile:        {fw.profile or '(none)'}")
        print(f"framework name: {fw.framework_name}")
        return

    if args.cmd == "supports":
        fw = _parse_framework(parser, args.framework)
        target = _parse_framework(parser, args.target)
        print(str(fw.supports(target)).lower())
        return

    if args.cmd == "can-load":
        fw = _parse_framework(parser, args.framework)
        requested = _parse_framework(parser, args.requested)
        print(str(fw.can_load(requested)).lower())
        return

    if args.cmd == "matrix":
        try:
            cfg = load_config(args.config)
            service = build_from_config(cfg)
        except (OSError, ValueError) as e:
            parser.error(f"invalid config {args.config}: {e}")
        targets = [_parse_framework(parser, t) for t in args.target]
        try:
            report: Dict[str, Any] = build_json_report(service, targets)
            if args.out:
                save_json(args.out, report)
            else:
                print(format_text_report(service, targets))
        finally:
            service.unload_service()

if __name__ == "__main__":
    main()

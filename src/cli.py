"""packageinfo command line entry point."""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict

from args import parse_args
from common.logging_utils import configure_logging, extra_context
from constants import Constants, ExitCodes, _load_yaml_config
from packageinfo import Dependencies, PackageInfoError, Req, Resolutions
from packageinfo import version as ver
from packageinfo import version_spec as vs

logger = logging.getLogger(__name__)


def load_manifest(path: str) -> Dict[str, Any]:
    """Read a JSON or YAML manifest into a dict."""
    with open(path, "r", encoding="utf-8") as f:
        if path.endswith((".yml", ".yaml")):
            import yaml  # pylint: disable=import-outside-toplevel
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(str(e)) from e
        else:
            data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"manifest {path} is not an object")
    return data


def effective_dependencies(manifest: Dict[str, Any]) -> Dependencies:
    """Apply manifest overrides, then pin every resolved name."""
    deps = Dependencies.from_manifest(manifest.get("dependencies", {}))
    overrides = Dependencies.from_manifest(manifest.get("overrides", {}))
    resolutions = Resolutions.from_json(manifest.get("resolutions", {}))
    deps = deps.override_many(overrides)
    return deps.map(lambda req: resolutions.apply(req) or req)


def _cmd_req(args) -> int:
    print(Req.make(args.NAME, args.REQUIREMENT).to_string())
    return ExitCodes.SUCCESS.value


def _cmd_matches(args) -> int:
    ok = vs.matches(vs.parse(args.SPEC), ver.parse(args.VERSION))
    print("true" if ok else "false")
    return ExitCodes.SUCCESS.value if ok else ExitCodes.NO_MATCH.value


def _cmd_manifest(args) -> int:
    try:
        manifest = load_manifest(args.PATH)
    except (OSError, ValueError) as e:
        logger.error("Failed to read manifest %s: %s", args.PATH, e)
        return ExitCodes.FILE_ERROR.value
    deps = effective_dependencies(manifest)
    if args.OUTPUT_FORMAT == "json":
        print(json.dumps(deps.to_json(), indent=2))
    else:
        for req in deps:
            print(req.to_string())
    return ExitCodes.SUCCESS.value


_COMMANDS = {
    "req": _cmd_req,
    "matches": _cmd_matches,
    "manifest": _cmd_manifest,
}


def main(argv=None) -> int:
    """Run the CLI and return the process exit code."""
    args = parse_args(argv)
    if args.LOG_LEVEL:
        os.environ[Constants.ENV_LOG_LEVEL] = args.LOG_LEVEL
    configure_logging()
    _load_yaml_config(args.CONFIG)

    try:
        return _COMMANDS[args.COMMAND](args)
    except PackageInfoError as e:
        logger.error(
            "%s",
            e,
            extra=extra_context(event="cli_error", command=args.COMMAND, raw=str(e.raw)),
        )
        return ExitCodes.INVALID_INPUT.value


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()

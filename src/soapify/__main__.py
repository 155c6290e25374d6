from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .errors import SoapifyError
from .generation.profile import METHOD_CASES
from .generator import generate_source

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="soapify",
        description="Generate a Python client class from remote operation descriptors.",
    )
    parser.add_argument("descriptor", type=Path, help="Path to the service descriptor (JSON/YAML)")
    parser.add_argument("--method-case", choices=METHOD_CASES, default=None, help="Naming style of generated methods")
    parser.add_argument("--client-base", default=None, help="Qualified name of the client base class")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        output = generate_source(
            args.descriptor,
            method_case=args.method_case,
            client_base=args.client_base,
        )
    except SoapifyError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    logger.info("Generated %d method(s) from %s", len(output.class_model.methods), args.descriptor)
    sys.stdout.write(output.code)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Convert IDL JSON API descriptions to Markdown documentation.

Reads ``../idl_gen/idl.json`` and writes one page per class or enum to
``docs/``, with diagram sources extracted to ``dots/`` and ``umls/``. Any
command line argument runs the built-in self-test instead.
"""

import logging
import sys
from collections.abc import Sequence

from api_docgen.load_config import load_config
from api_docgen.run_generation import run_generation
from api_docgen.self_test import run_self_test


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator, or the self-test when arguments are given."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        run_self_test()
        return 0

    config = load_config()
    logging.basicConfig(
        level=str(config["log_level"]).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_generation(config)


if __name__ == "__main__":
    raise SystemExit(main())

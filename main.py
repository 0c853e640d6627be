"""Entry point for generating Markdown API documentation from the IDL JSON.

Run without arguments to generate ``docs/``; pass any argument to run the
built-in self-test.
"""

from api_docgen.idl_to_markdown import main

if __name__ == "__main__":
    raise SystemExit(main())

"""
CLI entry point for allkeywords.

Usage:
    python3 -m tools.allkeywords < pkg/sql/parser/sql.y > pkg/sql/lex/keywords.go
    python3 -m tools.allkeywords pkg/sql/parser/sql.y -o pkg/sql/lex/keywords.go
    python3 -m tools.allkeywords sql.y -o keywords.go --config keywords.yaml
"""

import argparse
import os
import sys

from .categories import ConfigError, GeneratorConfig, load_config
from .emitter import emit_keywords_go
from .scanner import KeywordError, scan_keywords, sort_entries


def fatal(msg):
    print(f"Error: {msg}", file=sys.stderr)
    sys.exit(1)


def main():
    parser = argparse.ArgumentParser(
        description="Generate the Go keyword lookup from a yacc grammar"
    )
    parser.add_argument("grammar", nargs="?",
                        help="Input grammar file (default: stdin)")
    parser.add_argument("-o", "--output",
                        help="Output Go file (default: stdout)")
    parser.add_argument("--config",
                        help="YAML file overriding package, sentinel and categories")
    args = parser.parse_args()

    try:
        config = GeneratorConfig()
        if args.config:
            with open(args.config) as f:
                config = load_config(f.read())

        if args.grammar:
            with open(args.grammar, encoding="utf-8") as f:
                entries = scan_keywords(f, config.categories)
        else:
            entries = scan_keywords(sys.stdin, config.categories)

        code = emit_keywords_go(sort_entries(entries), config)

        if args.output:
            os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
            with open(args.output, "w") as f:
                f.write(code)
        else:
            sys.stdout.write(code)
    except (KeywordError, ConfigError, OSError) as e:
        fatal(e)

    if args.output:
        print(f"  wrote {args.output}")
        print(f"\nGenerated {len(entries)} keywords in package '{config.package}'")


if __name__ == "__main__":
    main()

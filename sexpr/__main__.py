"""CLI: python -m sexpr <source.sexpr | -> [--flatten | --head]"""

import sys
from pathlib import Path

from .parser import ParseError, dumps, parse_tree

USAGE = "Usage: python -m sexpr <source.sexpr | -> [--flatten | --head]"


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    flags = [a for a in args if a.startswith("--")]
    paths = [a for a in args if not a.startswith("--")]
    if len(paths) != 1 or len(flags) > 1 or not set(flags) <= {"--flatten", "--head"}:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    try:
        if paths[0] == "-":
            src = sys.stdin.read()
        else:
            src = Path(paths[0]).read_text()
        tree = parse_tree(src)
    except (OSError, ParseError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    if "--flatten" in flags:
        print(" ".join(tree.flatten()))
    elif "--head" in flags:
        head = tree.head()
        if head is not None:
            print(head)
    else:
        print(dumps(tree))


if __name__ == "__main__":
    main()

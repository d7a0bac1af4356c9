import argparse
import sys

from . import config
from .demos import DEMOS, demo_table, run_demos


def main(argv=None):
    parser = argparse.ArgumentParser(description="Object-oriented programming lessons")
    parser.add_argument("--demo", default=config.DEFAULT_DEMO,
                        help=f"Lesson to run ({', '.join(DEMOS)}) or 'all'")
    parser.add_argument("--list", action="store_true",
                        help="List the available lessons and exit")
    args = parser.parse_args(argv)

    if args.list:
        print(demo_table().to_string(index=False))
        return 0

    names = list(DEMOS) if args.demo.lower().strip() == "all" else [args.demo]
    try:
        run_demos(names)
    except ValueError as e:
        print(f"❌ Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

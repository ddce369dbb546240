"""A very tiny CLI.

Invoke using e.g. ``python -m spacescroll run``.
"""

import sys
import argparse

import spacescroll
from spacescroll.utils import set_log_level


def main(argv=None):
    # Get argv so we can massage it
    if argv is None:
        argv = sys.argv[1:]

    # Defaults and aliases
    if not argv:
        argv = ["help"]
    if argv == ["--version"]:
        argv = ["version"]

    # Let the rest to argparse

    parser = argparse.ArgumentParser(
        prog="spacescroll",
        description="A scroll-driven space scene: a torus, stars and a moon.",
    )
    parser.add_argument(
        "command", action="store", help="The command to run: 'help', 'version' or 'run'"
    )
    parser.add_argument("--stars", type=int, help="The number of stars")
    parser.add_argument(
        "--assets", help="Directory with space.jpg, moon.jpg and normal.jpg"
    )
    parser.add_argument("--seed", type=int, help="Seed for the star positions")
    parser.add_argument(
        "--frames", type=int, help="Stop animating after this many frames"
    )
    parser.add_argument(
        "--stats", action="store_true", help="Show the FPS and draw time"
    )
    parser.add_argument("--log-level", help="Log level, e.g. 'info' or 'debug'")

    args = parser.parse_args(argv)
    command = args.command.lower()

    if args.log_level:
        set_log_level(args.log_level)

    if command == "help":
        parser.print_help()
    elif command == "version":
        print("spacescroll v" + spacescroll.__version__)
    elif command == "run":
        overrides = {}
        if args.stars is not None:
            overrides["star_count"] = args.stars
        if args.assets is not None:
            overrides["assets_dir"] = args.assets
        if args.seed is not None:
            overrides["seed"] = args.seed
        config = spacescroll.SceneConfig.from_env(**overrides)
        app = spacescroll.SpaceScrollApp(
            config, stats=args.stats, max_frames=args.frames
        )
        app.run()
    else:
        print(f"Invalid command '{command}'")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

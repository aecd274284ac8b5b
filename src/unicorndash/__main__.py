from __future__ import annotations

import argparse
import logging
import random
import sys

from unicorndash.app.game_app import GameApp
from unicorndash.infra.assets import AssetStore
from unicorndash.infra.exceptions import AssetError

logger = logging.getLogger("unicorndash")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="unicorn-dash", description="Magical Unicorn Adventure")
    parser.add_argument("--seed", type=int, default=None, help="seed spawns and the star field")
    parser.add_argument(
        "--strict-assets",
        action="store_true",
        help="abort startup if any image or sound fails to load",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    assets = AssetStore(strict=args.strict_assets)
    try:
        assets.load()
    except AssetError as e:
        logger.error("%s", e)
        return 1

    missing = assets.missing()
    if missing:
        logger.warning("Running without assets: %s", ", ".join(missing))

    GameApp(assets, rng=random.Random(args.seed)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

import argparse
import json
import logging

from dotenv import load_dotenv

from config import GameConfig
from players.variant_registry import AVAILABLE_VARIANTS
from services.simulation import run_simulation

load_dotenv()


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Run a headless Pellet Chase game with an autopilot player."
    )
    parser.add_argument("--max-ms", type=int, required=False, default=60_000,
                        help="Simulated time budget in milliseconds")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Random seed for ghosts and autopilot (overrides PELLET_CHASE_SEED)")
    parser.add_argument("--policy", type=str, required=False, default="default",
                        choices=AVAILABLE_VARIANTS,
                        help="Ghost policy variant")
    parser.add_argument("--show-board", action="store_true",
                        help="Log the final board")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every tick")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = GameConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed

    result = run_simulation(
        config=config,
        max_ms=args.max_ms,
        policy_variant=args.policy,
        show_board=args.show_board,
    )

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()

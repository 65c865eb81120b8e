import os
import random
import logging
from typing import List, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv

from config import GameConfig
from domain.constants import TICK_KINDS
from engine.controller import GameController
from players.variant_registry import build_policy, list_variants

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _game_payload(controller: GameController, events: Optional[List[str]] = None) -> dict:
    payload = controller.snapshot().to_dict()
    # Which periodic triggers the browser should be running, and how often
    payload["timers"] = controller.scheduler.running()
    payload["events"] = events or []
    return payload


def create_app(controller: Optional[GameController] = None) -> Flask:
    app = Flask(__name__)

    if controller is None:
        config = GameConfig.from_env()
        policy = build_policy(
            os.getenv("PELLET_CHASE_POLICY"),
            config.grid_size,
            config.detection_range,
            rng=random.Random(config.seed),
        )
        controller = GameController(config=config, policy=policy)
        controller.init_game()
    app.config["GAME_CONTROLLER"] = controller

    # Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    else:
        allowed_origins = [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]
    CORS(app, resources={r"/api/*": {"origins": allowed_origins}})

    @app.route("/api/config", methods=["GET"])
    def get_config():
        """
        Grid size, timer periods and the other fixed game parameters.
        """
        cfg = controller.config
        return jsonify({
            "grid_size": cfg.grid_size,
            "player_period_ms": cfg.player_period_ms,
            "ghost_period_ms": cfg.ghost_period_ms,
            "detection_range": cfg.detection_range,
            "pellet_reward": cfg.pellet_reward,
            "ghost_starts": cfg.ghost_starts,
            "player_start": cfg.player_start,
            "policies": list_variants(),
        })

    @app.route("/api/game", methods=["GET"])
    def get_game():
        return jsonify(_game_payload(controller))

    @app.route("/api/game/start", methods=["POST"])
    def start_game():
        try:
            controller.init_game()
        except Exception as error:
            logger.error(f"Error starting game: {error}")
            return jsonify({"error": "Failed to start game"}), 500
        return jsonify(_game_payload(controller))

    @app.route("/api/game/reset", methods=["POST"])
    def reset_game():
        try:
            controller.reset_game()
        except Exception as error:
            logger.error(f"Error resetting game: {error}")
            return jsonify({"error": "Failed to reset game"}), 500
        return jsonify(_game_payload(controller))

    @app.route("/api/game/direction", methods=["POST"])
    def set_direction():
        """
        Body: {"direction": "UP" | "DOWN" | "LEFT" | "RIGHT"}

        Unrecognized directions are accepted as requests but ignored by the
        game; the response reports `accepted: false`.
        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or "direction" not in data:
            return jsonify({"error": "Request body must be JSON with a 'direction' field"}), 400

        direction = data["direction"]
        if isinstance(direction, str):
            direction = direction.strip().upper()

        try:
            accepted = controller.set_direction(direction)
        except Exception as error:
            logger.error(f"Error setting direction {direction!r}: {error}")
            return jsonify({"error": "Failed to set direction"}), 500

        payload = _game_payload(controller)
        payload["accepted"] = accepted
        return jsonify(payload)

    @app.route("/api/game/tick/<kind>", methods=["POST"])
    def tick(kind):
        kind = kind.upper()
        if kind not in TICK_KINDS:
            return jsonify({"error": f"Unknown tick kind '{kind}'"}), 400

        try:
            events = controller.on_tick(kind)
        except Exception as error:
            logger.error(f"Error processing {kind} tick: {error}")
            return jsonify({"error": "Failed to process tick"}), 500

        return jsonify(_game_payload(controller, events))

    return app


if __name__ == "__main__":
    port = int(os.getenv("PORT", "5000"))
    create_app().run(host="0.0.0.0", port=port, threaded=True)

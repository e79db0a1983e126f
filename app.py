import logging

from flask import Flask, jsonify

import config
from routes.simulator import simulator_bp


def create_app(simulator=None):
    """
    Build the Flask app that dispatches user actions into the simulator.

    Pass a simulator to isolate it (tests do); otherwise the process-wide
    one from globals.py is used.
    """
    app = Flask(__name__)
    app.config["SIMULATOR"] = simulator
    app.register_blueprint(simulator_bp)

    @app.route("/")
    def index():
        return jsonify(
            {
                "name": "CSRF Simulator",
                "description": "See how CSRF attacks work and how to prevent them",
                "endpoints": {
                    "state": "GET /api/simulator/state",
                    "login": "POST /api/simulator/login",
                    "logout": "POST /api/simulator/logout",
                    "mode": "POST /api/simulator/mode",
                    "legitimate_transfer": "POST /api/simulator/transfer/legitimate",
                    "malicious_transfer": "POST /api/simulator/transfer/malicious",
                },
            }
        )

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"status": "error", "message": "Not found"}), 404

    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config.print_banner()
    create_app().run(host=config.HOST, port=config.PORT, debug=config.DEBUG)

import logging

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from config import LEGITIMATE_AMOUNT, MALICIOUS_AMOUNT
from simulation import (
    InsufficientFundsError,
    Origin,
    PreconditionError,
)
from validators import ModeFormModel, TransferFormModel

logger = logging.getLogger(__name__)

simulator_bp = Blueprint("simulator", __name__, url_prefix="/api/simulator")

DEFAULT_AMOUNTS = {
    Origin.LEGITIMATE: LEGITIMATE_AMOUNT,
    Origin.MALICIOUS: MALICIOUS_AMOUNT,
}


def get_simulator():
    """The simulator configured on the app, or the process-wide one"""
    simulator = current_app.config.get("SIMULATOR")
    if simulator is None:
        from globals import simulator
    return simulator


def _state_json(state):
    return state.model_dump(mode="json")


@simulator_bp.route("/state", methods=["GET"])
def get_state():
    return jsonify(_state_json(get_simulator().state()))


@simulator_bp.route("/login", methods=["POST"])
def login():
    return jsonify(_state_json(get_simulator().login()))


@simulator_bp.route("/logout", methods=["POST"])
def logout():
    return jsonify(_state_json(get_simulator().logout()))


@simulator_bp.route("/mode", methods=["POST"])
def set_mode():
    try:
        data = ModeFormModel.model_validate(request.get_json(silent=True) or {})
        return jsonify(_state_json(get_simulator().set_mode(data.mode)))

    except ValidationError as ve:
        return jsonify({"status": "error", "message": ve.errors(include_url=False, include_context=False)}), 400


@simulator_bp.route("/transfer/<origin>", methods=["POST"])
def transfer(origin):
    """
    Send a simulated transfer to YourBank.com from either the bank's own page
    (legitimate) or from EvilSite.com (malicious).
    """
    try:
        origin = Origin(origin)
    except ValueError:
        return jsonify({"status": "error", "message": f"Unknown origin: {origin}"}), 404

    simulator = get_simulator()
    try:
        data = TransferFormModel.model_validate(request.get_json(silent=True) or {})
        amount = data.amount if data.amount is not None else DEFAULT_AMOUNTS[origin]

        outcome = simulator.simulate_transfer(origin, amount)
        return jsonify(
            {
                "status": "success",
                "allowed": outcome.allowed,
                "state": _state_json(simulator.state()),
            }
        )

    except ValidationError as ve:
        return jsonify({"status": "error", "message": ve.errors(include_url=False, include_context=False)}), 400
    except InsufficientFundsError as e:
        return jsonify({"status": "error", "message": str(e)}), 400
    except PreconditionError as e:
        return jsonify({"status": "error", "message": str(e)}), 409
    except Exception:
        logger.exception("Transfer simulation failed")
        return jsonify({"status": "error", "message": "Transfer failed"}), 500

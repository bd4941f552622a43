# -*- coding: utf-8 -*-
"""
PNS Relay - HTTP Entry Point

This module handles:
1. Receive PNS messages on /qa and /prod
2. Convert them to Adaptive Card messages and forward them to the target webhook
3. Keep a one-week JSON Lines log, exposed on /logs and /logs-view
"""

import sys
from pathlib import Path

# Add project root to sys.path for local development
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
from flask import Flask, Response, jsonify, request

from pns_relay import config
from pns_relay.relay import TargetEnvironment, relay_message
from pns_relay.services.log_store import read_log_text, read_logs

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Flask app
app = Flask(__name__)


def _read_message():
    """JSON object body, otherwise the raw text (loose-text fallback)"""
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        return body
    return request.get_data(as_text=True)


def _handle(environment: TargetEnvironment):
    message = _read_message()
    outcome = relay_message(message, environment)

    if outcome.error:
        return jsonify({"error": outcome.error}), 500

    send_result = outcome.send_result.to_log_dict() if outcome.send_result else None
    return jsonify({"ok": True, "sendResult": send_result})


def _target_status(url: str) -> str:
    # Webhook URLs carry credentials; never echo them
    return "configured" if url else "-"


@app.route("/", methods=['GET'])
@app.route("/index.html", methods=['GET'])
def index():
    """Health check endpoint"""
    return (
        f"PNS relay is running (qa: {_target_status(config.TARGET_URL_QA)}, prod: {_target_status(config.TARGET_URL_PROD)})",
        200,
        {"Content-Type": "text/plain; charset=utf-8"},
    )


@app.route("/qa", methods=['POST'])
def relay_qa():
    """Relay a message to the QA webhook"""
    return _handle(TargetEnvironment.QA)


@app.route("/prod", methods=['POST'])
def relay_prod():
    """Relay a message to the PROD webhook"""
    return _handle(TargetEnvironment.PROD)


@app.route("/logs", methods=['GET'])
def logs():
    """Retained log entries as a JSON array"""
    return jsonify(read_logs())


@app.route("/logs-view", methods=['GET'])
def logs_view():
    """Raw log file for viewing in a browser tab"""
    return Response(read_log_text(), content_type="text/plain; charset=utf-8")


# Local development entry point
if __name__ == "__main__":
    logger.info(f"PNS relay server listening on port {config.PORT}")
    logger.info(f"Current targetUrlQA: {config.TARGET_URL_QA}")
    logger.info(f"Current targetUrlPROD: {config.TARGET_URL_PROD}")
    app.run(port=config.PORT)

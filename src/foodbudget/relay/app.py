"""HTTP relay between the budget client and the completion model."""

import logging
from typing import Optional

from flask import Flask, current_app, jsonify, request

from foodbudget.config import Settings, load_settings
from foodbudget.domain.receipt import extract_json_block
from foodbudget.relay.completion import (
    AnthropicCompletionClient,
    CompletionClient,
    split_data_url,
)
from foodbudget.relay.prompts import RECEIPT_PROMPT, build_recommendations_prompt

logger = logging.getLogger(__name__)

MAX_BODY_BYTES = 50 * 1024 * 1024


def _completion_client() -> CompletionClient:
    client = current_app.config.get("COMPLETION_CLIENT")
    if client is None:
        settings: Settings = current_app.config["SETTINGS"]
        client = AnthropicCompletionClient(settings.model, api_key=settings.anthropic_api_key)
        current_app.config["COMPLETION_CLIENT"] = client
    return client


def _failure(error: str, status: int, details: Optional[str] = None):
    body = {"success": False, "error": error}
    if details is not None:
        body["details"] = details
    return jsonify(body), status


def _json_body() -> dict:
    """Return the request's JSON object, or an empty dict for anything else."""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def analyze_receipt():
    """Extract totals and line items from a receipt image."""
    body = _json_body()
    image = body.get("image")
    if not image or not isinstance(image, str):
        return _failure("Receipt image is required", 400)
    try:
        split_data_url(image)
    except ValueError as e:
        return _failure(str(e), 400)

    settings: Settings = current_app.config["SETTINGS"]
    try:
        text = _completion_client().complete_with_image(
            RECEIPT_PROMPT, image, settings.max_tokens_receipt
        )
    except Exception as e:
        logger.exception("Receipt analysis failed")
        return _failure("Receipt analysis failed", 500, str(e))

    logger.debug("Raw receipt reply: %s", text)
    data = extract_json_block(text)
    if not isinstance(data, dict):
        logger.warning("Receipt reply did not contain a JSON object")
        data = {
            "rawResponse": text,
            "parseError": "Could not find a JSON object in the model response",
        }
    return jsonify({"success": True, "data": data})


def get_recommendations():
    """Generate spending recommendations from the expense history."""
    body = _json_body()
    expenses = body.get("expenses")
    budget = body.get("budget")
    if expenses is None or budget in (None, "") or not isinstance(expenses, list):
        return _failure("Expenses and budget are required", 400)

    settings: Settings = current_app.config["SETTINGS"]
    prompt = build_recommendations_prompt(
        [e for e in expenses if isinstance(e, dict)], budget, body.get("remainingBudget")
    )
    try:
        text = _completion_client().complete(prompt, settings.max_tokens_recommendations)
    except Exception as e:
        logger.exception("Recommendation request failed")
        return _failure("Could not generate recommendations", 500, str(e))
    return jsonify({"success": True, "data": text})


def create_app(
    settings: Optional[Settings] = None,
    completion_client: Optional[CompletionClient] = None,
) -> Flask:
    """Create the relay application.

    Args:
        settings: Runtime settings, loaded from the environment if omitted
        completion_client: Model client; an Anthropic client is created on
            first use if omitted
    """
    app = Flask(__name__)
    app.config["SETTINGS"] = settings or load_settings()
    app.config["COMPLETION_CLIENT"] = completion_client
    app.config["MAX_CONTENT_LENGTH"] = MAX_BODY_BYTES

    app.add_url_rule("/api/analyze-receipt", view_func=analyze_receipt, methods=["POST"])
    app.add_url_rule(
        "/api/get-recommendations", view_func=get_recommendations, methods=["POST"]
    )
    return app

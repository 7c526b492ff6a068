"""
Flask REST layer for the creative assistant.

POST /api/chat routes one message; GET /api/health reports configuration.
"""
import logging
import os
from datetime import datetime, timezone
from typing import Optional

from flask import Flask, jsonify, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .app import CreativeAssistantApp
from .orchestration.chat_orchestrator import ChatOrchestrator
from .security import ValidationError, parse_chat_request
from .security.request_schema import DEFAULT_MAX_MESSAGE_LENGTH

logger = logging.getLogger(__name__)


def create_app(
    assistant: Optional[CreativeAssistantApp],
    max_message_length: Optional[int] = None,
) -> Flask:
    """
    Build the Flask application around an initialized assistant.

    :param assistant: Initialized CreativeAssistantApp, or None if startup failed
    :param max_message_length: Upper bound on inbound message length
        (defaults to the assistant's configured limit)
    """
    if max_message_length is None:
        max_message_length = (
            assistant.config.max_message_length if assistant is not None
            else DEFAULT_MAX_MESSAGE_LENGTH
        )

    app = Flask(__name__)

    limiter = Limiter(
        app=app,
        key_func=get_remote_address,
        default_limits=["100 per hour", "10 per minute"],
        storage_uri="memory://",
    )

    @app.route("/api/chat", methods=["POST"])
    @limiter.limit("20 per minute")
    def chat():
        """Chat endpoint."""
        if assistant is None:
            return jsonify({
                "success": False,
                "error": "Assistant not initialized. Please check configuration.",
            }), 500

        try:
            chat_request = parse_chat_request(
                request.get_json(silent=True), max_message_length=max_message_length
            )
        except ValidationError as e:
            logger.warning(f"Request validation failed: {str(e)}")
            return jsonify({"success": False, "error": str(e), "details": e.details}), 400

        context = chat_request.to_context()
        try:
            reply = assistant.chat(chat_request.message, context)
        except Exception as e:
            logger.error(f"Chat endpoint error: {str(e)}", exc_info=True)
            expose = app.debug or os.getenv("FLASK_ENV") == "development"
            return jsonify({
                "success": False,
                "error": str(e) if expose else "Internal server error",
            }), 500

        logger.info(
            f"Chat reply - Session: {context.session_id}, "
            f"Tool: {reply.action_log.tool_used.value}, "
            f"Time: {reply.action_log.execution_time}ms"
        )
        intent = ChatOrchestrator.infer_user_intent(reply.action_log.tool_used)
        return jsonify({
            "success": True,
            "message": reply.to_dict(),
            "lastUserIntent": intent.value,
        })

    @app.route("/api/health", methods=["GET"])
    def health():
        """Health check endpoint."""
        return jsonify({
            "status": "healthy" if assistant is not None else "degraded",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "services": {
                "text": "configured" if os.getenv("GROQ_API_KEY") or os.getenv("OPENAI_API_KEY") else "missing",
                "image": "configured" if os.getenv("OPENAI_API_KEY") else "missing",
            },
        })

    return app

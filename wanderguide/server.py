import logging
import random

from flask import Flask, request, jsonify, render_template_string

from wanderguide.chat.dialogue_manager import DialogueManager, EmptyMessageError, ResponsePendingError
from wanderguide.config import Settings, get_settings
from wanderguide.providers.random_transit import RandomTransitProvider
from wanderguide.utils.markup import render_html

logger = logging.getLogger(__name__)

INDEX_TEMPLATE = """<!doctype html>
<html>
<head><meta charset="utf-8"><title>WanderGuide AI</title></head>
<body>
  <h1>WanderGuide AI</h1>
  <p>State: {{ state }} &middot; From: {{ context["from"] or "-" }} &middot; To: {{ context["to"] or "-" }}</p>
  {% for m in messages %}
  <div class="msg {{ m.role.value }}">
    <div>{{ m.html | safe }}</div>
    <small>{{ m.time }}</small>
  </div>
  {% endfor %}
</body>
</html>
"""


def build_manager(settings: Settings) -> DialogueManager:
    rng = random.Random(settings.seed) if settings.seed is not None else None
    return DialogueManager(
        provider=RandomTransitProvider(rng=rng),
        min_delay_ms=settings.min_delay_ms,
        max_delay_ms=settings.max_delay_ms,
        rng=rng,
    )


def create_app(manager: DialogueManager = None, settings: Settings = None) -> Flask:
    settings = settings or get_settings()
    app = Flask(__name__)
    # single global session
    app.config["DIALOGUE_MANAGER"] = manager or build_manager(settings)

    def _manager() -> DialogueManager:
        return app.config["DIALOGUE_MANAGER"]

    @app.get("/")
    def index():
        """
        Minimal page that renders the current message log.
        """
        mgr = _manager()
        snap = mgr.snapshot()
        messages = [
            {"role": m.role, "html": render_html(m.text), "time": m.display_time()}
            for m in mgr.messages
        ]
        return render_template_string(
            INDEX_TEMPLATE,
            state=snap["state"],
            context=snap["context"],
            messages=messages,
        )

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.get("/messages")
    def messages():
        return jsonify(_manager().snapshot())

    @app.post("/chat")
    def chat():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        user_input = body.get("message")
        if not isinstance(user_input, str):
            user_input = ""
        wait = bool(body.get("wait"))
        mgr = _manager()

        try:
            mgr.submit(user_input)
        except EmptyMessageError:
            return jsonify({"error": "message is required"}), 400
        except ResponsePendingError:
            return jsonify({"error": "a response is still pending"}), 409

        if not wait:
            return jsonify(mgr.snapshot()), 202

        bot_msg = mgr.respond_now()
        snap = mgr.snapshot()
        reply = bot_msg.text if bot_msg else snap["messages"][-1]["text"]
        return jsonify({
            "reply": reply,
            "context": snap["context"],
            "state": snap["state"],
            "messages": snap["messages"],
            "trace": mgr.last_trace,
        })

    @app.post("/clear")
    def clear():
        mgr = _manager()
        mgr.clear()
        return jsonify(mgr.snapshot())

    return app


def main():
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    app = create_app(settings=settings)
    logger.info("WanderGuide chat service starting on %s:%d", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()

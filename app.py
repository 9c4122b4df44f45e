import logging

from flask import Flask, request, jsonify
from config import Config
from handlers.checkout import handle_checkout


def create_app(config=None):
    config = config or Config()
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.config["SYNC"] = config

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "healthy"}), 200

    @app.route("/webhooks/foxy/checkout", methods=["POST"])
    def foxy_checkout():
        event = {
            "headers": dict(request.headers),
            "body": request.get_data(as_text=True),
        }
        body, status = handle_checkout(event, app.config["SYNC"])
        return jsonify(body), status

    return app


app = create_app()

if __name__ == "__main__":
    app.run(port=app.config["SYNC"].PORT, debug=app.config["SYNC"].DEBUG)

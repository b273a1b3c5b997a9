from flask import Flask, jsonify, request

from app_core.config import load_settings

app = Flask(__name__)


@app.route("/", defaults={"path": ""}, methods=["GET"])
@app.route("/<path:path>", methods=["GET"])
def health(path):
    settings = load_settings()
    return jsonify({
        "ok": True,
        "service": "health",
        "gemini_api_key": "set" if settings.has_api_key() else "not set",
        "model": settings.model,
        "path_seen": request.path
    })

# Exported `app` is the WSGI entrypoint for Vercel's Python runtime.

import logging
import os

from flask import Flask, Response, request

from app_core.config import load_settings
from app_core.proxy import TEXT_PLAIN, ImageAnalysisProxy

app = Flask(__name__)

logging.basicConfig(level=os.getenv('LOG_LEVEL', 'WARNING').upper())

# All methods reach the proxy, which answers non-POST with a plain-text 405
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@app.route("/", defaults={"path": ""}, methods=ALL_METHODS)
@app.route("/<path:path>", methods=ALL_METHODS)
def process(path):
    proxy = ImageAnalysisProxy(load_settings())
    result = proxy.handle(request.method, request.get_data())
    return Response(result.body, status=result.status, content_type=result.content_type)


@app.errorhandler(405)
def method_not_allowed(e):
    # Methods outside ALL_METHODS are rejected by the router before reaching process()
    return Response("Method Not Allowed", status=405, content_type=TEXT_PLAIN)

# Exported `app` is the WSGI entrypoint for Vercel's Python runtime.

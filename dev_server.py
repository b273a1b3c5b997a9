#!/usr/bin/env python3
"""
Local development server that mounts the serverless functions under the
same paths Vercel serves them on (/api/process, /api/health)
"""

import os

from werkzeug.middleware.dispatcher import DispatcherMiddleware
from werkzeug.serving import run_simple

from api.health import app as health_app
from api.process import app as process_app


def not_found(environ, start_response):
    start_response('404 Not Found', [('Content-Type', 'text/plain; charset=utf-8')])
    return [b'Not Found']


application = DispatcherMiddleware(not_found, {
    '/api/process': process_app,
    '/api/health': health_app,
})


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('DEBUG', 'true').lower() == 'true'

    print("Starting receipt proxy dev server...")
    print(f"Gemini API key: {'set' if os.getenv('GEMINI_API_KEY') else 'not set'}")

    run_simple('0.0.0.0', port, application, use_reloader=debug, use_debugger=debug)

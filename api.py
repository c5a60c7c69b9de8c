"""
Flask REST API for PocketCalc
Exposes the calculator session as JSON endpoints
"""
import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

import config
from calculator import Calculator, UnknownButton
from evaluator import EvalError, evaluate
from result_formatter import format_result

logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)  # Enable CORS for all routes

# One session per server process; requests take session.lock around each mutation
session = Calculator()


@app.route('/api')
def api_info():
    """API information page"""
    return f"""
    <html>
    <head><title>{config.APP_NAME} API</title></head>
    <body style="font-family: Arial; padding: 40px; background: #1a1a2e; color: white;">
        <h1>{config.APP_NAME} API Server</h1>
        <h2>Available Endpoints:</h2>
        <ul>
            <li><a href="/api/state" style="color: #2196F3;">/api/state</a> - Current display</li>
            <li>POST /api/press {{"label": "7"}} - Press a button</li>
            <li>POST /api/clear - Reset the session</li>
            <li>POST /api/evaluate {{"expression": "2+2"}} - Evaluate an expression</li>
        </ul>
    </body>
    </html>
    """


@app.route('/api/state')
def get_state():
    """Get the current formula and result lines"""
    try:
        return jsonify({'success': True, 'data': session.get_state()})
    except Exception as e:
        logger.exception("Failed to read calculator state")
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/press', methods=['POST'])
def press_button():
    """Apply one button press to the session"""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    label = payload.get('label')
    if label is None or label == "":
        return jsonify({'success': False, 'error': "Missing 'label'"}), 400
    try:
        with session.lock:
            session.press(label)
            state = session.get_state()
        return jsonify({'success': True, 'data': state})
    except UnknownButton as e:
        logger.warning("Rejected button press: %s", e)
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("Button press %r failed", label)
        return jsonify({'success': False, 'error': str(e)}), 500


@app.route('/api/clear', methods=['POST'])
def clear_session():
    """Reset the session to an empty expression"""
    with session.lock:
        session.clear()
        state = session.get_state()
    return jsonify({'success': True, 'data': state})


@app.route('/api/evaluate', methods=['POST'])
def evaluate_expression():
    """Evaluate an expression without touching the session"""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    expression = payload.get('expression')
    if not isinstance(expression, str):
        return jsonify({'success': False, 'error': "Missing 'expression'"}), 400
    try:
        value = evaluate(expression.replace(" ", ""))
        return jsonify({'success': True, 'data': {'result': format_result(value)}})
    except EvalError as e:
        logger.warning("Evaluation of %r failed: %s", expression, e)
        return jsonify({'success': False, 'error': config.ERROR_TEXT, 'kind': type(e).__name__}), 422


def run_server(host=config.WEB_HOST, port=config.WEB_PORT):
    """Run the development server; single-threaded so requests are handled one at a time"""
    app.run(host=host, port=port, debug=False, threaded=False, use_reloader=False)


if __name__ == '__main__':
    config.setup_logging()
    print("\n" + "="*60)
    print(f"{config.APP_NAME} API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Access from this device: http://localhost:{config.WEB_PORT}")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}")
    print("="*60 + "\n")

    run_server()

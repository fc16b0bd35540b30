import logging

from flask import Flask, jsonify, request

from passgauge.config import DEFAULTS, clamp_input, load_config
from passgauge.crack_time import estimate_time_to_crack
from passgauge.evaluator import analyze
from passgauge.generator import generate_password

logger = logging.getLogger(__name__)

app = Flask(__name__)

def _json_body():
    """Request JSON as a dict; a missing or unparseable body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data

@app.route('/')
def home():
    return jsonify({
        "message": "PassGauge API is running",
        "endpoints": ["/analyze", "/generate"],
    })

@app.route('/analyze', methods=['POST'])
def analyze_route():
    data = _json_body()
    if not isinstance(data, dict):
        return jsonify({'error': 'JSON object expected'}), 400
    password = data.get('password', '')
    if not isinstance(password, str):
        return jsonify({'error': 'password must be a string'}), 400
    password = clamp_input(password, load_config())
    result = analyze(password)
    body = result.to_dict()
    body['time_to_crack'] = estimate_time_to_crack(password, result.score)
    logger.info("analyze request: score=%d level=%s", result.score, result.level.value)
    return jsonify(body)

@app.route('/generate', methods=['POST'])
def generate_route():
    data = _json_body()
    if not isinstance(data, dict):
        return jsonify({'error': 'JSON object expected'}), 400
    cfg = load_config()
    length = data.get('length', cfg.get('generated_length', DEFAULTS['generated_length']))
    if not isinstance(length, int) or isinstance(length, bool):
        return jsonify({'error': 'length must be an integer'}), 400
    if length > int(cfg.get('max_password_length', DEFAULTS['max_password_length'])):
        return jsonify({'error': 'length exceeds max_password_length'}), 400
    try:
        password = generate_password(length)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({'password': password})

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True)

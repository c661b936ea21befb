from flask import Flask, jsonify, request

from secretkit.errors import ConfigError, DecryptionError
from secretkit.generator import (
    generate_multiple,
    generate_with_custom_pool,
    generate_random_number,
    generate_otp,
    generate_api_key,
    generate_pronounceable_password,
)
from secretkit.log import get_logger
from secretkit.pool import GenerationOptions
from secretkit.strength import check_password_strength

logger = get_logger("api")

app = Flask(__name__)

_OPTION_FIELDS = (
    "length", "numbers", "symbols", "lowercase", "uppercase",
    "exclude_similar_characters", "exclude", "strict",
)


@app.errorhandler(ConfigError)
@app.errorhandler(DecryptionError)
def handle_bad_input(e):
    logger.info("rejected request to %s: %s", request.path, e)
    return jsonify({"error": str(e)}), 400


@app.route('/')
def home():
    return jsonify({
        "message": "secretkit API is running"
    })


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("request body must be a JSON object")
    return data


def _int_arg(data: dict, name: str, default: int) -> int:
    value = data.get(name, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer")
    return value


def _str_arg(data: dict, name: str, default: str) -> str:
    value = data.get(name, default)
    if not isinstance(value, str):
        raise ConfigError(f"{name} must be a string")
    return value


@app.route('/generate', methods=['POST'])
def generate_route():
    data = _json_body()
    options = GenerationOptions(**{k: data[k] for k in _OPTION_FIELDS if k in data})
    if data.get('count') is None:
        return jsonify({'password': generate_multiple(1, options)[0]})
    return jsonify({'passwords': generate_multiple(_int_arg(data, 'count', 1), options)})


@app.route('/pronounceable', methods=['POST'])
def pronounceable_route():
    data = _json_body()
    return jsonify({'password': generate_pronounceable_password(_int_arg(data, 'length', 10))})


@app.route('/custom', methods=['POST'])
def custom_route():
    data = _json_body()
    secret = generate_with_custom_pool(_int_arg(data, 'length', 10), _str_arg(data, 'pool', ''))
    return jsonify({'secret': secret})


@app.route('/number', methods=['POST'])
def number_route():
    data = _json_body()
    number = generate_random_number(
        _int_arg(data, 'min', 0), _int_arg(data, 'max', 1000), _int_arg(data, 'length', 4)
    )
    return jsonify({'number': number})


@app.route('/otp', methods=['POST'])
def otp_route():
    data = _json_body()
    return jsonify({'otp': generate_otp(_int_arg(data, 'length', 6))})


@app.route('/apikey', methods=['POST'])
def apikey_route():
    data = _json_body()
    return jsonify({'key': generate_api_key(_int_arg(data, 'bytes', 32))})


@app.route('/strength', methods=['POST'])
def strength_route():
    data = _json_body()
    result = check_password_strength(_str_arg(data, 'password', ''))
    result.pop('password')
    return jsonify(result)


if __name__ == "__main__":
    app.run(debug=True)

import logging

from flask import Flask, jsonify, request

from passmeter.compare import compare_passwords
from passmeter.config import strength_table_from_config
from passmeter.crack_time import calculate_crack_time
from passmeter.evaluator import compute_score
from passmeter.models import CrackTimeOptions, PasswordOptions, PassmeterError
from passmeter.strength import get_strength
from passmeter.validator import validate

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _body():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    return data


def _password(data, key='password'):
    value = data.get(key, '')
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    return value


@app.errorhandler(PassmeterError)
@app.errorhandler(ValueError)
@app.errorhandler(TypeError)
def bad_request(e):
    logger.debug("rejected request: %s", e)
    return jsonify({'error': str(e)}), 400


@app.route('/')
def home():
    return jsonify({"message": "passmeter API is running"})


@app.route('/score', methods=['POST'])
def score_route():
    data = _body()
    options = PasswordOptions.from_dict(data.get('options'))
    result = compute_score(_password(data), options)
    return jsonify(result.to_dict())


@app.route('/validate', methods=['POST'])
def validate_route():
    data = _body()
    options = PasswordOptions.from_dict(data.get('options'))
    errors = validate(_password(data), options)
    return jsonify({'valid': not errors, 'errors': errors})


@app.route('/strength', methods=['POST'])
def strength_route():
    data = _body()
    score = data.get('score')
    if not isinstance(score, int) or isinstance(score, bool):
        raise ValueError("'score' must be an integer")
    table = strength_table_from_config({'strength_table': data.get('strength_table')})
    tier = get_strength(score, table)
    return jsonify({'strength': tier.name.lower(), 'label': tier.label})


@app.route('/crack-time', methods=['POST'])
def crack_time_route():
    data = _body()
    defaults = CrackTimeOptions()
    options = CrackTimeOptions(
        guesses_per_second=float(data.get('guesses_per_second', defaults.guesses_per_second)),
        possible_characters=int(data.get('possible_characters', defaults.possible_characters)),
    )
    result = calculate_crack_time(_password(data), options)
    # inf is not valid JSON
    seconds = result.seconds if result.seconds != float('inf') else None
    return jsonify({'seconds': seconds, 'description': result.description})


@app.route('/compare', methods=['POST'])
def compare_route():
    data = _body()
    options = PasswordOptions.from_dict(data.get('options'))
    result = compare_passwords(_password(data, 'old_password'), _password(data, 'new_password'), options)
    return jsonify(result.to_dict())


if __name__ == "__main__":
    app.run(debug=True)

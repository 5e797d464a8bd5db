from flask import Blueprint, abort, current_app, jsonify, request

from services.errors import NoDataError

bp = Blueprint('api', __name__)

PLAIN_TEXT = {'Content-Type': 'text/plain; charset=utf-8'}


@bp.get('/health')
def health():
    return 'OK', 200, PLAIN_TEXT


# Flask still routes HEAD to GET views; only GET may trigger upstream fetches
@bp.route('/api/v1/ltp', methods=['GET'], provide_automatic_options=False)
def ltp():
    if request.method != 'GET':
        abort(405)

    pair = request.args.get('pair', '')
    pairs_param = request.args.get('pairs', '')

    if pair:
        pairs = [pair]
    elif pairs_param:
        pairs = pairs_param.split(',')
    else:
        pairs = list(current_app.config['DEFAULT_PAIRS'])

    service = current_app.extensions['ltp_service']
    try:
        data = service.resolve(pairs)
    except NoDataError as e:
        return f'Error fetching LTP: {e}', 500, PLAIN_TEXT

    return jsonify(ltp=data)

import json
import logging
import warnings
from flask import Flask, jsonify, request
from flask_cors import CORS
import config
from shamir import ShamirSecretRecovery
from shareweave.errors import InexactResult, ShareWeaveError
from shareweave.loader import parse_document
from shareweave.numtext import from_decimal, to_decimal
from shareweave.presenter import render_secret, secret_fingerprint

app = Flask(__name__)
CORS(app)
logger = logging.getLogger(__name__)

def _failure(kind, message, key=None, status=400):
    return jsonify({"error": kind, "message": message, "key": key}), status

@app.route('/secret/reconstruct', methods=['POST'])
def reconstruct():
    try:
        # integer literals of any length, as in the loader
        document = json.loads(request.get_data(as_text=True), parse_int=from_decimal)
    except ValueError:
        document = None
    if document is None:
        return _failure("MalformedDocument", "request body must be a JSON share document")

    order = request.args.get('order', config.Config.SELECTION_ORDER)
    if order not in config.Config.SELECTION_ORDERS:
        return _failure("InvalidOrder", f"order must be one of {list(config.Config.SELECTION_ORDERS)}")

    try:
        share_set = parse_document(document)
        recovery = ShamirSecretRecovery.from_share_set(share_set, order)
        shares = share_set.decode()
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", InexactResult)
            secret = recovery.recover_secret(shares)
    except ShareWeaveError as e:
        logger.info("[Service] Reconstruction failed: %s: %s", e.kind, e)
        return _failure(e.kind, e.message, e.key_text)

    exact = not any(issubclass(w.category, InexactResult) for w in caught)
    return jsonify({
        "secret": render_secret(secret),
        "exact": exact,
        "mode": recovery.mode.name,
        "fingerprint": secret_fingerprint(secret),
        "threshold": recovery.threshold,
        "selected": [to_decimal(share.x) for share in recovery.select(shares)]
    })

@app.route('/status', methods=['GET'])
def status():
    return jsonify({
        "status": "active",
        "selection_order": config.Config.SELECTION_ORDER,
        "max_base": config.Config.MAX_BASE
    })

if __name__ == '__main__':
    logging.basicConfig(level=config.Config.LOG_LEVEL, format=config.Config.LOG_FORMAT)
    app.run(
        host=config.Config.SERVICE_HOST,
        port=config.Config.SERVICE_PORT,
        threaded=True
    )

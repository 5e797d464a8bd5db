from __future__ import annotations
import logging

from flask import Flask
from flask_cors import CORS

from api.routes import bp as api_bp
from config import Settings
from services.kraken import KrakenClient
from services.ltp import LTPService
from utils.cache import QuoteCache

logger = logging.getLogger(__name__)

PLAIN_TEXT = {'Content-Type': 'text/plain; charset=utf-8'}


def create_app(settings: Settings | None = None, service: LTPService | None = None):
    settings = settings or Settings()
    if service is None:
        client = KrakenClient(base_url=settings.KRAKEN_BASE_URL, timeout=settings.KRAKEN_TIMEOUT_SECONDS)
        service = LTPService(client, QuoteCache(ttl_seconds=settings.CACHE_TTL_SECONDS))

    app = Flask(__name__)
    CORS(app)
    app.config['DEFAULT_PAIRS'] = list(settings.DEFAULT_PAIRS)
    app.extensions['ltp_service'] = service
    app.register_blueprint(api_bp)

    # Plain-text errors, matching the 500 body of the LTP endpoint
    @app.errorhandler(404)
    def handle_404(e):
        return 'Not found', 404, PLAIN_TEXT

    @app.errorhandler(405)
    def handle_405(e):
        return 'Method not allowed', 405, PLAIN_TEXT

    @app.errorhandler(500)
    def handle_500(e):
        return 'Internal server error', 500, PLAIN_TEXT

    return app


app = create_app()

if __name__ == '__main__':
    settings = Settings()
    logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logger.info("Starting server on port %s", settings.PORT)
    logger.info("Endpoints:")
    logger.info("  GET /api/v1/ltp - Get all pairs")
    logger.info("  GET /api/v1/ltp?pair=BTC/USD - Get single pair")
    logger.info("  GET /api/v1/ltp?pairs=BTC/USD,BTC/EUR - Get multiple pairs")
    logger.info("  GET /health - Health check")
    app.run(host=settings.HOST, port=settings.PORT, threaded=True)

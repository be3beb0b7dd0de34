"""
Flask Application Factory for the Hot-Zone Detection service.
"""

from flask import Flask

import sys
sys.path.insert(0, '.')
from config import SECRET_KEY


def create_app(orchestrator=None):
    app = Flask(__name__)

    app.config['SECRET_KEY'] = SECRET_KEY
    app.json.sort_keys = False      # Keep zones in A → F order

    from hotzone.engine import HotZoneOrchestrator
    app.extensions['hotzone'] = orchestrator if orchestrator is not None else HotZoneOrchestrator()

    from hotzone.routes import main_bp, zones_bp
    app.register_blueprint(main_bp)
    app.register_blueprint(zones_bp)

    return app

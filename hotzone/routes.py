"""
HTTP Routes - Health check and hot-zone analysis endpoints.
"""

from flask import Blueprint, current_app, jsonify, request

import sys
sys.path.insert(0, '.')
from config import SAMPLE_SESSION

main_bp = Blueprint('main', __name__)
zones_bp = Blueprint('zones', __name__, url_prefix='/api/zones')


def _orchestrator():
    return current_app.extensions['hotzone']


def _bad_request(error, details):
    return jsonify({'success': False, 'error': error, 'details': details}), 400


@main_bp.route('/health')
def health():
    return jsonify({'status': 'ok', 'service': 'Hot-Zone Detection Engine'})


@zones_bp.route('/shift-status', methods=['GET', 'POST'])
def shift_status():
    """Analyze a spin history.

    POST body: {"spinHistory": [...]}; GET: ?results=1,2,5,...
    """
    body = request.get_json(silent=True) or {}
    history = body.get('spinHistory') if isinstance(body, dict) else None

    if history is None and request.args.get('results'):
        history = [r.strip() for r in request.args['results'].split(',') if r.strip()]

    if history is None:
        return _bad_request('Spin history is required',
                            'Provide spinHistory in the request body or results in the query string')
    if not isinstance(history, list):
        return _bad_request('Spin history must be a list',
                            'spinHistory should be a list of result strings')

    analysis = _orchestrator().analyze(history)
    return jsonify({'success': True, **analysis})


@zones_bp.route('/info')
def zone_info():
    return jsonify({'success': True, 'data': _orchestrator().get_zone_configuration()})


@zones_bp.route('/test-analysis')
def test_analysis():
    """Analysis of the built-in sample session, for development."""
    analysis = _orchestrator().analyze(SAMPLE_SESSION)
    return jsonify({
        'success': True,
        'message': 'Test analysis generated with sample data',
        'sample_data': SAMPLE_SESSION,
        'analysis': analysis,
    })

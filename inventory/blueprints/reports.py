"""Reports blueprint (JSON, read-only)."""
from flask import Blueprint, request, jsonify, current_app
from inventory.database import get_session
from inventory.services import report_service
from inventory.utils.formatters import iso

reports_bp = Blueprint('reports', __name__, url_prefix='/reports')


@reports_bp.route('/low-stock')
def low_stock():
    """Products at or below their reorder level."""
    session = get_session()
    return jsonify(report_service.get_low_stock(session))


@reports_bp.route('/supplier-stock')
def supplier_stock():
    """Stock grouped by supplier."""
    session = get_session()
    rows = report_service.get_supplier_stock(session)
    for row in rows:
        row['price'] = str(row['price'])
    return jsonify(rows)


@reports_bp.route('/transactions')
def transactions():
    """Transaction history, newest first. ?limit=n (0 = no limit)."""
    session = get_session()
    limit = request.args.get('limit', type=int)
    if limit is None:
        limit = current_app.config.get('TRANSACTION_HISTORY_LIMIT')
    rows = report_service.get_transaction_history(session, limit=limit)
    for row in rows:
        row['txn_date'] = iso(row['txn_date'])
    return jsonify(rows)

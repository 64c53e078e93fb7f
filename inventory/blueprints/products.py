"""Products blueprint (JSON): catalog and stock movements."""
from flask import Blueprint, request, jsonify
from inventory.database import get_session
from inventory.services import catalog_service, stock_service

products_bp = Blueprint('products', __name__, url_prefix='/products')


@products_bp.route('/', methods=['GET'])
def list_products():
    """List all products."""
    session = get_session()
    products = catalog_service.list_products(session)
    return jsonify([p.to_dict() for p in products])


@products_bp.route('/', methods=['POST'])
def create_product():
    """Create a new product."""
    session = get_session()
    payload = request.get_json(silent=True) or {}
    product = catalog_service.create_product(payload, session)
    return jsonify(product.to_dict()), 201


@products_bp.route('/<int:product_id>', methods=['GET'])
def view_product(product_id):
    """Product detail with its transaction ledger."""
    session = get_session()
    product = catalog_service.get_product(product_id, session)
    data = product.to_dict()
    data['transactions'] = [t.to_dict() for t in product.transactions]
    return jsonify(data)


@products_bp.route('/<int:product_id>/stock', methods=['GET'])
def get_stock(product_id):
    """Current stock level."""
    session = get_session()
    stock_qty = stock_service.get_stock(product_id, session)
    return jsonify({'product_id': product_id, 'stock_qty': stock_qty})


@products_bp.route('/<int:product_id>/stock/in', methods=['POST'])
def stock_in(product_id):
    """Receive stock. Body: {"quantity": n}."""
    session = get_session()
    payload = request.get_json(silent=True) or {}
    stock_qty = stock_service.receive_stock(product_id, payload.get('quantity'), session)
    return jsonify({'product_id': product_id, 'stock_qty': stock_qty})


@products_bp.route('/<int:product_id>/stock/out', methods=['POST'])
def stock_out(product_id):
    """Issue stock. Body: {"quantity": n}."""
    session = get_session()
    payload = request.get_json(silent=True) or {}
    stock_qty = stock_service.issue_stock(product_id, payload.get('quantity'), session)
    return jsonify({'product_id': product_id, 'stock_qty': stock_qty})

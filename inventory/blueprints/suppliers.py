"""Suppliers blueprint (JSON)."""
from flask import Blueprint, request, jsonify
from inventory.database import get_session
from inventory.services import catalog_service

suppliers_bp = Blueprint('suppliers', __name__, url_prefix='/suppliers')


@suppliers_bp.route('/', methods=['GET'])
def list_suppliers():
    """List all suppliers ordered by name."""
    session = get_session()
    suppliers = catalog_service.list_suppliers(session)
    return jsonify([s.to_dict() for s in suppliers])


@suppliers_bp.route('/', methods=['POST'])
def create_supplier():
    """Create a new supplier."""
    session = get_session()
    payload = request.get_json(silent=True) or {}
    supplier = catalog_service.create_supplier(payload, session)
    return jsonify(supplier.to_dict()), 201


@suppliers_bp.route('/<int:supplier_id>', methods=['GET'])
def view_supplier(supplier_id):
    """Supplier detail with its products."""
    session = get_session()
    supplier = catalog_service.get_supplier(supplier_id, session)
    data = supplier.to_dict()
    data['products'] = [p.to_dict() for p in supplier.products]
    return jsonify(data)


@suppliers_bp.route('/<int:supplier_id>', methods=['DELETE'])
def delete_supplier(supplier_id):
    """Delete a supplier no product references."""
    session = get_session()
    catalog_service.delete_supplier(supplier_id, session)
    return '', 204

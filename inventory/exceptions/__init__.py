"""Custom exceptions for the inventory application."""


class InventoryError(Exception):
    """Base exception for all application errors."""
    def __init__(self, message="An internal error occurred", status_code=500, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv['message'] = self.message
        rv['status'] = 'error'
        return rv


class BusinessLogicError(InventoryError):
    """Exception raised for business logic violations."""
    def __init__(self, message, status_code=400, payload=None):
        super().__init__(message, status_code, payload)


class NotFoundError(InventoryError):
    """Exception raised when a resource is not found."""
    def __init__(self, message="Resource not found", payload=None):
        super().__init__(message, 404, payload)


class InvalidQuantityError(BusinessLogicError):
    """Raised when a stock movement quantity is not a positive integer."""
    def __init__(self, quantity=None):
        super().__init__(
            'Quantity must be greater than zero!',
            status_code=400,
            payload={'quantity': quantity} if isinstance(quantity, int) else None
        )
        self.quantity = quantity


class InsufficientStockError(BusinessLogicError):
    """Raised when an issue asks for more units than are on hand."""
    def __init__(self, product_id, requested, available):
        super().__init__(
            f'Insufficient stock! Available: {available}',
            status_code=409,
            payload={'product_id': product_id, 'requested': requested, 'available': available}
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class NegativeStockRejectedError(BusinessLogicError):
    """Raised by the stock guard when a write would leave stock below zero."""
    def __init__(self, attempted):
        super().__init__(
            'Stock cannot go negative - Transaction blocked!',
            status_code=409,
            payload={'attempted': attempted} if attempted is not None else None
        )
        self.attempted = attempted


class SupplierInUseError(BusinessLogicError):
    """Raised when deleting a supplier that products still reference."""
    def __init__(self, supplier_name, product_count):
        super().__init__(
            f'Supplier "{supplier_name}" cannot be deleted: '
            f'{product_count} product(s) still reference it',
            status_code=409,
            payload={'product_count': product_count}
        )
        self.product_count = product_count

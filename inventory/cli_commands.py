"""
Flask CLI commands for inventory management.

Commands:
- flask init-db: Create tables
- flask seed-demo: Load demo suppliers and products
- flask get-stock / stock-in / stock-out: Stock query and movements
- flask low-stock / supplier-stock / transactions: Reports
"""

import click
from flask import current_app
from inventory.database import get_session, create_all
from inventory.exceptions import InventoryError
from inventory.services import stock_service, report_service, seed_service
from inventory.utils.formatters import money, datetime_fmt, pad_row

RULE = '-' * 45


def _fail(error):
    click.echo(click.style(f'❌ {error.message}', fg='red'))


def init_cli_commands(app):
    """Register CLI commands with Flask app."""

    @app.cli.command('init-db')
    def init_db_command():
        """Create all tables."""
        create_all()
        click.echo(click.style('✅ Tables created', fg='green'))

    @app.cli.command('seed-demo')
    def seed_demo_command():
        """Load demo suppliers and products into an empty catalog."""
        create_all()
        if seed_service.seed_demo(get_session()):
            click.echo(click.style('✅ Demo data loaded', fg='green'))
        else:
            click.echo('Catalog already has products, nothing loaded.')

    @app.cli.command('get-stock')
    @click.argument('product_id', type=int)
    def get_stock_command(product_id):
        """Show current stock of a product."""
        try:
            stock_qty = stock_service.get_stock(product_id, get_session())
        except InventoryError as e:
            _fail(e)
            raise SystemExit(1)
        click.echo(f'Product {product_id}: {stock_qty}')

    @app.cli.command('stock-in')
    @click.argument('product_id', type=int)
    @click.argument('quantity', type=int)
    def stock_in_command(product_id, quantity):
        """Receive QUANTITY units of PRODUCT_ID."""
        try:
            new_stock = stock_service.receive_stock(product_id, quantity, get_session())
        except InventoryError as e:
            _fail(e)
            raise SystemExit(1)
        click.echo(click.style(
            f'Stock IN successful! Added {quantity} units. New stock: {new_stock}', fg='green'
        ))

    @app.cli.command('stock-out')
    @click.argument('product_id', type=int)
    @click.argument('quantity', type=int)
    def stock_out_command(product_id, quantity):
        """Issue QUANTITY units of PRODUCT_ID."""
        try:
            remaining = stock_service.issue_stock(product_id, quantity, get_session())
        except InventoryError as e:
            _fail(e)
            raise SystemExit(1)
        click.echo(click.style(
            f'Stock OUT successful! Removed {quantity} units. Remaining stock: {remaining}', fg='green'
        ))

    @app.cli.command('low-stock')
    def low_stock_command():
        """Print the low stock alert."""
        rows = report_service.get_low_stock(get_session())
        click.echo('=== LOW STOCK ALERT ===')
        click.echo(pad_row('Product', 'Stock', 'Supplier'))
        click.echo(RULE)
        for row in rows:
            click.echo(pad_row(row['product_name'], row['stock_qty'], row['supplier_name']))

    @app.cli.command('supplier-stock')
    def supplier_stock_command():
        """Print stock grouped by supplier."""
        rows = report_service.get_supplier_stock(get_session())
        widths = (25, 25, 15)
        click.echo(pad_row('Supplier', 'Product', 'Price', 'Stock', widths=widths))
        click.echo('-' * 75)
        for row in rows:
            click.echo(pad_row(
                row['supplier_name'], row['product_name'], money(row['price']), row['stock_qty'],
                widths=widths
            ))

    @app.cli.command('transactions')
    @click.option('--limit', type=int, default=None, help='Maximum rows (default from config)')
    def transactions_command(limit):
        """Print the transaction history, newest first."""
        if limit is None:
            limit = current_app.config.get('TRANSACTION_HISTORY_LIMIT')
        try:
            rows = report_service.get_transaction_history(get_session(), limit=limit)
        except InventoryError as e:
            _fail(e)
            raise SystemExit(1)
        widths = (8, 25, 6, 10)
        click.echo(pad_row('Txn', 'Product', 'Type', 'Qty', 'Date', widths=widths))
        click.echo('-' * 65)
        for row in rows:
            click.echo(pad_row(
                row['txn_id'], row['product_name'], row['txn_type'], row['quantity'],
                datetime_fmt(row['txn_date']), widths=widths
            ))

"""Database configuration and initialization."""
from sqlalchemy import create_engine, event
from sqlalchemy.orm import scoped_session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from inventory.exceptions import NegativeStockRejectedError

STOCK_QTY_CHECK = 'products_stock_qty_check'

# Create SQLAlchemy base
Base = declarative_base()

# Global session and engine
engine = None
db_session = None


def _engine_options(database_uri, echo):
    """Build create_engine kwargs for the configured backend."""
    if database_uri.startswith('sqlite'):
        options = {
            'echo': echo,
            'connect_args': {'check_same_thread': False},  # SQLite only
        }
        if database_uri in ('sqlite://', 'sqlite:///:memory:'):
            # One shared connection, otherwise every checkout sees an empty database
            options['poolclass'] = StaticPool
        return options

    return {
        'echo': echo,
        'pool_pre_ping': True,  # Enable connection health checks
        'pool_size': 10,
        'max_overflow': 20,
    }


def init_db(app):
    """Initialize database connection."""
    global engine, db_session

    database_uri = app.config['SQLALCHEMY_DATABASE_URI']
    engine = create_engine(
        database_uri,
        **_engine_options(database_uri, app.config.get('SQLALCHEMY_ECHO', False))
    )

    if engine.dialect.name == 'sqlite':
        @event.listens_for(engine, 'connect')
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute('PRAGMA foreign_keys=ON')
            cursor.close()

    @event.listens_for(engine, 'handle_error')
    def _translate_stock_check(context):
        # Raw SQL and bulk updates skip the ORM validator; the CHECK catches them
        if STOCK_QTY_CHECK in str(context.original_exception):
            raise NegativeStockRejectedError(None)

    db_session = scoped_session(
        sessionmaker(autocommit=False, autoflush=False, bind=engine)
    )

    Base.query = db_session.query_property()

    # Register teardown
    @app.teardown_appcontext
    def shutdown_session(exception=None):
        """Close database session and rollback on error."""
        if exception:
            db_session.rollback()
        db_session.remove()


def create_all():
    """Create every table registered on Base."""
    # Import models so their tables are attached to Base.metadata
    import inventory.models  # noqa: F401
    Base.metadata.create_all(bind=engine)


def drop_all():
    """Drop every table registered on Base."""
    import inventory.models  # noqa: F401
    Base.metadata.drop_all(bind=engine)


def get_session():
    """Get database session."""
    return db_session

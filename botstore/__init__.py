"""botstore.

Storage bootstrap for a conversational bot server. The package opens a SQLite
or PostgreSQL connection from configuration and makes sure the server's tables
exist before anything else touches the database.

Core subpackages
----------------

- ``botstore.core.database``:

  - ``Database``: opens the connection and bootstraps or tears down tables.
  - Table descriptors (``botstore.core.database.tables``) and the SQLModel
    entities they create.

Typical workflow
----------------

1. Build a ``DatabaseConfig`` (or load ``Settings`` from the environment).
2. ``await Database(config).initialize()``.
3. Use ``Database.session()`` for ORM access.
"""

__version__ = "0.1.0"

"""
Table Explorer Services

Table listing, column introspection and row reads for the database
explorer. Table names are interpolated into PRAGMA and SELECT statements
because identifiers cannot be bound as parameters, so every name is first
checked against the table list read from ``sqlite_master``. That
membership check is the only injection defense; do not bypass it.
"""

import datetime
import decimal
import logging
import math
from dataclasses import dataclass

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from renovaapp.services.errors import StoreConnectionError, QueryError, TableNotFoundError

logger = logging.getLogger(__name__)

SAMPLE_ROW_LIMIT = 10

LIST_TABLES_SQL = "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"


@dataclass(frozen=True)
class TableDescriptor:
    name: str


@dataclass(frozen=True)
class ColumnDescriptor:
    name: str
    declared_type: str
    not_null: bool
    is_primary_key: bool


@dataclass(frozen=True)
class RowSet:
    """Rows of one table together with the column order they were read in."""
    columns: tuple
    rows: tuple

    def __len__(self):
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def values(self):
        """Yield each row as a list of cells in column order."""
        for row in self.rows:
            yield [row.get(column) for column in self.columns]


def to_scalar(value):
    """Reduce a driver value to str, int, float, bool or None."""
    if isinstance(value, float) and not math.isfinite(value):
        # JSON has no Infinity or NaN
        return None
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()
    if isinstance(value, decimal.Decimal):
        return float(value)
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


def quote_identifier(name):
    """Quote a (validated) identifier for interpolation into a text() statement."""
    quoted = '"' + name.replace('"', '""') + '"'
    # text() would read ":word" as a bind parameter
    return quoted.replace(':', '\\:')


class TableExplorer:
    """Request-scoped reader over a SQLAlchemy session or connection.

    The table list is read once and reused to validate every table name
    passed to ``describe``, ``sample`` and ``fetch_all``.
    """

    def __init__(self, connection, sample_limit=SAMPLE_ROW_LIMIT):
        self._connection = connection
        self.sample_limit = sample_limit
        self._tables = None

    def list_tables(self):
        """Return every table in the store, sorted by name."""
        if self._tables is None:
            try:
                result = self._connection.execute(text(LIST_TABLES_SQL))
                names = [row[0] for row in result]
            except SQLAlchemyError as e:
                logger.exception('Could not list tables: %s', e)
                raise StoreConnectionError(_error_message(e)) from e
            self._tables = [TableDescriptor(name=name) for name in sorted(set(names))]
        return list(self._tables)

    def table_names(self):
        return [table.name for table in self.list_tables()]

    def require_table(self, name):
        """Return ``name`` if it is a listed table, else raise TableNotFoundError."""
        if not name or name not in self.table_names():
            logger.warning('Rejected unknown table name %r', name)
            raise TableNotFoundError(name)
        return name

    def describe(self, name):
        """Return the column schema of a table in store-native order."""
        table = self.require_table(name)
        statement = text(f'PRAGMA table_info({quote_identifier(table)})')
        try:
            result = self._connection.execute(statement).mappings().all()
        except SQLAlchemyError as e:
            logger.exception('Could not introspect table %s: %s', table, e)
            raise QueryError(_error_message(e)) from e
        if not result:
            # PRAGMA returns nothing for a table dropped after it was listed
            raise QueryError(f'no such table: {table}')
        return [
            ColumnDescriptor(
                name=row['name'],
                declared_type=row['type'] or '',
                not_null=bool(row['notnull']),
                is_primary_key=bool(row['pk']),
            )
            for row in result
        ]

    def sample(self, name, limit=None):
        """Return the first ``limit`` rows of a table (the sample limit by default)."""
        return self._select(name, self.sample_limit if limit is None else limit)

    def fetch_all(self, name):
        """Return every row of a table, for export."""
        return self._select(name, None)

    def _select(self, name, limit):
        table = self.require_table(name)
        sql = f'SELECT * FROM {quote_identifier(table)}'
        params = {}
        if limit is not None:
            sql += ' LIMIT :limit'
            params['limit'] = int(limit)
        try:
            result = self._connection.execute(text(sql), params)
            columns = tuple(result.keys())
            rows = tuple(
                {column: to_scalar(value) for column, value in zip(columns, row)}
                for row in result
            )
        except SQLAlchemyError as e:
            logger.exception('Could not read rows of table %s: %s', table, e)
            raise QueryError(_error_message(e)) from e
        return RowSet(columns=columns, rows=rows)


def _error_message(error):
    """Return the driver's message without SQLAlchemy's statement dump."""
    orig = getattr(error, 'orig', None)
    if orig is not None:
        return str(orig)
    return str(error)

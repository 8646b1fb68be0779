"""
Explorer Errors

Failures of the table explorer, translated from SQLAlchemy errors at the
boundary of each store operation.
"""


class ExplorerError(Exception):
    """Base class for table explorer failures"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class StoreConnectionError(ExplorerError):
    """The store could not be reached or its table list could not be read"""


class QueryError(ExplorerError):
    """A statement against one table failed"""


class TableNotFoundError(ExplorerError):
    """The requested table is not in the store's table list"""

    def __init__(self, table):
        super().__init__(f'Tabela "{table}" não encontrada.')
        self.table = table

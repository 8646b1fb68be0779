"""
Services Package

Exports all services for easy importing.
"""

from renovaapp.services.errors import ExplorerError, StoreConnectionError, QueryError, TableNotFoundError
from renovaapp.services.tables import (
    TableExplorer, TableDescriptor, ColumnDescriptor, RowSet, SAMPLE_ROW_LIMIT
)
from renovaapp.services.export import EXPORT_FORMATS, ExportDocument, build_export, to_csv, to_json

__all__ = [
    'ExplorerError',
    'StoreConnectionError',
    'QueryError',
    'TableNotFoundError',
    'TableExplorer',
    'TableDescriptor',
    'ColumnDescriptor',
    'RowSet',
    'SAMPLE_ROW_LIMIT',
    'EXPORT_FORMATS',
    'ExportDocument',
    'build_export',
    'to_csv',
    'to_json',
]

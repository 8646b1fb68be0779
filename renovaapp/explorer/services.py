"""
Explorer Services

Assembles what the explorer page shows. Reads run in order (table list,
then schema, then rows) and each failure is confined to its own section.
"""

from renovaapp.services import StoreConnectionError, QueryError, TableNotFoundError


def load_database_view(explorer, table_name=None):
    """Build the template context for the explorer page."""
    view = {
        'connection': 'success',
        'tables': [],
        'error': None,
        'not_found': None,
        'selected_table': table_name or None,
        'schema': None,
        'rows': None,
    }

    try:
        view['tables'] = explorer.list_tables()
    except StoreConnectionError as e:
        view.update(connection='failed', error=e.message, selected_table=None)
        return view

    if not table_name:
        return view

    try:
        view['schema'] = explorer.describe(table_name)
    except TableNotFoundError as e:
        view['not_found'] = e.message
        return view
    except QueryError as e:
        view['error'] = e.message
        return view

    try:
        view['rows'] = explorer.sample(table_name)
    except QueryError as e:
        view['error'] = e.message

    return view


def describe_table(explorer, table_name):
    """JSON-ready schema and sample of one table."""
    columns = explorer.describe(table_name)
    rows = explorer.sample(table_name)
    return {
        'table': table_name,
        'columns': [
            {
                'name': column.name,
                'type': column.declared_type,
                'notnull': column.not_null,
                'pk': column.is_primary_key,
            }
            for column in columns
        ],
        'rows': list(rows),
    }

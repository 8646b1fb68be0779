"""
Explorer Routes

The download URL serves both the plain link and the page's fetch-and-save
button, so both deliver the same bytes.
"""

import logging

from flask import render_template, request, current_app, jsonify, Response

from renovaapp.admin.decorators import admin_required
from renovaapp.explorer import explorer_bp
from renovaapp.explorer.services import load_database_view, describe_table
from renovaapp.extensions import db
from renovaapp.services import (
    TableExplorer, ExplorerError, TableNotFoundError, EXPORT_FORMATS, build_export
)

logger = logging.getLogger(__name__)


def _explorer():
    return TableExplorer(db.session, sample_limit=current_app.config['SAMPLE_ROW_LIMIT'])


def _plain_text(message, status):
    return Response(message, status=status, mimetype='text/plain')


@explorer_bp.route('/database')
@admin_required
def database():
    """Explorer page, or the table export when download=true"""
    table_name = request.args.get('table')
    if table_name and request.args.get('download') == 'true':
        return download(table_name)

    view = load_database_view(_explorer(), table_name)
    return render_template('explorer/database.html',
                           export_format=current_app.config['EXPORT_FORMAT'],
                           **view)


def download(table_name):
    """Serve a full-table export as an attachment"""
    explorer = _explorer()
    try:
        explorer.require_table(table_name)
    except TableNotFoundError as e:
        return _plain_text(e.message, 404)
    except ExplorerError as e:
        return _plain_text(f'Erro ao exportar a tabela "{table_name}": {e.message}', 500)

    fmt = (request.args.get('format') or current_app.config['EXPORT_FORMAT']).lower()
    if fmt not in EXPORT_FORMATS:
        return _plain_text(f'Formato de exportação inválido: {fmt}', 400)

    try:
        row_set = explorer.fetch_all(table_name)
    except ExplorerError as e:
        return _plain_text(f'Erro ao exportar a tabela "{table_name}": {e.message}', 500)

    document = build_export(table_name, row_set, fmt)
    logger.info('Exported %d rows of %s as %s', len(row_set), table_name, fmt)
    return Response(document.encode(),
                    content_type=document.content_type,
                    headers={'Content-Disposition': document.content_disposition})


@explorer_bp.route('/api/tables')
@admin_required
def api_tables():
    """Return JSON list of table names"""
    try:
        tables = _explorer().table_names()
    except ExplorerError as e:
        return jsonify(error=e.message), 500
    return jsonify(tables=tables)


@explorer_bp.route('/api/tables/<path:table_name>')
@admin_required
def api_table(table_name):
    """Return JSON schema and row sample of one table"""
    try:
        data = describe_table(_explorer(), table_name)
    except TableNotFoundError as e:
        return jsonify(error=e.message), 404
    except ExplorerError as e:
        return jsonify(error=e.message), 500
    return jsonify(data)

"""
Export Serialization

CSV and JSON renditions of a table's rows, and the attachment metadata
used to deliver them.
"""

import json
from dataclasses import dataclass

BOM = '\ufeff'
CSV_SPECIAL_CHARS = (',', '"', '\n', '\r')


def csv_cell(value):
    """Stringify one cell, quoting it when it holds a separator, quote or newline."""
    if value is None:
        text = ''
    elif isinstance(value, bool):
        text = 'true' if value else 'false'
    else:
        text = str(value)
    if any(char in text for char in CSV_SPECIAL_CHARS):
        return '"' + text.replace('"', '""') + '"'
    return text


def to_csv(row_set):
    """Serialize rows as CSV with a UTF-8 BOM; no rows gives an empty string."""
    if not len(row_set):
        return ''
    lines = [','.join(csv_cell(column) for column in row_set.columns)]
    for values in row_set.values():
        lines.append(','.join(csv_cell(value) for value in values))
    return BOM + '\n'.join(lines)


def to_json(row_set):
    """Serialize rows as a 2-space indented JSON array of objects."""
    rows = [dict(zip(row_set.columns, values)) for values in row_set.values()]
    return json.dumps(rows, indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class ExportFormat:
    extension: str
    content_type: str
    serializer: object


EXPORT_FORMATS = {
    'csv': ExportFormat('csv', 'text/csv; charset=utf-8', to_csv),
    'json': ExportFormat('json', 'application/json', to_json),
}


@dataclass(frozen=True)
class ExportDocument:
    filename: str
    content_type: str
    body: str

    @property
    def content_disposition(self):
        filename = self.filename.replace('\\', '\\\\').replace('"', '\\"')
        return f'attachment; filename="{filename}"'

    def encode(self):
        return self.body.encode('utf-8')


def build_export(table, row_set, fmt='csv'):
    """Serialize a table's rows into a downloadable document."""
    try:
        export_format = EXPORT_FORMATS[fmt]
    except KeyError:
        raise ValueError(f'Unsupported export format: {fmt}') from None
    return ExportDocument(
        filename=f'{table}.{export_format.extension}',
        content_type=export_format.content_type,
        body=export_format.serializer(row_set),
    )

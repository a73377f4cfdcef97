"""
Query criteria translation for the QBO query language.

Criteria may be given as:
- a literal string, appended verbatim (e.g. " where Active = true")
- a list of {'field', 'value', 'operator'} dicts
- a dict mapping field name to value (equality conditions)

The reserved fields limit, offset, asc and desc (any case) become
MAXRESULTS, STARTPOSITION and ORDERBY clauses instead of conditions.
"""

from collections.abc import Mapping
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from .exceptions import ValidationError

QUERY_OPERATORS = ('=', 'IN', '<', '>', '<=', '>=', 'LIKE')

_QUERY_ESCAPES = str.maketrans({
    char: f'%{ord(char):02X}' for char in "%'=<>&#+\\"
})


def capitalize(s: str) -> str:
    return s[:1].upper() + s[1:]


def pluralize(s: str) -> str:
    if s.endswith('s'):
        return s + 'es'
    if s.endswith('y'):
        return s[:-1] + 'ies'
    return s + 's'


def _flatten(criteria) -> List[Dict[str, Any]]:
    """Normalize list or dict criteria into a list of criterion dicts."""
    flattened = []

    if isinstance(criteria, Mapping):
        for field, value in criteria.items():
            flattened.append({'field': field, 'value': value, 'operator': '='})
        return flattened

    if isinstance(criteria, (list, tuple)):
        for criterion in criteria:
            if not isinstance(criterion, Mapping):
                raise ValidationError(f"Invalid query criterion: {criterion!r}")
            if criterion.get('field') is None or criterion.get('value') is None:
                continue

            operator = criterion.get('operator') or '='
            if str(operator).upper() not in QUERY_OPERATORS:
                operator = '='

            flattened.append({
                'field': criterion['field'],
                'value': criterion['value'],
                'operator': operator,
            })
        return flattened

    raise ValidationError(f"Unsupported query criteria type: {type(criteria).__name__}")


def _format_value(value) -> str:
    if isinstance(value, bool):
        return "'true'" if value else "'false'"
    if isinstance(value, (list, tuple)):
        return '(' + ', '.join(_format_value(v) for v in value) + ')'
    return f"'{value}'"


def criteria_to_string(criteria) -> str:
    """
    Convert query criteria to the tail of a QBO query.

    Returns:
        String starting with a space (e.g. " where Name = 'x' maxresults 5"),
        or an empty string when there is nothing to add.
    """
    if criteria is None:
        return ''
    if isinstance(criteria, str):
        return criteria

    conditions = []
    limit = offset = asc = desc = None

    for criterion in _flatten(criteria):
        field = str(criterion['field'])
        value = criterion['value']
        key = field.lower()

        if key == 'limit':
            limit = value
        elif key == 'offset':
            offset = value
        elif key == 'asc':
            asc = value
        elif key == 'desc':
            desc = value
        else:
            conditions.append(f"{field} {criterion['operator']} {_format_value(value)}")

    sql = ''
    if conditions:
        sql = ' where ' + ' and '.join(conditions)

    order_by = []
    if asc:
        order_by.append(f'{asc} asc')
    if desc:
        order_by.append(f'{desc} desc')
    if order_by:
        sql += ' orderby ' + ', '.join(order_by)

    if offset:
        sql += f' startposition {offset}'
    if limit:
        sql += f' maxresults {limit}'

    return sql


def extract_count(criteria) -> Tuple[bool, Any]:
    """
    Pull the 'count' option out of criteria.

    Returns:
        Tuple of (count requested, remaining criteria). The input is not modified.
    """
    count = False

    if isinstance(criteria, Mapping):
        remaining = {}
        for field, value in criteria.items():
            if str(field).lower() == 'count':
                count = bool(value)
            else:
                remaining[field] = value
        return count, remaining

    if isinstance(criteria, (list, tuple)):
        remaining = []
        for criterion in criteria:
            if isinstance(criterion, Mapping) and str(criterion.get('field', '')).lower() == 'count':
                count = bool(criterion.get('value'))
            else:
                remaining.append(criterion)
        return count, remaining

    return count, criteria


def paginate_criteria(criteria, start_position: int, page_size: int):
    """Return criteria restricted to one page, replacing any limit/offset."""
    if criteria is None:
        criteria = {}

    if isinstance(criteria, str):
        return f'{criteria} startposition {start_position} maxresults {page_size}'

    if isinstance(criteria, Mapping):
        page = {
            field: value for field, value in criteria.items()
            if str(field).lower() not in ('limit', 'offset')
        }
        page['offset'] = start_position
        page['limit'] = page_size
        return page

    page = [
        criterion for criterion in criteria
        if not (isinstance(criterion, Mapping)
                and str(criterion.get('field', '')).lower() in ('limit', 'offset'))
    ]
    page.append({'field': 'offset', 'value': start_position})
    page.append({'field': 'limit', 'value': page_size})
    return page


def escape_query(query: str) -> str:
    """Percent-escape the characters QBO requires escaped in a query."""
    return query.translate(_QUERY_ESCAPES)


def build_query(entity_name: str, criteria=None, count: bool = False) -> str:
    """
    Build the escaped query string for an entity.

    Example:
        >>> build_query('Customer', {'DisplayName': 'Bob', 'limit': 5})
        'select * from Customer where DisplayName %3D %27Bob%27 maxresults 5'
    """
    requested, criteria = extract_count(criteria)
    count = count or requested
    select = 'select count(*) from' if count else 'select * from'
    return escape_query(f'{select} {entity_name}{criteria_to_string(criteria)}')


def _format_param(value) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ','.join(_format_param(v) for v in value)
    return str(value)


def report_params(options: Optional[Mapping]) -> Dict[str, str]:
    """Convert report options to query parameters."""
    if not options:
        return {}
    return {key: _format_param(value) for key, value in options.items()}

# -*- coding: utf-8 -*-
"""Grouping and layout logic for department schedules (no Revit dependencies).

Parameter access is injected as ``read(element, name)``, returning the
parameter's display string or None when the element has no such parameter.
"""
from collections import OrderedDict, namedtuple

import constants


class ScheduleError(Exception):
    """Raised when a schedule cannot be described or built."""


FieldSpec = namedtuple('FieldSpec', ['key', 'source', 'param', 'kind', 'hidden', 'totals'])
FilterSpec = namedtuple('FilterSpec', ['field', 'value'])
SortGroupSpec = namedtuple('SortGroupSpec', ['field', 'show_header', 'show_footer', 'show_blank_line'])
ScheduleLayout = namedtuple(
    'ScheduleLayout',
    ['name', 'department', 'fields', 'filter', 'sort_groups', 'flags'],
)


def _rule(rules, key, default):
    if not rules:
        return default
    value = rules.get(key)
    if value is None:
        return default
    return value


def department_param(rules=None):
    return _rule(rules, 'department_param', constants.DEPARTMENT_PARAM)


def no_department_label(rules=None):
    return _rule(rules, 'no_department_label', constants.NO_DEPARTMENT)


def get_department(room, read, rules=None):
    """Department of a room, or the no-department label when the parameter is absent.

    The value is returned as-is: no case folding, no stripping.
    """
    value = read(room, department_param(rules))
    if value is None:
        return no_department_label(rules)
    return value


def _name_key(name):
    name = name or u''
    return (name.lower(), name)


def sort_rooms_by_name(rooms, name_of):
    """Rooms ordered by name, case-insensitive first ("kitchen" before "Office")."""
    return sorted(rooms, key=lambda r: _name_key(name_of(r)))


def distinct_departments(rooms, read, rules=None):
    """Distinct departments in order of first occurrence in ``rooms``."""
    return list(group_rooms_by_department(rooms, read, rules))


def group_rooms_by_department(rooms, read, rules=None):
    groups = OrderedDict()
    for room in rooms:
        groups.setdefault(get_department(room, read, rules), []).append(room)
    return groups


def schedule_name(department, rules=None):
    template = _rule(rules, 'schedule_name_template', constants.SCHEDULE_NAME_TEMPLATE)
    return template.format(department=department)


def build_fields(rules=None):
    fields = []
    for key, source, param, kind in constants.FIELD_LAYOUT:
        if param == constants.DEPARTMENT_SLOT:
            param = department_param(rules)
        if kind not in (constants.FIELD_INSTANCE, constants.FIELD_VIEW_BASED):
            raise ScheduleError('Unknown field kind for {0}: {1}'.format(key, kind))
        fields.append(FieldSpec(
            key=key,
            source=source,
            param=param,
            kind=kind,
            hidden=key in constants.HIDDEN_FIELDS,
            totals=key in constants.TOTALS_FIELDS,
        ))
    return fields


def field_by_key(fields, key):
    for f in fields:
        if f.key == key:
            return f
    raise ScheduleError('Schedule has no field "{0}"'.format(key))


def build_layout(department, rules=None):
    """Describe the schedule for one department."""
    fields = build_fields(rules)
    filter_field = field_by_key(fields, constants.FILTER_FIELD)
    sort_groups = []
    for key, header, footer, blank in constants.SORT_GROUP_RULES:
        field_by_key(fields, key)
        sort_groups.append(SortGroupSpec(key, header, footer, blank))

    flags = OrderedDict([
        ('IsItemized', bool(_rule(rules, 'itemized', True))),
        ('ShowGrandTotal', bool(_rule(rules, 'show_grand_total', True))),
        ('ShowGrandTotalTitle', bool(_rule(rules, 'show_grand_total_title', True))),
        ('ShowGrandTotalCount', bool(_rule(rules, 'show_grand_total_count', True))),
    ])

    return ScheduleLayout(
        name=schedule_name(department, rules),
        department=department,
        fields=fields,
        filter=FilterSpec(filter_field.key, department),
        sort_groups=sort_groups,
        flags=flags,
    )


def rooms_matching_filter(layout, rooms, read, rules=None):
    """Rooms whose department equals the layout's filter value."""
    return [r for r in rooms if get_department(r, read, rules) == layout.filter.value]

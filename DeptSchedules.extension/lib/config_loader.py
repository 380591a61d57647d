# -*- coding: utf-8 -*-
"""Rules loader for Department Schedules.

Loads schedule rules from a JSON file and fills in defaults for any
missing key.
"""
import io
import json
import os


DEFAULT_RULES = {
    'schedule_name_template': u'Dept - {department}',
    'no_department_label': u'No Department',
    'department_param': u'Department',
    'transaction_name': u'Create Department Schedules',
    'itemized': True,
    'show_grand_total': True,
    'show_grand_total_title': True,
    'show_grand_total_count': True,
}


def _extension_root_from_lib():
    """Extension root directory derived from the lib location."""
    return os.path.dirname(os.path.dirname(__file__))


def get_default_rules_path():
    """Path of the rules file shipped with the extension."""
    return os.path.join(_extension_root_from_lib(), 'config', 'rules.default.json')


def default_rules():
    """Fresh copy of the built-in defaults."""
    return dict(DEFAULT_RULES)


def load_rules(path=None):
    """Load rules from a JSON file.

    Args:
        path: Path to the JSON rules file. If None, the shipped file is used.

    Returns:
        Dict with every key of DEFAULT_RULES present.
    """
    rules_path = path or get_default_rules_path()
    try:
        with io.open(rules_path, 'r', encoding='utf-8') as fp:
            data = json.load(fp)
    except ValueError:
        # Files saved by Windows editors may carry a BOM
        with open(rules_path, 'rb') as fb:
            raw = fb.read()
        data = json.loads(raw.decode('utf-8-sig'))

    if not isinstance(data, dict):
        raise ValueError('Rules file must contain a JSON object: {0}'.format(rules_path))

    for key, val in DEFAULT_RULES.items():
        if key not in data:
            data[key] = val

    return data

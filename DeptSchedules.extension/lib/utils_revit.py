# -*- coding: utf-8 -*-

import traceback

from pyrevit import DB
from pyrevit import forms
from pyrevit import revit
from pyrevit import script


def get_output():
    return script.get_output()


def get_logger():
    return script.get_logger()


def _safe_log(logger_method, msg):
    try:
        logger_method(msg)
    except UnicodeEncodeError:
        try:
            # Fallback to repr which escapes non-ascii
            logger_method(repr(msg))
        except Exception:
            logger_method("<Log message encoding failed>")
    except Exception:
        pass


def log_info(msg):
    _safe_log(get_logger().info, msg)


def log_debug(msg):
    _safe_log(get_logger().debug, msg)


def alert(msg, title='Department Schedules', warn_icon=True):
    try:
        forms.alert(msg, title=title, warn_icon=warn_icon)
    except Exception:
        # As a last resort if UI is unavailable
        _safe_log(get_logger().warning, msg)


def log_exception(prefix='Error'):
    logger = get_logger()
    _safe_log(logger.error, prefix)
    _safe_log(logger.error, traceback.format_exc())


def safe_str(obj):
    try:
        return str(obj)
    except Exception:
        try:
            return repr(obj)
        except Exception:
            return '<unprintable>'


def get_param(elem, name):
    if elem is None or not name:
        return None
    try:
        return elem.LookupParameter(name)
    except Exception:
        return None


def param_display_string(elem, name):
    """Display string of a named parameter, or None when the element lacks it.

    Uses AsValueString so the text matches what a schedule cell shows.
    A parameter that exists but holds no value reads as an empty string.
    """
    p = get_param(elem, name)
    if p is None:
        return None
    value = p.AsValueString()
    if value is None:
        value = p.AsString()
    if value is None:
        value = u''
    return value


def tx(name, doc=None):
    """Transaction context manager.

    Usage:
        with tx('My Tool'):
            ...

    Commits on clean exit. On exception the transaction is rolled back
    and the exception re-raised, so nothing created inside persists.
    """
    doc = doc or revit.doc
    t = DB.Transaction(doc, name)

    def _rollback():
        rb = getattr(t, 'RollBack', None) or getattr(t, 'Rollback', None)
        if rb:
            try:
                rb()
            except Exception:
                _safe_log(get_logger().warning, 'Rollback failed: {0}'.format(name))

    class _Tx(object):
        def __enter__(self):
            t.Start()
            return t

        def __exit__(self, exc_type, exc, tb):
            if exc_type:
                _rollback()
                return False

            try:
                t.Commit()
            except Exception:
                # Last resort rollback
                _rollback()
                raise
            return False

    return _Tx()

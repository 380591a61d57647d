# -*- coding: utf-8 -*-
"""Tests for utils_revit helpers."""
from unittest.mock import MagicMock

import pytest

from mocks.revit_api import MockElement, MockParameter, mock_document

import utils_revit


class _FailingCommitTx(object):
    def __init__(self, doc, name):
        self.calls = []

    def Start(self):
        self.calls.append("start")

    def Commit(self):
        self.calls.append("commit")
        raise RuntimeError("commit failed")

    def RollBack(self):
        self.calls.append("rollback")


def test_param_display_string_prefers_value_string():
    elem = MockElement(name="R")
    elem.add_parameter("Area", MockParameter("Area", 12.5, value_string="12.50 m²"))
    assert utils_revit.param_display_string(elem, "Area") == "12.50 m²"


def test_param_display_string_missing():
    assert utils_revit.param_display_string(MockElement(), "Department") is None
    assert utils_revit.param_display_string(None, "Department") is None
    assert utils_revit.param_display_string(MockElement(), "") is None


def test_param_display_string_falls_back_to_as_string():
    param = MagicMock()
    param.AsValueString.return_value = None
    param.AsString.return_value = "Eng"
    elem = MagicMock()
    elem.LookupParameter.return_value = param
    assert utils_revit.param_display_string(elem, "Department") == "Eng"


def test_param_display_string_empty_parameter():
    elem = MockElement(name="R")
    elem.add_parameter("Department", MockParameter("Department"))
    assert utils_revit.param_display_string(elem, "Department") == ""


def test_get_param_swallows_lookup_errors():
    elem = MagicMock()
    elem.LookupParameter.side_effect = RuntimeError("bad")
    assert utils_revit.get_param(elem, "Name") is None


def test_tx_commits_on_success():
    doc = mock_document()
    with utils_revit.tx("Test", doc=doc) as t:
        assert doc.IsModifiable
    assert t.status == "Committed"
    assert not doc.IsModifiable


def test_tx_rolls_back_and_reraises():
    doc = mock_document()
    with pytest.raises(ValueError):
        with utils_revit.tx("Test", doc=doc) as t:
            raise ValueError("boom")
    assert t.status == "RolledBack"
    assert not doc.IsModifiable


def test_tx_rolls_back_when_commit_fails(monkeypatch):
    monkeypatch.setattr(utils_revit.DB, "Transaction", _FailingCommitTx)
    with pytest.raises(RuntimeError):
        with utils_revit.tx("Test", doc=object()) as t:
            pass
    assert t.calls == ["start", "commit", "rollback"]


def test_alert_uses_forms(pyrevit_ui):
    utils_revit.alert("Something happened")
    pyrevit_ui.forms.alert.assert_called_once_with(
        "Something happened", title="Department Schedules", warn_icon=True
    )


def test_alert_falls_back_to_logger(pyrevit_ui):
    pyrevit_ui.forms.alert.side_effect = RuntimeError("no UI")
    utils_revit.alert("Something happened")
    pyrevit_ui.script.get_logger.return_value.warning.assert_called_once_with("Something happened")


def test_log_exception_logs_prefix_and_traceback(pyrevit_ui):
    try:
        raise KeyError("Number")
    except KeyError:
        utils_revit.log_exception("Failed")
    error = pyrevit_ui.script.get_logger.return_value.error
    assert error.call_args_list[0][0][0] == "Failed"
    assert "KeyError" in error.call_args_list[1][0][0]


def test_safe_log_never_raises():
    method = MagicMock(side_effect=RuntimeError("logger down"))
    utils_revit._safe_log(method, "msg")


def test_safe_str():
    class _Bad(object):
        def __str__(self):
            raise RuntimeError()

        def __repr__(self):
            return "<bad>"

    assert utils_revit.safe_str(ValueError("x")) == "x"
    assert utils_revit.safe_str(_Bad()) == "<bad>"

# -*- coding: utf-8 -*-
"""Pytest fixtures for DeptSchedules tests."""
import os
import sys
import types
from unittest.mock import MagicMock

import pytest

ROOT = os.path.dirname(os.path.dirname(__file__))
EXT = os.path.join(ROOT, "DeptSchedules.extension")
LIB = os.path.join(EXT, "lib")
BUTTON = os.path.join(EXT, "Schedules.tab", "Rooms.panel", "SchedulePalooza.pushbutton")
for path in (BUTTON, LIB):
    if path not in sys.path:
        sys.path.insert(0, path)


if "pyrevit" not in sys.modules:
    pyrevit_stub = types.ModuleType("pyrevit")
    try:
        from mocks.revit_api import DB as MockDB
    except Exception:
        MockDB = MagicMock()
    pyrevit_stub.DB = MockDB
    pyrevit_stub.forms = MagicMock()
    pyrevit_stub.revit = MagicMock()
    pyrevit_stub.script = MagicMock()
    sys.modules["pyrevit"] = pyrevit_stub


@pytest.fixture
def pyrevit_ui():
    """pyRevit forms/script doubles, reset for each test."""
    stub = sys.modules["pyrevit"]
    stub.forms.reset_mock(return_value=True, side_effect=True)
    stub.script.reset_mock(return_value=True, side_effect=True)
    return stub


@pytest.fixture
def sample_rooms():
    """Rooms 101/102 in Eng, 103 without a department."""
    from mocks.fake_host import FakeRoom

    return [
        FakeRoom("101", number="101", department="Eng"),
        FakeRoom("102", number="102", department="Eng"),
        FakeRoom("103", number="103"),
    ]

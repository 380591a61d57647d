# -*- coding: utf-8 -*-
"""Mock modules for testing Revit-dependent code without Revit."""

from .fake_host import FakeRoom, FakeScheduleHost
from .revit_api import DB, mock_document, mock_room

__all__ = ["DB", "mock_document", "mock_room", "FakeRoom", "FakeScheduleHost"]

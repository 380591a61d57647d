# -*- coding: utf-8 -*-

"""Department Schedules shared library.

This folder is auto-added to sys.path by pyRevit for this extension.
Keep modules dependency-free (pyRevit + RevitAPI only).

Modules:
    utils_revit: Logging, alerts, parameter reads and transactions
    config_loader: Rules file loading
"""

__version__ = "0.1.0"
__author__ = "Dept Schedules Team"

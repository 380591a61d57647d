# -*- coding: utf-8 -*-

# Ribbon
BUTTON_NAME = "btn_SchedulePalooza"
BUTTON_TITLE = "Schedule-Palooza"

# Grouping
DEPARTMENT_PARAM = "Department"
NO_DEPARTMENT = "No Department"
SCHEDULE_NAME_TEMPLATE = "Dept - {department}"
TRANSACTION_NAME = "Create Department Schedules"

# Field kinds (ScheduleFieldType)
FIELD_INSTANCE = "instance"
FIELD_VIEW_BASED = "view_based"

# Field sources
SOURCE_NAMED = "named"        # LookupParameter(name)
SOURCE_BUILTIN = "builtin"    # get_Parameter(BuiltInParameter.<name>)

# Placeholder replaced by the configured department parameter
DEPARTMENT_SLOT = "{department_param}"

# Schedule columns, in order: (key, source, parameter, kind)
FIELD_LAYOUT = [
    ("number", SOURCE_NAMED, "Number", FIELD_INSTANCE),
    ("level", SOURCE_NAMED, "Level", FIELD_INSTANCE),
    ("name", SOURCE_NAMED, "Name", FIELD_INSTANCE),
    ("department", SOURCE_NAMED, DEPARTMENT_SLOT, FIELD_INSTANCE),
    ("comments", SOURCE_NAMED, "Comments", FIELD_INSTANCE),
    ("area", SOURCE_BUILTIN, "ROOM_AREA", FIELD_VIEW_BASED),
]

HIDDEN_FIELDS = ["level"]
TOTALS_FIELDS = ["area"]
FILTER_FIELD = "department"

# (field key, show header, show footer, show blank line)
SORT_GROUP_RULES = [
    ("level", True, True, True),
    ("name", False, False, False),
]

# Command result
RESULT_SUCCEEDED = "succeeded"
RESULT_FAILED = "failed"

# Command states
STATE_IDLE = "idle"
STATE_TRANSACTION_OPEN = "transaction_open"
STATE_COMMITTED = "committed"
STATE_FAILED = "failed"

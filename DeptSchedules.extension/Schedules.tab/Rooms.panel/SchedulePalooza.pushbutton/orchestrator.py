# -*- coding: utf-8 -*-
"""Create one room schedule per department.

The host object supplies document access (see adapters.RevitScheduleHost):
collect_rooms, read_param, element_name, transaction, create_schedule.
"""
import constants
import domain
from utils_revit import log_debug, log_exception, log_info, safe_str


def _result(state, status, message=u'', schedules=None):
    schedules = list(schedules or [])
    return {
        'status': status,
        'state': state,
        'message': message,
        'created': [s['name'] for s in schedules],
        'schedules': schedules,
    }


def run_command(host, rules=None):
    """Generate department schedules inside a single transaction.

    Returns a result dict with 'status' ('succeeded' or 'failed'),
    'message', 'state', 'created' (schedule names) and 'schedules'
    (department, name and room count of each created schedule).
    A failed run reports no schedules: the transaction was rolled back.
    """
    state = constants.STATE_IDLE
    schedules = []
    try:
        rooms = domain.sort_rooms_by_name(host.collect_rooms(), host.element_name)
        groups = domain.group_rooms_by_department(rooms, host.read_param, rules)
        departments = list(groups)
        log_debug(u'Rooms: {0}, departments: {1}'.format(len(rooms), len(departments)))

        # Field parameters come from the first room of the full list
        source_room = rooms[0] if rooms else None

        tx_name = (rules or {}).get('transaction_name') or constants.TRANSACTION_NAME
        with host.transaction(tx_name):
            state = constants.STATE_TRANSACTION_OPEN
            log_debug(u'State: {0}'.format(state))
            for dept in departments:
                layout = domain.build_layout(dept, rules)
                host.create_schedule(layout, source_room)
                schedules.append({
                    'department': dept,
                    'name': layout.name,
                    'rooms': len(groups[dept]),
                })
                log_debug(u'Created schedule: {0}'.format(layout.name))

        state = constants.STATE_COMMITTED
        log_info(u'Committed {0} schedule(s)'.format(len(schedules)))
        return _result(state, constants.RESULT_SUCCEEDED, schedules=schedules)

    except Exception as ex:
        log_exception(u'Department schedules failed in state "{0}"'.format(state))
        return _result(constants.STATE_FAILED, constants.RESULT_FAILED, message=safe_str(ex))


def print_report(output, result):
    if output is None:
        return
    if result.get('status') != constants.RESULT_SUCCEEDED:
        output.print_md(u'**Failed:** {0}'.format(result.get('message') or u'Unknown error'))
        return

    schedules = result.get('schedules') or []
    if not schedules:
        output.print_md(u'No rooms found. No schedules created.')
        return

    output.print_md(u'Created **{0}** schedule(s):'.format(len(schedules)))
    for item in schedules:
        output.print_md(u'- `{0}`: {1} room(s)'.format(item['name'], item['rooms']))

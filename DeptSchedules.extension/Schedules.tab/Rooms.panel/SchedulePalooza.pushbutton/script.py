# -*- coding: utf-8 -*-

__title__ = "Schedule-\nPalooza"
__doc__ = "Create one room schedule per department"
__author__ = "Dept Schedules Team"

from pyrevit import revit

import adapters
import config_loader
import constants
import orchestrator
from utils_revit import alert, get_output, log_debug, log_exception


def load_rules():
    try:
        return config_loader.load_rules()
    except Exception:
        log_exception('Could not read rules file, using defaults')
        return config_loader.default_rules()


def main(doc=None, output=None):
    doc = doc or revit.doc
    output = output or get_output()
    log_debug(u'{0}: start'.format(constants.BUTTON_NAME))

    output.print_md(u'# {0}'.format(constants.BUTTON_TITLE))
    output.print_md(u'Document: `{0}`'.format(getattr(doc, 'Title', u'')))

    host = adapters.RevitScheduleHost(doc)
    result = orchestrator.run_command(host, load_rules())
    orchestrator.print_report(output, result)

    if result['status'] == constants.RESULT_FAILED:
        alert(u'Schedules were not created.\n\n{0}'.format(result['message']))
    return result


if __name__ == '__main__':
    main()

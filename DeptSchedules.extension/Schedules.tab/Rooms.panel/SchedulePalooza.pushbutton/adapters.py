# -*- coding: utf-8 -*-

from pyrevit import DB
import constants
import domain
from utils_revit import param_display_string, tx


def rooms_category_id():
    return DB.ElementId(DB.BuiltInCategory.OST_Rooms)


def collect_rooms(doc):
    """All placed room instances of the document."""
    return list(
        DB.FilteredElementCollector(doc)
        .OfCategory(DB.BuiltInCategory.OST_Rooms)
        .WhereElementIsNotElementType()
        .ToElements()
    )


def element_name(element):
    # Room.Name can throw under pythonnet; the Element.Name getter does not
    try:
        return DB.Element.Name.GetValue(element) or u''
    except Exception:
        pass
    try:
        return element.Name or u''
    except Exception:
        return u''


def resolve_parameter(element, spec):
    """Parameter backing a schedule field, looked up on ``element``."""
    if spec.source == constants.SOURCE_BUILTIN:
        bip = getattr(DB.BuiltInParameter, spec.param)
        param = element.get_Parameter(bip)
    else:
        param = element.LookupParameter(spec.param)
    if param is None:
        raise domain.ScheduleError(
            u'Parameter "{0}" not found on room "{1}"'.format(spec.param, element_name(element))
        )
    return param


def schedule_field_type(kind):
    if kind == constants.FIELD_VIEW_BASED:
        return DB.ScheduleFieldType.ViewBased
    return DB.ScheduleFieldType.Instance


def configure_schedule(schedule, layout, source_element):
    """Apply fields, filter, sorting and totals of ``layout`` to ``schedule``.

    Field parameters are resolved on ``source_element``.
    Returns the added ScheduleField objects keyed by field key.
    """
    definition = schedule.Definition

    added = {}
    for spec in layout.fields:
        param = resolve_parameter(source_element, spec)
        added[spec.key] = definition.AddField(schedule_field_type(spec.kind), param.Id)

    for spec in layout.fields:
        field = added[spec.key]
        if spec.hidden:
            field.IsHidden = True
        if spec.totals:
            field.DisplayType = DB.ScheduleFieldDisplayType.Totals

    flt = DB.ScheduleFilter(
        added[layout.filter.field].FieldId,
        DB.ScheduleFilterType.Equal,
        layout.filter.value,
    )
    definition.AddFilter(flt)

    for rule in layout.sort_groups:
        sort_group = DB.ScheduleSortGroupField(added[rule.field].FieldId)
        sort_group.ShowHeader = rule.show_header
        sort_group.ShowFooter = rule.show_footer
        sort_group.ShowBlankLine = rule.show_blank_line
        definition.AddSortGroupField(sort_group)

    for flag, value in layout.flags.items():
        setattr(definition, flag, value)

    return added


class RevitScheduleHost(object):
    """Revit document access used by the orchestrator."""

    def __init__(self, doc):
        self.doc = doc

    def collect_rooms(self):
        return collect_rooms(self.doc)

    def read_param(self, element, name):
        return param_display_string(element, name)

    def element_name(self, element):
        return element_name(element)

    def transaction(self, name):
        return tx(name, doc=self.doc)

    def create_schedule(self, layout, source_element):
        schedule = DB.ViewSchedule.CreateSchedule(self.doc, rooms_category_id())
        schedule.Name = layout.name
        configure_schedule(schedule, layout, source_element)
        return schedule

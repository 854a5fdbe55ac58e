"""
Status Severity
Status options, message types and the worst-status reduction
"""

# Selectable component statuses, in display order
STATUS_OPTIONS = [
    {'value': 'operational', 'label': 'Operational',
     'default_detail': 'All systems operating normally.'},
    {'value': 'recovering', 'label': 'Recovering',
     'default_detail': 'Systems are recovering from a previous issue.'},
    {'value': 'degraded_performance', 'label': 'Degraded Performance',
     'default_detail': 'Experiencing degraded performance.'},
    {'value': 'outage', 'label': 'Outage',
     'default_detail': 'System outage in progress.'},
    {'value': 'under_maintenance', 'label': 'Under Maintenance',
     'default_detail': 'Scheduled maintenance in progress.'},
]

# Status severity order (lower index = better status)
SEVERITY_ORDER = ['operational', 'recovering', 'degraded_performance', 'under_maintenance', 'outage']

MESSAGE_TYPES = [
    {'value': 'info', 'label': 'Info'},
    {'value': 'tip', 'label': 'Tip'},
    {'value': 'announcement', 'label': 'Announcement'},
    {'value': 'update', 'label': 'App Update'},
]


def default_details(status_options=None):
    """Map each status value to its canned detail message"""
    options = STATUS_OPTIONS if status_options is None else status_options
    return {option['value']: option['default_detail'] for option in options}


def severity_rank(status):
    """
    Position of a status in the severity order.

    Statuses outside the order rank below 'operational' so they never
    become the overall status.
    """
    if status in SEVERITY_ORDER:
        return SEVERITY_ORDER.index(status)
    return -1


def get_worse_status(current, new):
    """
    Compare two statuses and return the worse one.

    Order: operational < recovering < degraded_performance < under_maintenance < outage

    Args:
        current: current status string
        new: new status string to compare

    Returns:
        str: the worse of the two statuses
    """
    if severity_rank(new) > severity_rank(current):
        return new
    return current


def worst_status(statuses):
    """
    Reduce component statuses to the overall status.

    Args:
        statuses: iterable of status strings

    Returns:
        str: the most severe status present, 'operational' when empty
    """
    worst = 'operational'
    for status in statuses:
        worst = get_worse_status(worst, status)
    return worst


def get_message_type_label(message_type):
    for option in MESSAGE_TYPES:
        if option['value'] == message_type:
            return option['label']
    return 'Info'

"""
Status Page Models
The status document, its components and the developer message
"""

import copy
from datetime import datetime, timezone

from .severity import STATUS_OPTIONS, default_details, worst_status


DEFAULT_COMPONENT = 'Live Spots'


def utc_timestamp():
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix"""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


DEFAULT_STATUS = {
    'status_code': 'operational',
    'status_message': 'All systems operating normally.',
    'last_updated': utc_timestamp(),
    'components': [
        {'name': DEFAULT_COMPONENT, 'status': 'operational', 'detail': 'All systems operating normally.'}
    ],
    'developer_message': None
}


class Component:
    """A named sub-system whose status rolls up into the overall status"""

    def __init__(self, name, status, detail=None):
        self.name = name
        self.status = status
        self.detail = detail

    def to_dict(self):
        return {'name': self.name, 'status': self.status, 'detail': self.detail}

    @staticmethod
    def from_dict(data):
        return Component(data.get('name'), data.get('status'), data.get('detail'))


class DeveloperMessage:
    """Operator-authored banner shown to end users"""

    def __init__(self, text, type='info', date=None):
        self.text = text
        self.type = type
        self.date = date or utc_timestamp()

    def to_dict(self):
        return {'text': self.text, 'type': self.type, 'date': self.date}

    @staticmethod
    def from_dict(data):
        if not data:
            return None
        return DeveloperMessage(data.get('text'), data.get('type', 'info'), data.get('date'))


class StatusDocument:
    """
    The system status document.

    status_code always reflects the worst component status. Mutations
    happen in place; persisting is the caller's job.
    """

    def __init__(self, status_code='operational', status_message=None, last_updated=None,
                 components=None, developer_message=None, status_options=None):
        self.status_options = STATUS_OPTIONS if status_options is None else status_options
        self.default_details = default_details(self.status_options)
        self.status_code = status_code
        self.status_message = status_message
        self.last_updated = last_updated
        self.components = components or []
        self.developer_message = developer_message

    @staticmethod
    def default(status_options=None):
        """A fresh copy of the built-in document"""
        return StatusDocument.from_dict(copy.deepcopy(DEFAULT_STATUS), status_options=status_options)

    @staticmethod
    def from_dict(data, status_options=None):
        return StatusDocument(
            status_code=data.get('status_code', 'operational'),
            status_message=data.get('status_message'),
            last_updated=data.get('last_updated'),
            components=[Component.from_dict(c) for c in data.get('components') or []],
            developer_message=DeveloperMessage.from_dict(data.get('developer_message')),
            status_options=status_options,
        )

    def to_dict(self):
        return {
            'status_code': self.status_code,
            'status_message': self.status_message,
            'last_updated': self.last_updated,
            'components': [c.to_dict() for c in self.components],
            'developer_message': self.developer_message.to_dict() if self.developer_message else None,
        }

    def get_component(self, name):
        for component in self.components:
            if component.name == name:
                return component
        return None

    def component_names(self):
        """Existing component names plus the default one, without duplicates"""
        names = []
        for name in [c.name for c in self.components] + [DEFAULT_COMPONENT]:
            if name not in names:
                names.append(name)
        return names

    def upsert_component(self, name, status, detail=None):
        """
        Update a component's status, creating it if it does not exist.

        Args:
            name: component name (lookup key)
            status: new status value, stored as given
            detail: optional detail text; blank falls back to the status default

        Returns:
            Component: the updated or created component
        """
        detail = (detail or '').strip() or self.default_details.get(status)

        component = self.get_component(name)
        if component:
            component.status = status
            component.detail = detail
        else:
            component = Component(name, status, detail)
            self.components.append(component)

        self.refresh_status()
        return component

    def refresh_status(self):
        """Re-derive the overall status from the components"""
        self.status_code = worst_status(c.status for c in self.components)
        self.status_message = self.default_details.get(self.status_code)
        self.last_updated = utc_timestamp()

    def post_developer_message(self, text, message_type='info'):
        """
        Replace the developer message.

        Returns:
            bool: False (and no change) when the text is blank
        """
        text = (text or '').strip()
        if not text:
            return False
        self.developer_message = DeveloperMessage(text, message_type or 'info')
        return True

    def clear_developer_message(self):
        self.developer_message = None

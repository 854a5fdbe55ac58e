"""
Admin Actions
Applies a submitted console action to the status document
"""

import logging

logger = logging.getLogger(__name__)


def update_status(document, component, status, detail=None):
    """Upsert a component and return the result message"""
    component = (component or '').strip()
    status = (status or '').strip()
    if not component or not status:
        return 'Component and status are required'
    document.upsert_component(component, status, detail)
    logger.info(f"Component '{component}' set to '{status}' (overall: {document.status_code})")
    return f'Updated {component} to {status}'


def post_message(document, text, message_type=None):
    if not document.post_developer_message(text, message_type or 'info'):
        return 'Message text is required'
    logger.info(f"Developer message posted (type={document.developer_message.type})")
    return 'Developer message posted'


def clear_message(document):
    document.clear_developer_message()
    logger.info("Developer message cleared")
    return 'Developer message cleared'


def apply_action(document, action, fields):
    """
    Dispatch a console action.

    Args:
        document: StatusDocument to mutate in place
        action: submitted action name; anything unknown is treated as update_status
        fields: mapping of submitted form values

    Returns:
        str: one-line result message for the console
    """
    if action == 'post_message':
        return post_message(document, fields.get('message_text'), fields.get('message_type'))
    if action == 'clear_message':
        return clear_message(document)
    return update_status(document, fields.get('component'), fields.get('status'), fields.get('detail'))

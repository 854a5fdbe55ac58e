"""
Admin Console Forms
"""

from flask_wtf import FlaskForm
from wtforms import HiddenField, StringField, TextAreaField


class UpdateStatusForm(FlaskForm):
    """Set a component's status; status is free text so unknown values pass through"""
    action = HiddenField('Action', default='update_status')
    component = StringField('Component')
    status = StringField('Status')
    detail = TextAreaField('Detail (optional)')


class PostMessageForm(FlaskForm):
    """Post the developer message"""
    action = HiddenField('Action', default='post_message')
    message_type = StringField('Type', default='info')
    message_text = TextAreaField('Message')


class ClearMessageForm(FlaskForm):
    """Remove the developer message"""
    action = HiddenField('Action', default='clear_message')

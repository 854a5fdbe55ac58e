"""
Admin Console Routes
Basic-auth protected form for editing the status document
"""

import logging

from flask import render_template, request

from . import admin_bp
from .auth import basic_auth_required
from .forms import UpdateStatusForm, PostMessageForm, ClearMessageForm
from .service import apply_action
from ..extensions import get_config, get_store, limiter
from ..status.severity import STATUS_OPTIONS, MESSAGE_TYPES, default_details

logger = logging.getLogger(__name__)

# Security logger for admin actions
security_logger = logging.getLogger('security')


FORMS = {
    'update_status': UpdateStatusForm,
    'post_message': PostMessageForm,
    'clear_message': ClearMessageForm,
}


def render_console(document, message=None):
    """Render the admin page for a document"""
    return render_template(
        'admin/index.html',
        status=document,
        message=message,
        component_names=document.component_names(),
        status_options=STATUS_OPTIONS,
        message_types=MESSAGE_TYPES,
        default_details=default_details(),
        update_form=UpdateStatusForm(formdata=None),
        post_form=PostMessageForm(formdata=None),
        clear_form=ClearMessageForm(formdata=None),
    )


@admin_bp.route('', methods=['GET'], provide_automatic_options=False)
@limiter.limit(lambda: get_config().admin_rate_limit)
@basic_auth_required
def index():
    """Admin console"""
    return render_console(get_store().load())


@admin_bp.route('', methods=['POST'], provide_automatic_options=False)
@limiter.limit(lambda: get_config().admin_rate_limit)
@basic_auth_required
def submit():
    """Apply a console action, persist the document and re-render"""
    action = request.form.get('action') or 'update_status'
    form = FORMS.get(action, UpdateStatusForm)()

    store = get_store()
    document = store.load()

    if not form.validate():
        logger.warning(f"Rejected admin form submission: {form.errors}")
        return render_console(document, 'Form expired, please reload the page and try again')

    message = apply_action(document, action, form.data)

    store.save(document)
    security_logger.info(
        f"ADMIN_ACTION: action={action} result='{message}' IP={request.remote_addr}"
    )

    return render_console(document, message)

"""
Tests for the status document model
"""

import re

import pytest
from unittest.mock import patch

from statuspage.status.models import (
    DEFAULT_STATUS, Component, DeveloperMessage, StatusDocument, utc_timestamp
)


@pytest.fixture
def document():
    return StatusDocument.default()


class TestDefaultDocument:
    """Test the built-in document"""

    def test_default_matches_constant(self, document):
        """Test default() serializes to the built-in document"""
        assert document.to_dict() == DEFAULT_STATUS

    def test_default_is_a_copy(self, document):
        """Test mutating a default document leaves the constant untouched"""
        document.upsert_component('Live Spots', 'outage')
        document.post_developer_message('hello')

        assert DEFAULT_STATUS['status_code'] == 'operational'
        assert DEFAULT_STATUS['components'][0]['status'] == 'operational'
        assert DEFAULT_STATUS['developer_message'] is None
        assert StatusDocument.default().to_dict() == DEFAULT_STATUS

    def test_timestamp_format(self):
        """Test timestamps are UTC with milliseconds and Z"""
        assert re.match(r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$', utc_timestamp())


class TestComponentUpsert:
    """Test creating and updating components"""

    def test_upsert_same_name_twice_does_not_duplicate(self, document):
        """Test upserting an existing name updates in place"""
        document.upsert_component('API', 'recovering')
        document.upsert_component('API', 'operational')

        names = [c.name for c in document.components]
        assert names.count('API') == 1
        assert document.get_component('API').status == 'operational'

    def test_unknown_component_is_created(self, document):
        """Test a new name appends a component"""
        document.upsert_component('Payments', 'degraded_performance')

        assert [c.name for c in document.components] == ['Live Spots', 'Payments']
        component = document.get_component('Payments')
        assert component.detail == 'Experiencing degraded performance.'

    def test_live_spots_outage(self, document):
        """Test Live Spots outage drives the overall status"""
        document.upsert_component('Live Spots', 'outage')

        assert document.status_code == 'outage'
        assert document.status_message == 'System outage in progress.'
        assert document.get_component('Live Spots').detail == 'System outage in progress.'

    def test_custom_detail_is_trimmed(self, document):
        """Test a supplied detail is kept, trimmed"""
        document.upsert_component('Live Spots', 'recovering', '  Feeds catching up  ')
        assert document.get_component('Live Spots').detail == 'Feeds catching up'

    def test_blank_detail_uses_default(self, document):
        """Test whitespace detail falls back to the canned message"""
        document.upsert_component('Live Spots', 'under_maintenance', '   ')
        assert document.get_component('Live Spots').detail == 'Scheduled maintenance in progress.'

    def test_status_message_ignores_component_detail(self, document):
        """Test the overall message is the canned detail of the overall status"""
        document.upsert_component('Live Spots', 'outage', 'Provider down')
        assert document.status_message == 'System outage in progress.'

    def test_recovery_lowers_overall_status(self, document):
        """Test the overall status follows the remaining worst component"""
        document.upsert_component('API', 'outage')
        document.upsert_component('Live Spots', 'recovering')
        assert document.status_code == 'outage'

        document.upsert_component('API', 'operational')
        assert document.status_code == 'recovering'
        assert document.status_message == 'Systems are recovering from a previous issue.'

    def test_invalid_status_is_stored_as_is(self, document):
        """Test unknown statuses are stored without a canned detail"""
        document.upsert_component('Live Spots', 'on_fire')

        component = document.get_component('Live Spots')
        assert component.status == 'on_fire'
        assert component.detail is None
        assert document.status_code == 'operational'
        assert document.status_message == 'All systems operating normally.'

    @patch('statuspage.status.models.utc_timestamp', return_value='2026-10-17T09:30:00.000Z')
    def test_upsert_refreshes_timestamp(self, mock_timestamp, document):
        """Test every update refreshes last_updated"""
        document.upsert_component('Live Spots', 'recovering')
        assert document.last_updated == '2026-10-17T09:30:00.000Z'

    def test_component_names_include_default(self):
        """Test the default component is always offered"""
        document = StatusDocument(components=[Component('API', 'operational')])
        assert document.component_names() == ['API', 'Live Spots']

    def test_component_names_without_duplicates(self, document):
        document.upsert_component('API', 'operational')
        assert document.component_names() == ['Live Spots', 'API']


class TestDeveloperMessage:
    """Test the developer message lifecycle"""

    def test_whitespace_message_is_noop(self, document):
        """Test blank text leaves the document unchanged"""
        before = document.to_dict()

        assert document.post_developer_message('   \n\t ') is False
        assert document.post_developer_message(None) is False
        assert document.to_dict() == before

    @patch('statuspage.status.models.utc_timestamp', return_value='2026-10-17T10:00:00.000Z')
    def test_post_message(self, mock_timestamp, document):
        """Test posting sets text, type and a fresh date"""
        assert document.post_developer_message('Server upgrade', 'announcement') is True

        message = document.developer_message
        assert message.text == 'Server upgrade'
        assert message.type == 'announcement'
        assert message.date == '2026-10-17T10:00:00.000Z'

    def test_post_message_trims_and_defaults_type(self, document):
        document.post_developer_message('  Server upgrade  ', '')
        assert document.developer_message.text == 'Server upgrade'
        assert document.developer_message.type == 'info'

    def test_post_replaces_previous_message(self, document):
        """Test only one message exists at a time"""
        document.post_developer_message('First')
        document.post_developer_message('Second', 'tip')

        assert document.developer_message.to_dict()['text'] == 'Second'
        assert document.developer_message.type == 'tip'

    def test_clear_after_post(self, document):
        """Test clearing removes the message"""
        document.post_developer_message('Server upgrade')
        document.clear_developer_message()

        assert document.developer_message is None
        assert document.to_dict()['developer_message'] is None

    def test_clear_without_message(self, document):
        """Test clearing an absent message succeeds"""
        document.clear_developer_message()
        assert document.developer_message is None

    def test_message_does_not_touch_status(self, document):
        """Test messages leave the status fields alone"""
        before = document.last_updated
        document.post_developer_message('Heads up')
        assert document.last_updated == before
        assert document.status_code == 'operational'


class TestSerialization:
    """Test dict conversion"""

    def test_from_dict_round_trip(self):
        """Test a stored document loads back unchanged"""
        data = {
            'status_code': 'recovering',
            'status_message': 'Systems are recovering from a previous issue.',
            'last_updated': '2026-10-17T08:00:00.000Z',
            'components': [
                {'name': 'Live Spots', 'status': 'recovering', 'detail': 'Catching up'},
            ],
            'developer_message': {'text': 'Hi', 'type': 'tip', 'date': '2026-10-17T08:00:00.000Z'},
        }
        assert StatusDocument.from_dict(data).to_dict() == data

    def test_from_dict_tolerates_missing_fields(self):
        """Test absent components and message load as empty"""
        document = StatusDocument.from_dict({'status_code': 'operational'})
        assert document.components == []
        assert document.developer_message is None

    def test_key_order(self, document):
        """Test the serialized field order"""
        assert list(document.to_dict()) == [
            'status_code', 'status_message', 'last_updated', 'components', 'developer_message'
        ]

    def test_developer_message_from_empty(self):
        assert DeveloperMessage.from_dict(None) is None

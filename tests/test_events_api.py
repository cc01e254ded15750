"""Tests for event processing and publishing."""

from __future__ import annotations

import json
import logging

import pytest

from versa.api.events import ProcessEventHandler
from versa.services.events import EventPublisher

LOGGER = 'versa.api.events'


def _messages(caplog) -> list[str]:
    return [record.getMessage() for record in caplog.records if record.name == LOGGER]


class TestProcessEvent:
    """Tests for ProcessEventHandler."""

    def test_item_created_logs_item_id(self, caplog) -> None:
        caplog.set_level(logging.INFO, logger=LOGGER)

        result = ProcessEventHandler()(
            {'detail-type': 'ItemCreated', 'detail': {'itemId': 'x1'}}
        )

        assert result is None
        messages = _messages(caplog)
        assert len(messages) == 2
        assert 'ItemCreated' in messages[0]
        assert 'itemId: "x1"' in messages[1]
        assert [r for r in caplog.records if r.name == LOGGER][-1].extra == {'itemId': 'x1'}

    def test_other_detail_type_only_logs_receipt(self, caplog) -> None:
        caplog.set_level(logging.INFO, logger=LOGGER)

        ProcessEventHandler()({'detail-type': 'Other'})

        assert _messages(caplog) == ['Received event: Other']

    @pytest.mark.parametrize('detail', [None, 'text', {}])
    def test_malformed_item_created_does_not_raise(self, caplog, detail) -> None:
        caplog.set_level(logging.INFO, logger=LOGGER)

        ProcessEventHandler()({'detail-type': 'ItemCreated', 'detail': detail})

        assert 'itemId: "None"' in _messages(caplog)[-1]


class TestEventPublisher:
    """Tests for EventPublisher."""

    def test_publishes_entry(self, mocker) -> None:
        client = mocker.MagicMock()
        client.put_events.return_value = {'FailedEntryCount': 0, 'Entries': [{}]}

        assert EventPublisher(client, 'bus').publish('ItemCreated', {'itemId': 'a'})

        (entry,) = client.put_events.call_args.kwargs['Entries']
        assert entry == {
            'Source': 'versa.api',
            'DetailType': 'ItemCreated',
            'Detail': json.dumps({'itemId': 'a'}),
            'EventBusName': 'bus',
        }

    def test_disabled_without_bus(self, mocker) -> None:
        client = mocker.MagicMock()
        publisher = EventPublisher(client, None)

        assert not publisher.enabled
        assert publisher.publish('ItemCreated', {}) is False
        client.put_events.assert_not_called()

    def test_failed_entry_raises(self, mocker) -> None:
        client = mocker.MagicMock()
        client.put_events.return_value = {
            'FailedEntryCount': 1,
            'Entries': [{'ErrorCode': 'InternalFailure', 'ErrorMessage': 'oops'}],
        }

        with pytest.raises(RuntimeError, match='InternalFailure'):
            EventPublisher(client, 'bus').publish('ItemCreated', {})


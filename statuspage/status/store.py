"""
Status Document Storage
Persists the status document as one JSON blob under a fixed key
"""

import json
import logging

import redis

from .models import StatusDocument

logger = logging.getLogger(__name__)


class StatusStoreError(Exception):
    """Raised when the stored document cannot be decoded"""

    def __init__(self, message, key=None):
        super().__init__(message)
        self.message = message
        self.key = key

    def __str__(self):
        if self.key:
            return f"StatusStoreError ({self.key}): {self.message}"
        return f"StatusStoreError: {self.message}"


class StatusStore:
    """
    Read/write the status document.

    Subclasses provide get_raw/put_raw/ping. There is no locking: the
    last write wins.
    """

    def __init__(self, key='current', status_options=None):
        self.key = key
        self.status_options = status_options

    def get_raw(self):
        raise NotImplementedError

    def put_raw(self, value):
        raise NotImplementedError

    def ping(self):
        raise NotImplementedError

    def load(self):
        """
        Load the current document.

        Returns:
            StatusDocument: the stored document, or the default one if none is stored
        """
        raw = self.get_raw()
        if raw is None:
            return StatusDocument.default(status_options=self.status_options)

        if isinstance(raw, bytes):
            raw = raw.decode('utf-8')
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise StatusStoreError(f"Stored document is not valid JSON: {e}", key=self.key)
        if not isinstance(data, dict):
            raise StatusStoreError("Stored document is not a JSON object", key=self.key)

        return StatusDocument.from_dict(data, status_options=self.status_options)

    def save(self, document):
        self.put_raw(json.dumps(document.to_dict()))
        logger.debug(f"Saved status document under key '{self.key}'")
        return document


class RedisStatusStore(StatusStore):
    """Document stored in Redis"""

    def __init__(self, client, key='current', status_options=None):
        super().__init__(key=key, status_options=status_options)
        self.client = client

    @classmethod
    def from_url(cls, url, key='current', status_options=None):
        client = redis.from_url(url, socket_connect_timeout=5)
        return cls(client, key=key, status_options=status_options)

    def get_raw(self):
        return self.client.get(self.key)

    def put_raw(self, value):
        self.client.set(self.key, value)

    def ping(self):
        return self.client.ping()


class MemoryStatusStore(StatusStore):
    """Document kept in process memory (development and tests)"""

    def __init__(self, key='current', status_options=None):
        super().__init__(key=key, status_options=status_options)
        self._data = {}

    def get_raw(self):
        return self._data.get(self.key)

    def put_raw(self, value):
        self._data[self.key] = value

    def ping(self):
        return True


def create_store(config, status_options=None):
    """Build the store selected by STATUS_STORE"""
    if config.status_store == 'memory':
        logger.info("Using in-memory status store")
        return MemoryStatusStore(key=config.status_key, status_options=status_options)
    if config.status_store == 'redis':
        logger.info(f"Using Redis status store (key='{config.status_key}')")
        return RedisStatusStore.from_url(config.redis_url, key=config.status_key,
                                         status_options=status_options)
    raise ValueError(f"Unknown STATUS_STORE: {config.status_store}")

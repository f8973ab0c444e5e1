from __future__ import annotations

import pytest


class FailingStream:
    """Binary stream that returns ``chunks`` and then fails with ``error``.

    An exception instance is raised; any other value (such as ``None``) is
    returned from ``read`` as-is.
    """

    def __init__(self, chunks, error):
        self._chunks = list(chunks)
        self._error = error

    def read(self, size=-1):
        if self._chunks:
            return self._chunks.pop(0)
        if isinstance(self._error, BaseException):
            raise self._error
        return self._error


@pytest.fixture()
def failing_stream():
    return FailingStream

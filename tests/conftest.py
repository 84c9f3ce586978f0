import pytest
from loguru import logger


@pytest.fixture
def caplog(caplog):
    """Forward loguru records to pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)


class RecordingErrorHandler:
    """Error handler that remembers every call, and what the command looked like at that time."""

    def __init__(self, command=None):
        self.command = command
        self.calls = []
        self.executing_at_call = []

    def handle_error(self, operation, error):
        self.calls.append((operation, error))
        if self.command is not None:
            self.executing_at_call.append(self.command.executing)


@pytest.fixture
def recording_handler():
    return RecordingErrorHandler()

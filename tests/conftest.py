import io

import pytest
from loguru import logger

from ext_organizer.console import Console
from ext_organizer.notifications import Notifier


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    # main() binds a sink to the captured stderr of the current test
    logger.remove()


@pytest.fixture
def console():
    return Console(color=False)


@pytest.fixture
def make_files(tmp_path):
    def _make(*names: str):
        for name in names:
            (tmp_path / name).write_text(f"content of {name}")
        return tmp_path
    return _make


class RecordingNotifier(Notifier):
    name = "recording"

    def __init__(self, result=True):
        self.result = result
        self.sent = []

    def notify(self, notification):
        self.sent.append(notification)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


@pytest.fixture
def recorder():
    return RecordingNotifier()


class UnreadableStdin(io.StringIO):
    def readline(self, *args):
        raise AssertionError("stdin must not be read")

# nosec B101


import json
import sys
import logging
from decimal import Decimal

import pytest

from domain.models.upstream import FetchResult, FetchStatus
from monitoring.logger import JSONFormatter, log_upstream_call, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_json_formatter_includes_extra_data():
    record = logging.LogRecord('infohub', logging.INFO, __file__, 10, 'hello %s', ('world',), None)
    record.extra_data = {'rate': Decimal('0.012')}

    entry = json.loads(JSONFormatter().format(record))

    assert entry['message'] == 'hello world'
    assert entry['level'] == 'INFO'
    assert entry['data'] == {'rate': '0.012'}


def test_json_formatter_serializes_exceptions():
    try:
        raise RuntimeError('kaboom')
    except RuntimeError:
        record = logging.LogRecord('infohub', logging.ERROR, __file__, 20, 'failed', (), sys.exc_info())

    entry = json.loads(JSONFormatter().format(record))

    assert entry['exception']['type'] == 'RuntimeError'
    assert entry['exception']['message'] == 'kaboom'


def test_setup_logging_writes_json_files(tmp_path, restore_root_logger):
    setup_logging(level='INFO', log_directory=str(tmp_path))

    logging.getLogger('infohub.test').warning('upstream slow')
    for handler in restore_root_logger.handlers:
        handler.flush()

    app_log = (tmp_path / 'system' / 'app.log').read_text(encoding='utf-8').strip().splitlines()
    error_log = (tmp_path / 'errors' / 'errors.log').read_text(encoding='utf-8').strip().splitlines()
    assert json.loads(app_log[-1])['message'] == 'upstream slow'
    assert json.loads(error_log[-1])['level'] == 'WARNING'
    assert logging.getLogger('httpx').level == logging.WARNING


def test_log_upstream_call_levels(caplog):
    logger = logging.getLogger('infohub.providers')
    caplog.set_level(logging.INFO, logger='infohub.providers')

    log_upstream_call(logger, 'https://upstream.test', FetchResult.success('quotable', object(), 200, 15))
    log_upstream_call(
        logger, 'https://upstream.test', FetchResult.failure('quotable', FetchStatus.NETWORK_ERROR, 'Request failed: ConnectError')
    )

    assert [r.levelno for r in caplog.records] == [logging.INFO, logging.WARNING]
    assert 'SUCCESS' in caplog.records[0].getMessage()
    assert 'network_error' in caplog.records[1].getMessage()
    assert caplog.records[1].extra_data['provider'] == 'quotable'

import json

import pytest

from lingostack_app.core.logging_config import LOG_FILE_NAME, get_logger, setup_logging


@pytest.fixture
def file_logging(app, tmp_path):
    log_dir = tmp_path / 'logs'

    def configure(json_format=False):
        setup_logging(app, log_level='INFO', log_dir=str(log_dir), json_format=json_format, to_file=True)
        return log_dir / LOG_FILE_NAME

    yield configure
    # Close the file handler again
    setup_logging(app, log_level='WARNING', to_file=False)


def test_app_and_service_logs_share_the_log_file(app, file_logging):
    log_file = file_logging()

    get_logger('lingostack.vocabulary').warning('Category file Big.txt is empty.')
    app.logger.warning('VALIDATION_ERROR: Invalid study action')

    content = log_file.read_text(encoding='utf-8')
    assert '[WARNING] lingostack.vocabulary: Category file Big.txt is empty.' in content
    assert 'VALIDATION_ERROR: Invalid study action' in content


def test_app_logger_uses_the_lingostack_handlers(app):
    assert app.logger.handlers == get_logger().handlers
    assert app.logger.propagate is False


def test_json_format_writes_one_object_per_line(app, file_logging):
    log_file = file_logging(json_format=True)

    get_logger('lingostack.session').info('Started study session: category="Food" mode=list')

    lines = log_file.read_text(encoding='utf-8').splitlines()
    record = json.loads(lines[-1])
    assert record['level'] == 'INFO'
    assert record['logger'] == 'lingostack.session'
    assert record['message'] == 'Started study session: category="Food" mode=list'


def test_missing_category_folder_is_logged(client, tmp_path, app, file_logging):
    log_file = file_logging()
    app.config['CATEGORY_FOLDER'] = str(tmp_path / 'gone')

    client.get('/')

    assert 'Error reading category directory' in log_file.read_text(encoding='utf-8')

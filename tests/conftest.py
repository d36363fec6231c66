import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lingostack_app import create_app
from lingostack_app.config import Config


class TestConfig(Config):
    TESTING = True
    WTF_CSRF_ENABLED = False
    SECRET_KEY = 'test-secret-key'
    LOG_TO_FILE = False
    LOG_LEVEL = 'WARNING'


CATEGORY_FILES = {
    'Animals.txt': 'dog,perro,hond\ncat,gato,kat\nhorse,caballo,paard\n',
    'Food.txt': 'bread,pan\r\nwater,agua\r\n\r\nbroken line\r\n apple , manzana \r\n',
    'Days of Week.txt': 'Monday,lunes\nTuesday,martes\n',
    'Empty.txt': '\n   \n',
    'Invalid.txt': 'only-english\n,sin ingles\n',
    'notes.md': 'not a category',
}


@pytest.fixture
def category_folder(tmp_path):
    folder = tmp_path / 'categories'
    folder.mkdir()
    for name, content in CATEGORY_FILES.items():
        (folder / name).write_text(content, encoding='utf-8')
    (folder / 'Nested.txt').mkdir()
    return folder


@pytest.fixture
def app(category_folder):
    app = create_app(TestConfig)
    app.config['CATEGORY_FOLDER'] = str(category_folder)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()

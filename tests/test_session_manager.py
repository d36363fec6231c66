import random

import pytest
from flask import session

from lingostack_app.core.error_handlers import ValidationError
from lingostack_app.modules.vocabulary.engine.session_manager import StudySessionManager
from lingostack_app.modules.vocabulary.schemas import WordRecord

ANIMALS = [
    WordRecord(english='dog', spanish='perro', dutch='hond'),
    WordRecord(english='cat', spanish='gato', dutch='kat'),
    WordRecord(english='horse', spanish='caballo', dutch='paard'),
]
FOOD = [
    WordRecord(english='bread', spanish='pan'),
    WordRecord(english='water', spanish='agua'),
]


@pytest.fixture
def request_ctx(app):
    with app.test_request_context():
        yield


def test_list_session_keeps_file_order(request_ctx):
    manager = StudySessionManager.start_new_session('Animals', 'list', ANIMALS)

    assert manager.order == [0, 1, 2]
    assert manager.position == 0
    assert manager.prompt_language == 'english'
    assert manager.answer_language == 'spanish'
    assert manager.available_languages == ['english', 'spanish', 'dutch']
    assert session[StudySessionManager.SESSION_KEY]['category'] == 'Animals'


def test_flashcard_session_shuffles_with_given_rng(request_ctx):
    manager = StudySessionManager.start_new_session(
        'Animals', 'flashcard-with-answers', ANIMALS, rng=random.Random(7)
    )

    expected = [0, 1, 2]
    random.Random(random.Random(7).getrandbits(32)).shuffle(expected)
    assert manager.order == expected
    assert manager.seed == random.Random(7).getrandbits(32)
    assert manager.current_record() is ANIMALS[manager.order[0]]


def test_session_cookie_stores_seed_instead_of_order(request_ctx):
    manager = StudySessionManager.start_new_session(
        'Animals', 'flashcard-with-answers', ANIMALS, rng=random.Random(11)
    )

    stored = session[StudySessionManager.SESSION_KEY]
    assert 'order' not in stored
    assert stored['seed'] == manager.seed
    assert stored['total'] == 3
    assert StudySessionManager.from_dict(stored).order == manager.order


def test_next_wraps_to_first_card(request_ctx):
    manager = StudySessionManager.start_new_session('Animals', 'flashcard-with-answers', ANIMALS)

    manager.apply('next')
    manager.apply('next')
    assert manager.position == 2
    assert manager.counter_text() == 'Card 3 / 3'
    assert manager.progress() == pytest.approx(100.0)

    manager.apply('next')
    assert manager.position == 0
    assert manager.progress() == pytest.approx(100 / 3)


def test_previous_wraps_to_last_card(request_ctx):
    manager = StudySessionManager.start_new_session('Animals', 'flashcard-with-answers', ANIMALS)

    manager.apply('previous')

    assert manager.position == 2


def test_reveal_shows_answer_then_advances(request_ctx):
    manager = StudySessionManager.start_new_session('Animals', 'flashcard-without-answers', ANIMALS)
    assert manager.answer_visible is False

    manager.apply('reveal')
    assert manager.answer_visible is True
    assert manager.position == 0

    manager.apply('reveal')
    assert manager.answer_visible is False
    assert manager.position == 1
    assert session[StudySessionManager.SESSION_KEY]['position'] == 1


def test_reveal_not_available_with_answers(request_ctx):
    manager = StudySessionManager.start_new_session('Animals', 'flashcard-with-answers', ANIMALS)

    with pytest.raises(ValidationError):
        manager.apply('reveal')


def test_list_mode_rejects_navigation(request_ctx):
    manager = StudySessionManager.start_new_session('Animals', 'list', ANIMALS)

    with pytest.raises(ValidationError):
        manager.apply('next')


def test_swap_exchanges_languages_and_hides_answer(request_ctx):
    manager = StudySessionManager.start_new_session('Animals', 'flashcard-without-answers', ANIMALS)
    manager.apply('reveal')

    manager.apply('swap')

    assert manager.prompt_language == 'spanish'
    assert manager.answer_language == 'english'
    assert manager.is_swapped is True
    assert manager.answer_visible is False


def test_languages_selects_dutch_when_available(request_ctx):
    manager = StudySessionManager.start_new_session('Animals', 'flashcard-with-answers', ANIMALS)

    manager.apply('languages', prompt_language='dutch', answer_language='english')

    assert manager.prompt_language == 'dutch'
    assert manager.answer_language == 'english'


def test_languages_rejects_unavailable_or_identical(request_ctx):
    manager = StudySessionManager.start_new_session('Food', 'flashcard-with-answers', FOOD)

    with pytest.raises(ValidationError) as excinfo:
        manager.apply('languages', prompt_language='dutch', answer_language='english')
    assert 'prompt_language' in excinfo.value.details['errors']

    with pytest.raises(ValidationError):
        manager.apply('languages', prompt_language='english', answer_language='english')
    assert manager.prompt_language == 'english'
    assert manager.answer_language == 'spanish'


def test_shuffle_resets_position_and_keeps_languages(request_ctx):
    manager = StudySessionManager.start_new_session('Animals', 'flashcard-with-answers', ANIMALS)
    manager.apply('swap')
    manager.apply('next')

    manager.apply('shuffle', rng=random.Random(3))

    assert manager.position == 0
    assert sorted(manager.order) == [0, 1, 2]
    assert manager.prompt_language == 'spanish'


def test_restart_returns_to_first_card_and_keeps_languages(request_ctx):
    manager = StudySessionManager.start_new_session('Animals', 'flashcard-without-answers', ANIMALS)
    manager.apply('swap')
    manager.apply('next')
    manager.apply('reveal')

    manager.apply('restart', rng=random.Random(5))

    assert manager.position == 0
    assert manager.answer_visible is False
    assert sorted(manager.order) == [0, 1, 2]
    assert manager.seed == random.Random(5).getrandbits(32)
    assert (manager.prompt_language, manager.answer_language) == ('spanish', 'english')
    stored = session[StudySessionManager.SESSION_KEY]
    assert stored['position'] == 0
    assert stored['prompt_language'] == 'spanish'


def test_load_or_start_resumes_matching_session(request_ctx):
    first = StudySessionManager.start_new_session('Animals', 'flashcard-with-answers', ANIMALS)
    first.apply('next')

    resumed = StudySessionManager.load_or_start('Animals', 'flashcard-with-answers', ANIMALS)

    assert resumed.position == 1
    assert resumed.order == first.order
    assert resumed.current_record() is ANIMALS[first.order[1]]


def test_load_or_start_restarts_for_other_mode_or_changed_file(request_ctx):
    first = StudySessionManager.start_new_session('Animals', 'flashcard-with-answers', ANIMALS)
    first.apply('next')

    other_mode = StudySessionManager.load_or_start('Animals', 'flashcard-without-answers', ANIMALS)
    assert other_mode.mode == 'flashcard-without-answers'
    assert other_mode.position == 0

    other_mode.apply('next')
    shrunk = StudySessionManager.load_or_start('Animals', 'flashcard-without-answers', ANIMALS[:2])
    assert shrunk.position == 0
    assert shrunk.total == 2


def test_default_languages_come_from_config(app):
    app.config['DEFAULT_PROMPT_LANGUAGE'] = 'dutch'
    app.config['DEFAULT_ANSWER_LANGUAGE'] = 'english'
    with app.test_request_context():
        animals = StudySessionManager.start_new_session('Animals', 'list', ANIMALS)
        food = StudySessionManager.start_new_session('Food', 'list', FOOD)

    assert (animals.prompt_language, animals.answer_language) == ('dutch', 'english')
    # dutch is not available for Food, so the first available language is used
    assert (food.prompt_language, food.answer_language) == ('english', 'spanish')


def test_end_session_clears_state(request_ctx):
    StudySessionManager.start_new_session('Animals', 'list', ANIMALS)

    StudySessionManager.end_session()

    assert StudySessionManager.SESSION_KEY not in session

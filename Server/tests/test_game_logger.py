import json

from wordle_app.utils.game_logger import GameLogger


def test_live_answer_and_result_trimmed():
    logger = GameLogger.__new__(GameLogger)
    data = {
        'success': True,
        'state': {'current_round': 1, 'max_rounds': 6, 'status': 'IN_PROGRESS',
                  'game_over': False, 'won': False, 'guesses': ['CRANE'], 'answer': None},
        'result': {'ok': True, 'error_kind': None, 'feedback': ['ABSENT'] * 5,
                   'terminal': None, 'target_word': None, 'keyboard_updates': {'C': 'ABSENT'}},
    }
    sanitized = logger._sanitize_response_data(data)
    assert sanitized['state']['guesses_count'] == 1
    assert sanitized['state']['answer_revealed'] is False
    assert 'answer' not in sanitized['state']
    assert 'target_word' not in sanitized['result']
    assert 'keyboard_updates' not in sanitized['result']
    assert logger._sanitize_response_data(['x']) == {'data_type': 'list'}


def test_game_event_written_and_counted(tmp_path):
    logger = GameLogger(str(tmp_path), 'INFO')
    logger.log_game_event('g1', 'game_won', '127.0.0.1', rounds_used=3, target_word='APPLE')
    for handler in logger.logger.handlers:
        handler.flush()

    lines = logger.log_file.read_text(encoding='utf-8').splitlines()
    entry = json.loads(lines[-1].split(' | ', 2)[2])
    assert entry['event_type'] == 'GAME_EVENT'
    assert entry['action'] == 'game_won'
    assert entry['details'] == {'game_id': 'g1', 'rounds_used': 3, 'target_word': 'APPLE'}

    stats = logger.get_log_stats()
    assert stats['game_events'] >= 1

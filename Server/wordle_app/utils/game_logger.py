"""
Game Logger Module for the Wordle Server

This module provides structured logging for user input, server responses,
and game events. Engine modules log through child loggers of 'wordle_game',
so their records end up in the same files.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config
from .helpers import get_user_identity


class GameLogger:
    """
    Writes one JSON line per request, response and game outcome.

    Every key event a client sends (letter, delete, submit, whole-word guess)
    is logged as USER_ACTION, the reply as SERVER_RESPONSE_SUCCESS or
    SERVER_RESPONSE_ERROR, and the submission that ends a game as GAME_EVENT.
    Unexpected exceptions in a view are logged as ERROR.
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        if not isinstance(self.level, int):
            self.level = logging.INFO

        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Attach a dated file handler and a WARNING-and-above console handler to 'wordle_game'."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)

        # Re-initialising replaces the handlers of the previous instance
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, Optional[str]],
                          details: Dict[str, Any]) -> str:
        """Serialize one entry; enums and other non-JSON values fall back to str()."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        request,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log input received from a client before it reaches the game.

        Args:
            request: Flask request object
            action: 'new_game', 'letter', 'delete_letter', 'submit', 'submit_guess', ...
            game_id: Game the input is addressed to, if any
            **kwargs: Input details, e.g. the typed letter or the guessed word
        """
        details = {
            'game_id': game_id,
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }

        log_message = self._create_log_entry('USER_ACTION', action, get_user_identity(request), details)
        self.logger.info(log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """
        Log the JSON reply sent back for an action.

        Rejected submissions (not enough letters, not in word list) are logged
        at ERROR level with their error kind. The payload passes through
        _sanitize_response_data so a live answer never reaches the log file.

        Args:
            request: Flask request object
            action: Same action name used for the matching USER_ACTION
            success: False for rejected input and server errors
            response_data: Data being returned to client
            game_id: Game identifier if applicable
            **kwargs: Extra fields such as round, game_over or validation_error
        """
        details = {
            'game_id': game_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, get_user_identity(request), details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       user_ip: str,
                       **kwargs):
        """
        Log a change in a game's lifecycle.

        Args:
            game_id: Game identifier
            event: 'game_won', 'game_lost' or 'game_deleted'
            user_ip: Address of the client that caused it
            **kwargs: Outcome details; the target word is safe to log here
                because the game is already over
        """
        user_info = {'user_ip': user_ip, 'session_id': None, 'username': None}

        details = {
            'game_id': game_id,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, user_info, details)
        self.logger.info(log_message)

    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """
        Log an exception raised while handling a game endpoint.

        Args:
            request: Flask request object
            error: Exception caught by the view
            action: Action name of the failing endpoint
            game_id: Game identifier if applicable
        """
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, get_user_identity(request), details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Trim game payloads and keep the answer out of logs while a game is live."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'current_round': state.get('current_round'),
                'max_rounds': state.get('max_rounds'),
                'status': state.get('status'),
                'game_over': state.get('game_over'),
                'won': state.get('won'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': state.get('answer') is not None
            }

        if 'result' in sanitized and isinstance(sanitized['result'], dict):
            result = sanitized['result']
            sanitized['result'] = {
                'ok': result.get('ok'),
                'error_kind': result.get('error_kind'),
                'feedback': result.get('feedback'),
                'terminal': result.get('terminal')
            }

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries per event type for the health endpoint."""
        try:
            log_file = self.log_file
            if not log_file.exists():
                return {'error': 'No log file found for today'}

            stats = {
                'log_file': str(log_file),
                'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
                'total_entries': 0,
                'user_actions': 0,
                'server_responses': 0,
                'game_events': 0,
                'errors': 0
            }

            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1

            return stats

        except OSError as e:
            return {'error': f'Failed to get stats: {str(e)}'}


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)

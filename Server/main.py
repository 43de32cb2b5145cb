"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It loads the word list, initializes the game service and starts the Flask application.
"""

from wordle_app import create_app
from wordle_app.config import Config, get_word_statistics, load_word_list
from wordle_app.services.game_service import initialize_game_service
from wordle_app.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        word_list = load_word_list(Config.WORD_LIST_PATH)
        stats = get_word_statistics(word_list)
        print(f"✓ Loaded {stats['total_words']} words from {Config.WORD_LIST_PATH}")

        initialize_game_service(word_list=word_list, max_guesses=Config.MAX_GUESSES)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info(
            f"Wordle Server Starting - {stats['total_words']} words, {Config.MAX_GUESSES} guesses per game"
        )

        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()

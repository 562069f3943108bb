"""
Wordle-like Game Server - Main Entry Point

This is the main entry point for the game server.
It loads the word dictionary, initializes the game service and starts the
Flask application.
"""

from wordle_like import create_app
from wordle_like.config import Config
from wordle_like.services.game_service import initialize_game_service
from wordle_like.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        game_service = initialize_game_service(Config)
        if len(game_service.dictionary):
            print(f"✓ Game service initialized with {len(game_service.dictionary)} words")
        else:
            print("✗ Word list is empty - every guess will be rejected until it is fixed")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle-like Server Starting")

        print(f"\nStarting Wordle-like Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle-like Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()

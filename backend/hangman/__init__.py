from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()

SEED_PLAYERS = ['Ana', 'Bruno', 'Carla']
SEED_WORDS = [
    'GATO', 'PERRO', 'SOL', 'LUNA', 'CASA', 'ARBOL', 'PYTHON', 'FLASK',
    'JARDIN', 'MONTANA', 'RIO', 'PLAYA', 'LIBRO', 'CIELO', 'NUBE',
]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS', []))

    from hangman.main import main
    flask_app.register_blueprint(main)

    from hangman.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api/games')

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from hangman.models import Player, Word
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            for name in SEED_PLAYERS:
                db.session.add(Player(name=name))
            for text in SEED_WORDS:
                db.session.add(Word(text=text))

            db.session.commit()
            click.echo(f'Database has been reset and seeded with {len(SEED_PLAYERS)} players and {len(SEED_WORDS)} words!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app

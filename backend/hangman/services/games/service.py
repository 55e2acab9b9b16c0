"""Game service: starts games, applies guesses and records finished games.

Each public operation runs as a single transaction on the stores: it either
commits everything it changed or rolls back and re-raises.
"""

from contextlib import contextmanager
from typing import List

from flask import current_app

from .errors import NotFound, Exhausted
from .letters import decode_letters, encode_letters
from .results import GameResult, GameSummary, build_result, summarize_game
from .state import apply_guess, initial_state, normalize_letter, snapshot
from .stores import GameStores


class GameService:

    def __init__(self, stores: GameStores):
        self.stores = stores

    @contextmanager
    def _transaction(self, action: str):
        try:
            yield
            self.stores.commit()
        except Exception as exc:
            self.stores.rollback()
            current_app.logger.warning(f"[{action}-failed] {type(exc).__name__}: {exc}")
            raise

    def _require_player(self, player_id: int):
        player = self.stores.players.find(player_id)
        if not player:
            raise NotFound(f'Player {player_id} not found')
        return player

    def _require_active_game(self, player_id: int):
        gip = self.stores.active_games.find_most_recent(player_id)
        if not gip:
            raise NotFound(f'No game in progress for player {player_id}')
        return gip

    def start_game(self, player_id: int) -> GameResult:
        with self._transaction('game-start'):
            player = self._require_player(player_id)
            word = self.stores.words.find_random_unused()
            if not word:
                raise Exhausted('No unused words left')

            # The word is burned even if this game is abandoned
            self.stores.words.mark_used(word)

            state = initial_state(word.text)
            gip = self.stores.active_games.create(
                player, word, encode_letters(state.attempted), state.remaining_attempts,
            )
            current_app.logger.info(f"[game-start] player={player.id} game={gip.id} length={len(state.word)}")
        return build_result(state)

    def make_guess(self, player_id: int, letter: str) -> GameResult:
        letter = normalize_letter(letter)
        with self._transaction('guess'):
            player = self._require_player(player_id)
            gip = self._require_active_game(player_id)
            outcome = apply_guess(
                gip.word.text,
                decode_letters(gip.attempted_letters),
                gip.remaining_attempts,
                letter,
            )

            if outcome.repeated:
                current_app.logger.info(f"[guess-repeat] player={player.id} game={gip.id} letter={letter}")
                return build_result(outcome)

            current_app.logger.info(
                f"[guess] player={player.id} game={gip.id} letter={letter} "
                f"remaining={outcome.remaining_attempts} status={outcome.status}"
            )

            if not outcome.finished:
                gip.attempted_letters = encode_letters(outcome.attempted)
                gip.remaining_attempts = outcome.remaining_attempts
                self.stores.active_games.save(gip)
                return build_result(outcome)

            word = gip.word
            if not word.used:
                self.stores.words.mark_used(word)
            game = self.stores.completed_games.create(player, word, outcome.status, outcome.score)
            self.stores.active_games.delete(gip)
            current_app.logger.info(
                f"[game-end] player={player.id} game={game.id} outcome={outcome.status} score={outcome.score}"
            )
            return build_result(outcome, reveal=True)

    def current_game(self, player_id: int) -> GameResult:
        self._require_player(player_id)
        gip = self._require_active_game(player_id)
        state = snapshot(gip.word.text, decode_letters(gip.attempted_letters), gip.remaining_attempts)
        return build_result(state)

    def list_games_by_player(self, player_id: int) -> List[GameSummary]:
        return [summarize_game(g) for g in self.stores.completed_games.find_by_player(player_id)]

    def list_all_games(self) -> List[GameSummary]:
        return [summarize_game(g) for g in self.stores.completed_games.find_all()]

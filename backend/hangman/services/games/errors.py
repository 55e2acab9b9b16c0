class GameError(Exception):
    """Base class for failures of a game operation.

    `kind` is a stable machine-readable name, `status_code` is what the HTTP
    layer answers with.
    """

    kind = 'game_error'
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message, 'kind': self.kind}


class NotFound(GameError):
    kind = 'not_found'
    status_code = 404


class Exhausted(GameError):
    kind = 'exhausted'
    status_code = 409


class InvalidGuess(GameError):
    kind = 'invalid_guess'
    status_code = 400

class StandingsError(Exception):
    pass


class UnknownMatchError(StandingsError, ValueError):
    pass


class InvalidSideError(StandingsError, ValueError):
    pass


class InvalidSetIndexError(StandingsError, ValueError):
    pass


class TieFileError(StandingsError):
    pass


class UnsupportedSchemaError(TieFileError):
    pass


class ResultsMismatchError(StandingsError, ValueError):
    pass

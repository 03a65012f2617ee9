from enum import Enum


class ErrorKind(Enum):
    """Discriminator carried by every rejected operation"""

    INVALID_DECK = 'InvalidDeck'
    GAME_NOT_STARTED = 'GameNotStarted'
    SOURCE_PILE_NOT_FOUND = 'SourcePileNotFound'
    NOT_TOP_CARD = 'NotTopCard'
    DESTINATION_OUT_OF_RANGE = 'DestinationOutOfRange'
    FOUNDATION_MUST_START_WITH_ACE = 'FoundationMustStartWithAce'
    BROKEN_FOUNDATION_SEQUENCE = 'BrokenFoundationSequence'
    INVALID_BUILD = 'InvalidBuild'
    OPEN_PILE_OCCUPIED = 'OpenPileOccupied'
    INSUFFICIENT_CAPACITY = 'InsufficientCapacity'
    MULTI_CARD_DESTINATION_UNSUPPORTED = 'MultiCardDestinationUnsupported'


class FreecellError(ValueError):
    """
    Base class for rejected game operations

    The game is left untouched whenever one of these is raised,
    so callers may simply retry with different input.
    """

    kind: ErrorKind

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.kind.value}: {self.detail!r})'


class InvalidDeckError(FreecellError):
    kind = ErrorKind.INVALID_DECK


class GameNotStartedError(FreecellError):
    kind = ErrorKind.GAME_NOT_STARTED


class SourcePileNotFoundError(FreecellError):
    kind = ErrorKind.SOURCE_PILE_NOT_FOUND


class NotTopCardError(FreecellError):
    kind = ErrorKind.NOT_TOP_CARD


class DestinationOutOfRangeError(FreecellError):
    kind = ErrorKind.DESTINATION_OUT_OF_RANGE


class FoundationMustStartWithAceError(FreecellError):
    kind = ErrorKind.FOUNDATION_MUST_START_WITH_ACE


class BrokenFoundationSequenceError(FreecellError):
    kind = ErrorKind.BROKEN_FOUNDATION_SEQUENCE


class InvalidBuildError(FreecellError):
    kind = ErrorKind.INVALID_BUILD


class OpenPileOccupiedError(FreecellError):
    kind = ErrorKind.OPEN_PILE_OCCUPIED


class InsufficientCapacityError(FreecellError):
    kind = ErrorKind.INSUFFICIENT_CAPACITY


class MultiCardDestinationUnsupportedError(FreecellError):
    kind = ErrorKind.MULTI_CARD_DESTINATION_UNSUPPORTED


class ConfigurationError(ValueError):
    """Raised when pile counts fall outside the supported bounds"""


class EmptyPileError(LookupError):
    """Raised when reading the top card of a pile that holds no cards"""

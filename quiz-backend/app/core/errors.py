class StoreFailure(Exception):
    """Any failure talking to the quizzes database: connect, query, insert or decode."""


class RowDecodeError(StoreFailure):
    """A selected row could not be turned into a Quiz."""


class StartupFailure(Exception):
    """The database is unreachable or the schema bootstrap failed."""

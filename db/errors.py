"""
db/errors.py
------------
Exceptions raised by the data access layer.
"""


class DataAccessError(RuntimeError):
    """
    An unexpected database failure (broken connection, malformed query,
    constraint violation on a find/update/delete).

    The driver exception, when there is one, is chained as ``__cause__``.
    """

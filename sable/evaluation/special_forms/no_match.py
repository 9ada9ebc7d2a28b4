class _NoMatch:
    """Returned by a special-form handler whose arguments have the wrong shape."""

    __slots__ = ()

    def __repr__(self):
        return "NO_MATCH"


NO_MATCH = _NoMatch()

class CommandError(Exception):
    """
    Raised by UnitTestErrorHandler so that a routed failure fails the test.

    The original failure is available as ``__cause__`` and ``original``.
    """
    def __init__(self, operation: str, original: BaseException = None):
        super().__init__(f"Could not {operation}")
        self.operation = operation
        self.original = original

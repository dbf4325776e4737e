class InvalidParameterError(ValueError):
    """A request parameter is structurally invalid (not merely unmatched)"""

    def __init__(self, message, title='Invalid Search Parameters'):
        super().__init__(message)
        self.title = title
        self.message = message

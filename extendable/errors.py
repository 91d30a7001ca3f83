class ExtendableError(Exception):
    pass


class InvalidArgument(ExtendableError, TypeError):
    pass


class NotAMethod(ExtendableError, TypeError):
    pass


class InvalidTarget(ExtendableError, TypeError):
    pass

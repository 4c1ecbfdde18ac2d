class AutomatonError(Exception):
    pass


class AutomatonBuildError(AutomatonError):
    pass


class EmptyFragmentError(AutomatonBuildError):
    pass


class UnknownStateError(AutomatonError):
    def __init__(self, *args, index=None):
        self.index = index
        super().__init__(*args)

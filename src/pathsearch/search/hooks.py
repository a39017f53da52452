# search/hooks.py


class NoopHooks:
    def search_start(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def reopen(self, *_, **__):
        pass

    def search_end(self, **_):
        pass

    def error(self, **_):
        pass

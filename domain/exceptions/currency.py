class CurrencyException(Exception):
    pass


class FetchFailedError(CurrencyException):
    pass


class UnknownCurrencyError(CurrencyException):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"No rate available for currency {code}")


class InvalidAmountError(CurrencyException):
    pass

class CacheCorruptError(CurrencyException):
    pass

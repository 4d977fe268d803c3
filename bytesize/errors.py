class SizeError(ValueError):
    pass


class ConfigurationError(SizeError):
    pass


class InvalidValueError(SizeError):
    def __init__(self, value: object, reason: str = 'not a non-negative finite number'):
        super().__init__(value, reason)
        self.value = value
        self.reason = reason

    def __str__(self) -> str:
        return f'{self.reason}: {self.value!r}'


class ParseError(SizeError):
    def __init__(self, text: object, reason: str) -> None:
        super().__init__(text, reason)
        self.text = text
        self.reason = reason

    def __str__(self) -> str:
        return f'{self.reason}: "{self.text}"'

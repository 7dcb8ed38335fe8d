class SchemeError(Exception):
    pass


class NotRegisteredError(SchemeError):
    pass


class ConversionError(SchemeError):
    pass


class SchemeFrozenError(SchemeError):
    pass


class SerializationError(ValueError):
    def __init__(self, message: str, gvk: object = None):
        super().__init__(message)
        self.gvk = gvk


class DeserializationError(ValueError):
    def __init__(self, message: str, gvk: object = None):
        super().__init__(message)
        self.gvk = gvk

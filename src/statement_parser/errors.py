from __future__ import annotations


class StatementParserError(Exception):
    """Base de los errores a nivel documento."""


class UnsupportedFormatError(StatementParserError, ValueError):
    def __init__(self, account_type: object):
        super().__init__(f"Unsupported statement format: {account_type!r}")
        self.account_type = account_type


class TextExtractionError(StatementParserError):
    """El PDF no se pudo leer (corrupto, cifrado, no es PDF...)."""


class ConfigError(StatementParserError):
    pass

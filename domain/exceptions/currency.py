class CurrencyException(Exception):
	pass


class ProviderError(CurrencyException):
	pass


class NetworkError(ProviderError):
	pass


class ParseError(ProviderError):
	pass


class FieldNotFoundError(ProviderError):
	pass

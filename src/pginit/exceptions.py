class PgInitException(Exception):
    """Base Exception Class"""
    pass

class ConfigurationError(PgInitException):
    """Configuration Error"""
    pass

class InvalidAddress(ConfigurationError):
    """Host is not an IPv4/IPv6 literal"""
    pass

class PortOutOfRange(ConfigurationError):
    """Port outside 0-65535"""
    pass

class CredentialsError(PgInitException):
    """Credentials File Error"""
    pass

class CredentialsUnreadable(CredentialsError):
    """Credentials file missing or inaccessible"""
    pass

class CredentialsMalformed(CredentialsError):
    """Credentials file is not a Username/Password record"""
    pass

class ConnectionError(PgInitException):
    """Connection Failure"""
    pass

class OpenFailed(ConnectionError):
    """Driver rejected the connection descriptor"""
    pass

class Unreachable(ConnectionError):
    """Liveness check failed after open"""
    pass

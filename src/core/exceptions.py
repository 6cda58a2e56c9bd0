"""
Sistema di gestione errori centralizzato per l'API dei processi
"""
from abc import ABC
from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(Enum):
    """Codici errore standardizzati"""
    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    REQUIRED_FIELD_MISSING = "REQUIRED_FIELD_MISSING"
    INVALID_DATE = "INVALID_DATE"

    # Business logic errors
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    ALREADY_EXISTS = "ALREADY_EXISTS"

    # Import errors (request-fatal)
    FILE_MISSING = "FILE_MISSING"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    UNSUPPORTED_FILE_TYPE = "UNSUPPORTED_FILE_TYPE"
    MALFORMED_FILE = "MALFORMED_FILE"
    NO_RECORDS_FOUND = "NO_RECORDS_FOUND"

    # Infrastructure errors
    DATABASE_ERROR = "DATABASE_ERROR"


class BaseApplicationException(Exception, ABC):
    """Base exception per l'applicazione"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 400
    ):
        self.message = message
        self.error_code = error_code.value
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Converte l'eccezione in dizionario per la risposta API"""
        return {
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "status_code": self.status_code
        }


class DomainException(BaseApplicationException):
    """Eccezioni del dominio business"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.BUSINESS_RULE_VIOLATION,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details, 400)


class ValidationException(DomainException):
    """Errori di validazione"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details)


class BusinessRuleException(DomainException):
    """Violazione regole business"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.BUSINESS_RULE_VIOLATION,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details)


class DuplicateProcessoException(BusinessRuleException):
    """
    Il numero del processo esiste già.

    Sollevata sia dal controllo preventivo sia dal vincolo di unicità del
    database, che resta l'unico arbitro reale tra richieste concorrenti.
    """

    def __init__(self, numero: str):
        self.numero = numero
        super().__init__(
            f"A case with number '{numero}' already exists.",
            ErrorCode.ALREADY_EXISTS,
            {"numero": numero}
        )


class ImportFileException(ValidationException):
    """Errore che blocca l'intera importazione prima del commit di qualsiasi riga"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details)


class InfrastructureException(BaseApplicationException):
    """Errori di infrastruttura"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details, 500)


class ExceptionFactory:
    """Factory per creare eccezioni specifiche"""

    @staticmethod
    def required_field_missing(field_name: str) -> ValidationException:
        return ValidationException(
            f"Required field '{field_name}' is missing",
            ErrorCode.REQUIRED_FIELD_MISSING,
            {"field_name": field_name}
        )

    @staticmethod
    def invalid_date(value: str) -> ValidationException:
        return ValidationException(
            f"Invalid date: '{value}'",
            ErrorCode.INVALID_DATE,
            {"value": value}
        )

    @staticmethod
    def no_file() -> ImportFileException:
        return ImportFileException("No file was uploaded.", ErrorCode.FILE_MISSING)

    @staticmethod
    def unsupported_file(filename: Optional[str], content_type: Optional[str]) -> ImportFileException:
        return ImportFileException(
            "Unsupported file type. Use PDF or Excel (.xlsx, .xls).",
            ErrorCode.UNSUPPORTED_FILE_TYPE,
            {"filename": filename, "content_type": content_type}
        )

    @staticmethod
    def file_too_large(size: int, limit: int) -> ImportFileException:
        return ImportFileException(
            f"File exceeds the maximum upload size of {limit} bytes.",
            ErrorCode.FILE_TOO_LARGE,
            {"size": size, "limit": limit}
        )

    @staticmethod
    def no_records_found() -> ImportFileException:
        return ImportFileException(
            "No valid case record was found in the file.",
            ErrorCode.NO_RECORDS_FOUND
        )

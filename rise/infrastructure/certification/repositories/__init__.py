from .certificate_repository import CertificateRepository
from .user_directory import UserDirectory

__all__ = ["CertificateRepository", "UserDirectory"]

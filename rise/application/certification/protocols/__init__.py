from .certificate_renderer import CertificateRendererProtocol
from .certificate_repository import CertificateRepositoryProtocol
from .user_directory import UserDirectoryProtocol

__all__ = [
    "CertificateRendererProtocol",
    "CertificateRepositoryProtocol",
    "UserDirectoryProtocol",
]

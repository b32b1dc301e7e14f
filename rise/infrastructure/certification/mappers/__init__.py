from .certificate_mapper import CertificateMapper

__all__ = ["CertificateMapper"]

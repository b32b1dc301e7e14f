from .pdf_certificate_renderer import PdfCertificateRenderer

__all__ = ["PdfCertificateRenderer"]

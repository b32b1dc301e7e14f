"""Protocol for the external document renderer."""

from typing import Protocol

from rise.domain.certification.value_objects import CertificateDocument, RenderedCertificate


class CertificateRendererProtocol(Protocol):
    """Turns certificate display data into a printable artifact."""

    def render(self, document: CertificateDocument) -> RenderedCertificate: ...

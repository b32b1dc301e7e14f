"""Certificate renderer producing a one-page PDF with a verification QR code."""

from io import BytesIO

import structlog
from reportlab.graphics import renderPDF
from reportlab.graphics.barcode.qr import QrCodeWidget
from reportlab.graphics.shapes import Drawing
from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from rise.domain.certification.value_objects import CertificateDocument, RenderedCertificate

logger = structlog.get_logger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
QR_SIZE = 32 * mm

# Palette
PRIMARY = HexColor("#1B4F72")
ACCENT = HexColor("#D4AC0D")
MUTED = HexColor("#566573")


class PdfCertificateRenderer:
    """
    Renders a CertificateDocument to a landscape A4 PDF.

    The default Helvetica faces only cover Latin script. Pass ``font_path``
    pointing at a TrueType font with Ethiopic coverage to print Tigrinya
    names and titles.
    """

    def __init__(self, font_path: str | None = None) -> None:
        self.body_font = "Helvetica"
        self.title_font = "Helvetica-Bold"
        if font_path:
            pdfmetrics.registerFont(TTFont("CertificateFont", font_path))
            self.body_font = "CertificateFont"
            self.title_font = "CertificateFont"

    def render(self, document: CertificateDocument) -> RenderedCertificate:
        qr = self._qr_drawing(document.verification_url, QR_SIZE)

        buffer = BytesIO()
        page_width, page_height = landscape(A4)
        pdf = canvas.Canvas(buffer, pagesize=(page_width, page_height))
        pdf.setTitle(f"Certificate {document.certificate_id}")
        pdf.setAuthor(document.organization_name)

        # Frame
        pdf.setStrokeColor(PRIMARY)
        pdf.setLineWidth(3)
        pdf.rect(12 * mm, 12 * mm, page_width - 24 * mm, page_height - 24 * mm)
        pdf.setStrokeColor(ACCENT)
        pdf.setLineWidth(1)
        pdf.rect(16 * mm, 16 * mm, page_width - 32 * mm, page_height - 32 * mm)

        center = page_width / 2
        pdf.setFillColor(PRIMARY)
        pdf.setFont(self.title_font, 30)
        pdf.drawCentredString(center, page_height - 50 * mm, "Certificate of Completion")

        pdf.setFillColor(MUTED)
        pdf.setFont(self.body_font, 13)
        pdf.drawCentredString(center, page_height - 68 * mm, "This certifies that")

        pdf.setFillColor(PRIMARY)
        pdf.setFont(self.title_font, 26)
        pdf.drawCentredString(center, page_height - 86 * mm, document.student_name)

        pdf.setFillColor(MUTED)
        pdf.setFont(self.body_font, 13)
        pdf.drawCentredString(center, page_height - 102 * mm, "has successfully completed")

        pdf.setFillColor(PRIMARY)
        pdf.setFont(self.title_font, 20)
        pdf.drawCentredString(center, page_height - 118 * mm, document.course_title)

        pdf.setFillColor(MUTED)
        pdf.setFont(self.body_font, 11)
        issued = document.issued_at.strftime("%d %B %Y")
        pdf.drawCentredString(center, 40 * mm, f"Issued {issued} by {document.organization_name}")
        pdf.setFont(self.body_font, 9)
        pdf.drawString(22 * mm, 24 * mm, f"Certificate No. {document.certificate_id}")
        pdf.drawString(22 * mm, 19 * mm, f"Verify at {document.verification_url}")

        renderPDF.draw(qr, pdf, page_width - 22 * mm - QR_SIZE, 20 * mm)

        pdf.showPage()
        pdf.save()
        content = buffer.getvalue()

        logger.debug(
            "certificate_pdf_rendered",
            certificate_id=document.certificate_id,
            size=len(content),
        )
        return RenderedCertificate(content=content, media_type=PDF_MEDIA_TYPE)

    def _qr_drawing(self, data: str, size: float) -> Drawing:
        """Scale a QR widget into a square drawing of the given size."""
        widget = QrCodeWidget(data)
        x1, y1, x2, y2 = widget.getBounds()
        drawing = Drawing(size, size, transform=[size / (x2 - x1), 0, 0, size / (y2 - y1), 0, 0])
        drawing.add(widget)
        return drawing

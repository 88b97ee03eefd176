"""PDF export of a case review using ReportLab."""

from __future__ import annotations

import io
import os
from datetime import datetime
from typing import List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from gp_portfolio.utils.logger import logger
from gp_portfolio.utils.state import ReviewContent

# Helvetica has no glyphs for much of Unicode; prefer a system TTF when present.
FONT_REGISTERED = False
UNICODE_FONT_NAME = "Helvetica"

_FONT_PATHS = [
    "/System/Library/Fonts/Supplemental/Arial.ttf",
    "/Library/Fonts/Arial.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
]


def _register_unicode_font() -> None:
    global FONT_REGISTERED, UNICODE_FONT_NAME

    if FONT_REGISTERED:
        return

    for font_path in _FONT_PATHS:
        if not os.path.exists(font_path):
            continue
        try:
            pdfmetrics.registerFont(TTFont("ReviewFont", font_path))
        except Exception as exc:  # reportlab raises TTFError and plain errors alike
            logger.warning("Could not register font {}: {}", font_path, exc)
            continue
        UNICODE_FONT_NAME = "ReviewFont"
        logger.debug("Registered PDF font from {}", font_path)
        break

    FONT_REGISTERED = True


def _escape(text: str) -> str:
    text = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    return text.replace("\n", "<br/>")


def _create_header(story: List, title: str) -> None:
    styles = getSampleStyleSheet()
    available_width = A4[0] - 30 * mm

    title_style = ParagraphStyle(
        "ReviewTitle",
        parent=styles["Heading1"],
        fontSize=20,
        textColor=colors.white,
        alignment=1,  # Center
        fontName=UNICODE_FONT_NAME,
        leading=26,
    )
    header_table = Table([[Paragraph(_escape(title), title_style)]], colWidths=[available_width])
    header_table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), colors.HexColor("#005EB8")),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("TOPPADDING", (0, 0), (-1, -1), 10 * mm),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 10 * mm),
    ]))
    story.append(header_table)

    date_style = ParagraphStyle(
        "ReviewDate",
        parent=styles["Normal"],
        fontSize=10,
        textColor=colors.HexColor("#666666"),
        fontName=UNICODE_FONT_NAME,
    )
    story.append(Spacer(1, 4 * mm))
    story.append(Paragraph(f"Generated {datetime.now().strftime('%d/%m/%Y')}", date_style))
    story.append(Spacer(1, 8 * mm))


def _add_section(story: List, label: str, text: str) -> None:
    styles = getSampleStyleSheet()
    heading_style = ParagraphStyle(
        "SectionTitle",
        parent=styles["Heading2"],
        fontSize=14,
        textColor=colors.HexColor("#282828"),
        spaceAfter=4,
        fontName=UNICODE_FONT_NAME,
    )
    body_style = ParagraphStyle(
        "SectionBody",
        parent=styles["Normal"],
        fontSize=11,
        leading=15,
        textColor=colors.HexColor("#1a1a1a"),
        fontName=UNICODE_FONT_NAME,
    )
    story.append(Paragraph(_escape(label), heading_style))
    for paragraph in (text or "—").split("\n\n"):
        if paragraph.strip():
            story.append(Paragraph(_escape(paragraph.strip()), body_style))
            story.append(Spacer(1, 2 * mm))
    story.append(Spacer(1, 6 * mm))


def review_to_pdf_bytes(review: ReviewContent, title: str = "Case Review") -> bytes:
    """Render every section of ``review`` (edits included) into one PDF."""
    _register_unicode_font()

    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=15 * mm,
        leftMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
        title=title,
    )

    story: List = []
    _create_header(story, title)
    for _, label, text in review.sections():
        _add_section(story, label, text)

    doc.build(story)
    buffer.seek(0)
    return buffer.read()


__all__ = ["review_to_pdf_bytes"]

from io import BytesIO
from pathlib import Path
from typing import List

from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from docsmith import config
from docsmith.outputs.base import FileMaterializer, RenderedFile, timestamp_millis

FONT = "Helvetica"
TITLE_SIZE = 18
HEADING_SIZE = 14
BODY_SIZE = 11

MARGIN_X = 50
BODY_X = 60
TOP_MARGIN = 50
SECTION_BREAK_Y = 100    # a section never starts below this line
BOTTOM_MARGIN = 50
LINE_HEIGHT = 15
CHARS_PER_LINE = 90

TITLE_COLOR = (0, 0, 0.8)
HEADING_COLOR = (0.2, 0.2, 0.2)
BODY_COLOR = (0, 0, 0)


def wrap_words(text: str, width: int = CHARS_PER_LINE) -> List[str]:
    """Greedy word wrap: fill a line with whole words until the next one would overflow *width*."""
    lines: List[str] = []
    current = ""
    for word in text.split(" "):
        candidate = f"{current} {word}" if current else word
        if current and len(candidate) > width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def register_font(path: str | None) -> str:
    """Name of the font to draw with: the TTF at *path* once registered, else Helvetica."""
    if not path:
        return FONT
    name = Path(path).stem
    if name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(name, path))
    return name


class _PageWriter:
    """Vertical cursor over a reportlab canvas that breaks pages as needed."""

    def __init__(self, pdf: canvas.Canvas, font: str = FONT):
        self.pdf = pdf
        self.font = font
        self.width, self.height = A4
        self.y = self.height - TOP_MARGIN

    def new_page(self):
        self.pdf.showPage()
        self.y = self.height - TOP_MARGIN

    def draw(self, text: str, x: float, size: int, color, advance: float):
        self.pdf.setFont(self.font, size)
        self.pdf.setFillColorRGB(*color)
        self.pdf.drawString(x, self.y, text)
        self.y -= advance


class PdfMaterializer(FileMaterializer):
    content_type = "application/pdf"
    label = "PDF"

    def __init__(self, storage, link_ttl: int = config.DOWNLOAD_URL_TTL, font_path: str | None = config.PDF_FONT_PATH):
        super().__init__(storage, link_ttl)
        self.font = register_font(font_path)

    def fallback(self, raw: str) -> dict:
        return {"title": "Generated Report", "sections": [{"heading": "Content", "content": raw}]}

    def render_data(self, data) -> RenderedFile:
        data = data if isinstance(data, dict) else {}
        title = data.get("title")
        sections = data.get("sections")
        if not isinstance(sections, list):
            sections = []

        buffer = BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=A4)
        if title:
            pdf.setTitle(str(title))
        page = _PageWriter(pdf, self.font)

        if title:
            page.draw(str(title), MARGIN_X, TITLE_SIZE, TITLE_COLOR, advance=40)

        for section in sections:
            if not isinstance(section, dict):
                continue
            if page.y < SECTION_BREAK_Y:
                page.new_page()

            if section.get("heading"):
                page.draw(str(section["heading"]), MARGIN_X, HEADING_SIZE, HEADING_COLOR, advance=20)

            content = "" if section.get("content") is None else str(section["content"])
            lines = [line for paragraph in content.splitlines() for line in wrap_words(paragraph)]
            for line in lines:
                if page.y < BOTTOM_MARGIN:
                    page.new_page()
                page.draw(line, BODY_X, BODY_SIZE, BODY_COLOR, advance=LINE_HEIGHT)

            page.y -= 20

        pdf.save()
        key = f"{config.RESULTS_PREFIX}{title or timestamp_millis()}.pdf"
        return RenderedFile(key=key, body=buffer.getvalue())

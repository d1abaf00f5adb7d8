from io import BytesIO

from docx import Document
from docx.shared import Pt

from docsmith import config
from docsmith.outputs.base import FileMaterializer, RenderedFile, pretty_json, timestamp_millis, xml_safe


class DocxMaterializer(FileMaterializer):
    content_type = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    label = "DOCX"

    def fallback(self, raw: str) -> dict:
        return {"title": "Document", "content": [{"type": "paragraph", "text": raw}]}

    def render_data(self, data) -> RenderedFile:
        title = data.get("title") if isinstance(data, dict) else None
        doc = Document()

        if title:
            heading = doc.add_heading(xml_safe(title), level=1)
            heading.paragraph_format.space_after = Pt(15)

        content = data.get("content") if isinstance(data, dict) else None
        if isinstance(content, list):
            for block in content:
                self._add_block(doc, block)
        else:
            doc.add_paragraph(pretty_json(data))

        buffer = BytesIO()
        doc.save(buffer)
        key = f"{config.RESULTS_PREFIX}{title or timestamp_millis()}.docx"
        return RenderedFile(key=key, body=buffer.getvalue())

    @staticmethod
    def _add_block(doc, block) -> None:
        if not isinstance(block, dict):
            return
        if block.get("type") == "paragraph":
            doc.add_paragraph(xml_safe(block.get("text", "")))
        elif block.get("type") == "list" and isinstance(block.get("items"), list):
            for item in block["items"]:
                doc.add_paragraph(xml_safe(item), style="List Bullet")

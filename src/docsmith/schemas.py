from typing import List, Optional

from pydantic import BaseModel

from docsmith.core.schema import UploadedFile
from docsmith.rag.pipeline import PromptRequest


class PresignBody(BaseModel):
    fileName: str
    contentType: Optional[str] = None


class FileRef(BaseModel):
    key: str
    name: str


class PromptBody(BaseModel):
    prompt: str
    files: Optional[List[FileRef]] = None
    modelType: Optional[str] = None

    def to_request(self) -> PromptRequest:
        return PromptRequest(
            prompt=self.prompt,
            files=[UploadedFile(key=f.key, name=f.name) for f in self.files or []],
            model_type=self.modelType,
        )

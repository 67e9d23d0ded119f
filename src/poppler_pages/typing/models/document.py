"""Document facts and raw process output models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DocumentInfo(BaseModel):
    """Facts reported by `pdfinfo` for one document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    page_count: int = Field(ge=0)
    is_encrypted: bool


class ProcessResult(BaseModel):
    """Captured output of one external process run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    stdout: bytes
    stderr: bytes = b""
    returncode: int = 0

    @property
    def succeeded(self) -> bool:
        """Return whether the process exited with status zero."""
        return self.returncode == 0

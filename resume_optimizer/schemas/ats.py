from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from resume_optimizer.normalize.contact import ContactRecord

AtsAction = Literal["analyzeATS", "rewriteForJob"]
PdfLayout = Literal["flow", "two_page"]


class AtsPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume: str = Field(default="", max_length=50000)
    job_description: str = Field(default="", alias="jobDescription", max_length=50000)
    rewrite_prompt: str | None = Field(default=None, alias="rewritePrompt", max_length=20000)


class AtsRequest(BaseModel):
    action: str = ""
    payload: AtsPayload | None = None


class ResumePdfRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_text: str = Field(default="", alias="resumeText", max_length=60000)
    contact_info: ContactRecord | None = Field(default=None, alias="contactInfo")
    layout: PdfLayout = "flow"

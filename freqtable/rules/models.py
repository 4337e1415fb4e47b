from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ColumnWidths(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: int = Field(default=35, ge=3)
    input: int = Field(default=30, ge=3)
    status: int = Field(default=8, ge=3)
    duration: int = Field(default=13, ge=3)
    error: int = Field(default=25, ge=3)


class ReportRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    columns: ColumnWidths = Field(default_factory=ColumnWidths)
    banner_width: int = Field(default=130, ge=1)
    large_input_threshold: int = Field(default=20, ge=0)
    sample_size: int = Field(default=3, ge=0)

    @model_validator(mode="after")
    def sample_fits_threshold(self) -> "ReportRules":
        if self.sample_size > self.large_input_threshold:
            raise ValueError("sample_size must not exceed large_input_threshold")
        return self


class CasesRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    fail_fast: bool = False


class LoggingRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class Rules(BaseModel):
    report: ReportRules = Field(default_factory=ReportRules)
    cases: CasesRules = Field(default_factory=CasesRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)

    model_config = ConfigDict(extra="forbid")

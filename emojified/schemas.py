from pydantic import BaseModel, Field

class FingerprintRequest(BaseModel):
    address: str
    show_full: bool | None = None
    spacing: str | None = Field(default=None, max_length=16)

class BatchRequest(BaseModel):
    addresses: list[str]
    show_full: bool | None = None
    spacing: str | None = Field(default=None, max_length=16)

class FingerprintResponse(BaseModel):
    address: str
    valid: bool
    formatted: str | None = None
    fingerprint: str | None = None
    symbols: list[str] = []
    label: str
    etag: str | None = None

class BatchResponse(BaseModel):
    count: int
    invalid: int
    results: list[FingerprintResponse]

class ValidateResponse(BaseModel):
    address: str
    valid: bool

class FormatResponse(BaseModel):
    address: str
    formatted: str

class PaletteResponse(BaseModel):
    size: int
    symbols_per_fingerprint: int
    symbols: list[str]

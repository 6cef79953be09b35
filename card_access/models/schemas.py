# =======================================================================================
# card_access/models/schemas.py - Pydantic Models
# =======================================================================================
from datetime import datetime
from typing import Optional, List
from pydantic import AliasChoices, BaseModel, Field

# ========== Reader requests ==========
# Reader firmware sends either camelCase or all-lowercase keys; absent keys
# fall back to empty values and are judged by the lookups, not the parser.

class VerifyRequest(BaseModel):
    """Card verification request from a door reader."""
    apiKey: str = Field("", validation_alias=AliasChoices("apiKey", "apikey"))
    authtoken: str = Field("", validation_alias=AliasChoices("authtoken", "authToken"))
    serialNumber: str = Field("", validation_alias=AliasChoices("serialNumber", "serialnumber"))

class VerifyResponse(BaseModel):
    ok: bool
    name: str = ""
    permission: str = ""

    @classmethod
    def denied(cls) -> "VerifyResponse":
        return cls(ok=False)

class KeyRequest(BaseModel):
    """Read or write key request for an existing card."""
    apiKey: str = Field("", validation_alias=AliasChoices("apiKey", "apikey"))
    serialNumber: str = Field("", validation_alias=AliasChoices("serialNumber", "serialnumber"))
    write: bool = False

class KeyResponse(BaseModel):
    ok: bool
    key: str = ""

    @classmethod
    def denied(cls) -> "KeyResponse":
        return cls(ok=False)

class AddCardRequest(BaseModel):
    """Provisioning request for a blank card."""
    apiKey: str = Field("", validation_alias=AliasChoices("apiKey", "apikey"))
    serialNumber: str = Field("", validation_alias=AliasChoices("serialNumber", "serialnumber"))

class AddCardResponse(BaseModel):
    ok: bool
    authtoken: str = ""
    writeKey: str = ""
    readKey: str = ""

    @classmethod
    def denied(cls) -> "AddCardResponse":
        return cls(ok=False)

# ========== Admin Auth ==========

class AdminAuthRequest(BaseModel):
    username: str
    password: str


class AdminInfo(BaseModel):
    username: str
    adminTab: bool = False


class AdminAuthResponse(BaseModel):
    token: Optional[str] = None
    message: Optional[str] = None
    admin: Optional[AdminInfo] = None


# ========== Health ==========

class HealthResponse(BaseModel):
    status: str                 # "ok" | "error"
    dataAvailable: bool
    message: Optional[str] = None


# ========== Console listings ==========

class CardItem(BaseModel):
    serialNumber: str
    owner: Optional[int] = None


class PersonItem(BaseModel):
    id: int
    name: str
    permission: str


class ReaderItem(BaseModel):
    id: int
    addCard: bool
    writeCard: bool


class LogItem(BaseModel):
    id: int
    card: Optional[str] = None
    reader: Optional[int] = None
    people: Optional[int] = None
    allowed: bool
    direction: Optional[str] = None
    comment: Optional[str] = None
    timestamp: Optional[datetime] = None


class LogsResponse(BaseModel):
    logs: List[LogItem]

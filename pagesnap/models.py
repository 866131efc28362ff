from pydantic import BaseModel, PositiveInt, field_validator

from pagesnap.config import DEFAULT_HEIGHT, DEFAULT_WIDTH


class CaptureRequest(BaseModel):
    url: str
    width: PositiveInt = DEFAULT_WIDTH
    height: PositiveInt = DEFAULT_HEIGHT
    full_page: bool = False

    @field_validator("url", mode="before")
    @classmethod
    def add_scheme(cls, v: str) -> str:
        """Prepend https:// to urls that have neither http:// nor https://."""
        if not (v.startswith("https://") or v.startswith("http://")):
            return "https://" + v
        return v

    @property
    def viewport(self) -> dict:
        return {"width": self.width, "height": self.height, "deviceScaleFactor": 1}


class CaptureResult(BaseModel):
    image: bytes
    width: int
    height: int

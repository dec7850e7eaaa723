# gamma_mcp/features/generation/schemas.py
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from gamma_mcp.lib.json_tools import prune_empty

TextMode = Literal["generate", "condense", "preserve", "summarize"]
OutputFormat = Literal["presentation", "document", "social"]
CardSplit = Literal["auto", "inputTextBreaks"]
ExportFormat = Literal["pdf", "pptx"]
TextAmount = Literal["brief", "medium", "detailed", "extensive", "short", "long"]
ImageSource = Literal[
    "aiGenerated",
    "pictographic",
    "unsplash",
    "giphy",
    "webAllImages",
    "webFreeToUse",
    "webFreeToUseCommercially",
    "placeholder",
    "noImages",
]
CardDimensions = Literal["fluid", "16x9", "4x3", "pageless", "letter", "a4", "1x1", "4x5", "9x16"]
WorkspaceAccess = Literal["noAccess", "view", "comment", "edit", "fullAccess"]
ExternalAccess = Literal["noAccess", "view", "comment", "edit"]

TEXT_AMOUNTS = ("brief", "medium", "detailed", "extensive")
LEGACY_TEXT_AMOUNTS = {"short": "brief", "long": "detailed"}
TEXT_MODES = ("generate", "condense", "preserve")
LEGACY_TEXT_MODES = {"summarize": "condense"}


def normalize_text_amount(value: Any) -> Optional[str]:
    """short -> brief, long -> detailed; current values pass through; anything else -> None."""
    if value is None:
        return None
    v = str(value).strip().lower()
    if v in TEXT_AMOUNTS:
        return v
    return LEGACY_TEXT_AMOUNTS.get(v)


def normalize_text_mode(value: Any) -> Optional[str]:
    if value is None:
        return None
    v = str(value).strip().lower()
    if v in TEXT_MODES:
        return v
    return LEGACY_TEXT_MODES.get(v)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- tool input ----------

class PresentationParams(_CamelModel):
    """Caller parameters as received from the generate-presentation tool."""
    input_text: str = Field(..., min_length=1, description="Prompt/topic text")
    text_mode: Optional[str] = None
    format: Optional[OutputFormat] = None
    theme_name: Optional[str] = None
    num_cards: Optional[int] = Field(None, ge=1, le=60)
    card_split: Optional[CardSplit] = None
    additional_instructions: Optional[str] = None
    export_as: Optional[ExportFormat] = None
    # textOptions
    text_amount: Optional[str] = None
    tone: Optional[str] = None
    audience: Optional[str] = None
    language: Optional[str] = None
    # imageOptions
    image_source: Optional[ImageSource] = None
    image_model: Optional[str] = None
    image_style: Optional[str] = None
    # cardOptions
    card_dimensions: Optional[CardDimensions] = None
    # sharingOptions
    workspace_access: Optional[WorkspaceAccess] = None
    external_access: Optional[ExternalAccess] = None

    @field_validator("text_amount", mode="before")
    @classmethod
    def _legacy_text_amount(cls, v):
        return normalize_text_amount(v)

    @field_validator("text_mode", mode="before")
    @classmethod
    def _legacy_text_mode(cls, v):
        return normalize_text_mode(v)


# ---------- request payload ----------

class _RequestPart(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class TextOptions(_RequestPart):
    amount: Optional[str] = None
    tone: Optional[str] = None
    audience: Optional[str] = None
    language: Optional[str] = None


class ImageOptions(_RequestPart):
    source: Optional[str] = None
    model: Optional[str] = None
    style: Optional[str] = None


class CardOptions(_RequestPart):
    dimensions: Optional[str] = None


class SharingOptions(_RequestPart):
    workspace_access: Optional[str] = None
    external_access: Optional[str] = None


class GenerationRequest(_RequestPart):
    """Body of POST /generations. Immutable once built."""
    input_text: str
    text_mode: Optional[str] = None
    format: Optional[str] = None
    theme_name: Optional[str] = None
    num_cards: Optional[int] = None
    card_split: Optional[str] = None
    additional_instructions: Optional[str] = None
    export_as: Optional[str] = None
    text_options: TextOptions = TextOptions()
    image_options: ImageOptions = ImageOptions()
    card_options: CardOptions = CardOptions()
    sharing_options: SharingOptions = SharingOptions()

    @classmethod
    def from_params(cls, params: PresentationParams) -> "GenerationRequest":
        return cls(
            input_text=params.input_text,
            text_mode=params.text_mode,
            format=params.format,
            theme_name=params.theme_name,
            num_cards=params.num_cards,
            card_split=params.card_split,
            additional_instructions=params.additional_instructions,
            export_as=params.export_as,
            text_options=TextOptions(
                amount=params.text_amount,
                tone=params.tone,
                audience=params.audience,
                language=params.language,
            ),
            image_options=ImageOptions(
                source=params.image_source,
                model=params.image_model,
                style=params.image_style,
            ),
            card_options=CardOptions(dimensions=params.card_dimensions),
            sharing_options=SharingOptions(
                workspace_access=params.workspace_access,
                external_access=params.external_access,
            ),
        )

    def to_payload(self) -> Dict[str, Any]:
        """camelCase JSON body with every unset field and empty nested object omitted."""
        return prune_empty(self.model_dump(by_alias=True, exclude_none=True))


# ---------- status response ----------

class FileRef(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")
    url: Optional[str] = None
    type: Optional[str] = None


FileEntry = Union[str, FileRef]


def _none_on_mismatch(value, handler):
    """A field with an unexpected shape reads as absent instead of failing the whole status."""
    try:
        return handler(value)
    except ValidationError:
        return None


class StatusResult(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")
    files: Optional[List[FileEntry]] = None

    @field_validator("files", mode="wrap")
    @classmethod
    def _lenient_files(cls, v, handler):
        return _none_on_mismatch(v, handler)


class GenerationStatus(_CamelModel):
    """GET /generations/{id}. Every field is optional; older API versions use different URL fields."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    generation_id: Optional[str] = None
    status: Optional[str] = None
    gamma_url: Optional[str] = None
    url: Optional[str] = None
    share_url: Optional[str] = None
    export_url: Optional[str] = None
    pdf_url: Optional[str] = None
    pptx_url: Optional[str] = None
    files: Optional[List[FileEntry]] = None
    result: Optional[StatusResult] = None

    @field_validator(
        "gamma_url", "url", "share_url", "export_url", "pdf_url", "pptx_url", "files", "result",
        mode="wrap",
    )
    @classmethod
    def _lenient_fields(cls, v, handler):
        return _none_on_mismatch(v, handler)

    @property
    def normalized_status(self) -> str:
        return (self.status or "").strip().lower()


# ---------- outcome ----------

class PollOutcome(BaseModel):
    view_url: Optional[str] = None
    file_url: Optional[str] = None


class GenerationResult(BaseModel):
    """What a tool call resolved to. On failure only `error` is set."""
    generation_id: Optional[str] = None
    view_url: Optional[str] = None
    file_url: Optional[str] = None
    file_path: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def failed(cls, error: str) -> "GenerationResult":
        return cls(error=error or "Unknown error.")

    @property
    def ok(self) -> bool:
        return self.error is None

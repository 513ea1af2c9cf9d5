"""Declarative tool schemas for the news servers.

Each tool is described once, as a table of ParameterSpec entries. The
same table produces the JSON Schema advertised by tools/list and the
pydantic model used to validate tools/call arguments.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Type

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, create_model

from .config import MODE_GNEWS, MODE_RSS

KIND_STRING = "string"
KIND_NUMBER = "number"
KIND_ENUM = "enum"

_MISSING = object()


def _reject_bool(value: Any) -> Any:
    # JSON true/false would otherwise pass as 1/0
    if isinstance(value, bool):
        raise ValueError("Input should be a number, not a boolean")
    return value


Number = Annotated[float, BeforeValidator(_reject_bool)]


@dataclass(frozen=True)
class ParameterSpec:
    """One tool parameter.

    ``minimum``/``maximum`` bound the value for numbers and the length for
    strings. Optional parameters must carry a default.
    """

    key: str
    kind: str
    description: str = ""
    required: bool = False
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    default: Any = _MISSING
    allowed_values: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.kind not in (KIND_STRING, KIND_NUMBER, KIND_ENUM):
            raise ValueError(f"Unknown parameter kind: {self.kind}")
        if not self.required and self.default is _MISSING:
            raise ValueError(f"Optional parameter '{self.key}' needs a default")
        if self.kind == KIND_ENUM and not self.allowed_values:
            raise ValueError(f"Enum parameter '{self.key}' needs allowed values")

    @property
    def has_default(self) -> bool:
        return self.default is not _MISSING

    def to_json_schema(self) -> Dict[str, Any]:
        if self.kind == KIND_ENUM:
            schema: Dict[str, Any] = {"type": "string", "enum": list(self.allowed_values)}
        elif self.kind == KIND_NUMBER:
            schema = {"type": "number"}
            if self.minimum is not None:
                schema["minimum"] = self.minimum
            if self.maximum is not None:
                schema["maximum"] = self.maximum
        else:
            schema = {"type": "string"}
            if self.minimum is not None:
                schema["minLength"] = self.minimum
            if self.maximum is not None:
                schema["maxLength"] = self.maximum
        if self.has_default:
            schema["default"] = self.default
        if self.description:
            schema["description"] = self.description
        return schema

    def to_field(self) -> Tuple[Any, Any]:
        """Return the (annotation, FieldInfo) pair for pydantic.create_model."""
        default = self.default if self.has_default else ...
        if self.kind == KIND_ENUM:
            return Literal[self.allowed_values], Field(default)
        if self.kind == KIND_NUMBER:
            return Number, Field(default, ge=self.minimum, le=self.maximum, allow_inf_nan=False)
        return str, Field(default, min_length=self.minimum, max_length=self.maximum)


@dataclass(frozen=True)
class OperationSpec:
    """A named tool with its ordered parameters."""

    name: str
    description: str
    parameters: Tuple[ParameterSpec, ...]

    def parameter(self, key: str) -> Optional[ParameterSpec]:
        for param in self.parameters:
            if param.key == key:
                return param
        return None

    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema for the tool's arguments object."""
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {p.key: p.to_json_schema() for p in self.parameters},
        }
        required = [p.key for p in self.parameters if p.required]
        if required:
            schema["required"] = required
        return schema

    @cached_property
    def model(self) -> Type[BaseModel]:
        fields = {p.key: p.to_field() for p in self.parameters}
        model_name = "".join(part.capitalize() for part in self.name.split("-")) + "Arguments"
        return create_model(model_name, __config__=ConfigDict(extra="ignore"), **fields)


class OperationRegistry:
    """Read-only lookup table of the tools one server exposes."""

    def __init__(self, specs: List[OperationSpec]):
        self._specs: Dict[str, OperationSpec] = {}
        for spec in specs:
            if spec.name in self._specs:
                raise ValueError(f"Duplicate operation name: {spec.name}")
            self._specs[spec.name] = spec

    def get_spec(self, name: str) -> Optional[OperationSpec]:
        return self._specs.get(name)

    def list_specs(self) -> List[OperationSpec]:
        return list(self._specs.values())

    def __contains__(self, name: str) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)


# =========================== RSS mode ===========================

RSS_CATEGORIES: Tuple[str, ...] = (
    "top",
    "domestic",
    "world",
    "business",
    "entertainment",
    "sports",
    "it",
    "science",
)

_RSS_CATEGORY_DESCRIPTION = "News category (" + ", ".join(RSS_CATEGORIES) + ")"

_RSS_LIMIT = ParameterSpec(
    key="limit",
    kind=KIND_NUMBER,
    minimum=1,
    maximum=20,
    default=5,
    description="Number of news articles to return (max 20)",
)

GET_NEWS = OperationSpec(
    name="get-news",
    description=(
        "Get the latest news for a category. Reads the Yahoo! News RSS feed and "
        "returns a list of articles with title, publication date, link and summary."
    ),
    parameters=(
        ParameterSpec(
            key="category",
            kind=KIND_ENUM,
            required=True,
            allowed_values=RSS_CATEGORIES,
            description=_RSS_CATEGORY_DESCRIPTION,
        ),
        _RSS_LIMIT,
    ),
)

SEARCH_NEWS_RSS = OperationSpec(
    name="search-news",
    description=(
        "Search news by keyword. Finds articles in the given category whose title "
        "or summary contains the keyword and returns title, publication date, link "
        "and summary for each."
    ),
    parameters=(
        ParameterSpec(
            key="keyword",
            kind=KIND_STRING,
            required=True,
            minimum=1,
            description="Search keyword",
        ),
        ParameterSpec(
            key="category",
            kind=KIND_ENUM,
            allowed_values=RSS_CATEGORIES,
            default="top",
            description=_RSS_CATEGORY_DESCRIPTION,
        ),
        _RSS_LIMIT,
    ),
)

# =========================== GNews mode ===========================

GNEWS_CATEGORIES: Tuple[str, ...] = (
    "general",
    "world",
    "nation",
    "business",
    "technology",
    "entertainment",
    "sports",
    "science",
    "health",
)

_LANG = ParameterSpec(
    key="lang",
    kind=KIND_STRING,
    minimum=2,
    maximum=2,
    default="ja",
    description="Language code (e.g. ja, en, fr)",
)

_COUNTRY = ParameterSpec(
    key="country",
    kind=KIND_STRING,
    minimum=2,
    maximum=2,
    default="jp",
    description="Country code (e.g. jp, us, gb)",
)

_MAX = ParameterSpec(
    key="max",
    kind=KIND_NUMBER,
    minimum=1,
    maximum=10,
    default=5,
    description="Number of news articles to return (max 10)",
)

SEARCH_NEWS_GNEWS = OperationSpec(
    name="search-news",
    description=(
        "Search news by keyword. Finds articles matching the keyword and returns "
        "title, publication date, link and summary for each."
    ),
    parameters=(
        ParameterSpec(
            key="keyword",
            kind=KIND_STRING,
            required=True,
            minimum=1,
            description="Search keyword",
        ),
        _LANG,
        _COUNTRY,
        _MAX,
    ),
)

GET_TOP_HEADLINES = OperationSpec(
    name="get-top-headlines",
    description=(
        "Get the latest top headlines for a category. Returns title, publication "
        "date, link and summary for each article."
    ),
    parameters=(
        ParameterSpec(
            key="category",
            kind=KIND_ENUM,
            allowed_values=GNEWS_CATEGORIES,
            default="general",
            description="News category",
        ),
        _LANG,
        _COUNTRY,
        _MAX,
    ),
)

OPERATIONS_BY_MODE: Dict[str, List[OperationSpec]] = {
    MODE_RSS: [GET_NEWS, SEARCH_NEWS_RSS],
    MODE_GNEWS: [SEARCH_NEWS_GNEWS, GET_TOP_HEADLINES],
}


def build_registry(mode: str) -> OperationRegistry:
    """Return the registry of tools for a server mode."""
    try:
        return OperationRegistry(OPERATIONS_BY_MODE[mode])
    except KeyError:
        raise ValueError(f"Unknown server mode: {mode}") from None

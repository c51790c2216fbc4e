"""Conversion configuration data model."""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterable, Optional, Tuple

from html2docusaurus.errors import ConfigError


def _ordered_unique(values: Iterable[str]) -> Tuple[str, ...]:
    """Drop blank and repeated entries while keeping first-seen order."""
    seen = []
    for value in values:
        value = str(value).strip()
        if value and value not in seen:
            seen.append(value)
    return tuple(seen)


# camelCase request keys -> dataclass field names
_CAMEL_TO_FIELD = {
    'title': 'title',
    'description': 'description',
    'sidebarPosition': 'sidebar_position',
    'sidebarLabel': 'sidebar_label',
    'slug': 'slug',
    'tags': 'tags',
    'keywords': 'keywords',
    'addFrontmatter': 'add_frontmatter',
    'convertTabs': 'convert_tabs',
    'convertAdmonitions': 'convert_admonitions',
    'convertCodeBlocks': 'convert_code_blocks',
    'processImages': 'process_images',
    'customFrontmatter': 'custom_frontmatter',
}

_STRING_FIELDS = ('title', 'description', 'sidebar_label', 'slug', 'custom_frontmatter')
_LIST_FIELDS = ('tags', 'keywords')
_BOOL_FIELDS = (
    'add_frontmatter',
    'convert_tabs',
    'convert_admonitions',
    'convert_code_blocks',
    'process_images',
)


@dataclass(frozen=True)
class ConversionConfig:
    """Immutable options for a single HTML to Docusaurus conversion.

    Optional fields that are empty or falsy are left out of the generated
    frontmatter rather than emitted as empty values.

    Attributes:
        title: Page title (frontmatter ``title``)
        description: Page description (frontmatter ``description``)
        sidebar_position: Positive sidebar position, or None to omit it
        sidebar_label: Sidebar label override
        slug: URL slug override
        tags: Ordered, de-duplicated tag names
        keywords: Ordered, de-duplicated SEO keywords
        add_frontmatter: Prepend the YAML frontmatter block
        convert_tabs: Turn tab containers into ``<Tabs>`` components
        convert_admonitions: Turn callouts and blockquotes into ``:::`` blocks
        convert_code_blocks: Tag fenced code blocks with their language
        process_images: Rewrite relative image sources into ``./assets/``
        custom_frontmatter: Raw ``key: value`` lines appended to frontmatter
    """
    title: str = ""
    description: str = ""
    sidebar_position: Optional[int] = 1
    sidebar_label: str = ""
    slug: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)
    keywords: Tuple[str, ...] = field(default_factory=tuple)
    add_frontmatter: bool = True
    convert_tabs: bool = True
    convert_admonitions: bool = True
    convert_code_blocks: bool = True
    process_images: bool = True
    custom_frontmatter: str = ""

    def __post_init__(self):
        position = self.sidebar_position
        if position is not None:
            if isinstance(position, bool) or not isinstance(position, int):
                raise ConfigError(
                    f"must be a positive integer, got {type(position).__name__}",
                    config_field='sidebar_position'
                )
            if position < 1:
                raise ConfigError(
                    f"must be a positive integer, got {position}",
                    config_field='sidebar_position'
                )

        for name in _LIST_FIELDS:
            value = getattr(self, name)
            if isinstance(value, str):
                raise ConfigError("must be a list of strings", config_field=name)
            # frozen dataclass: normalise through object.__setattr__
            object.__setattr__(self, name, _ordered_unique(value or ()))

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ConversionConfig':
        """Build a config from a request payload or a YAML mapping.

        Accepts camelCase keys (``sidebarPosition``) as sent by HTTP callers
        and snake_case keys (``sidebar_position``) as written in config files.
        Missing keys take the dataclass defaults; unknown keys are ignored.

        Args:
            data: Mapping of config values, or None for all defaults

        Returns:
            ConversionConfig instance

        Raises:
            ConfigError: If the mapping or one of its values has the wrong shape
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )

        field_names = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_TO_FIELD.get(key, key)
            if name not in field_names:
                continue
            if value is None:
                # an explicit null clears the position; other nulls keep defaults
                if name == 'sidebar_position':
                    kwargs[name] = None
                continue
            kwargs[name] = cls._coerce(name, value)

        return cls(**kwargs)

    @staticmethod
    def _coerce(name: str, value: Any) -> Any:
        if name in _STRING_FIELDS:
            if not isinstance(value, (str, int, float)) or isinstance(value, bool):
                raise ConfigError("must be a string", config_field=name)
            return str(value)
        if name in _BOOL_FIELDS:
            if not isinstance(value, bool):
                raise ConfigError("must be true or false", config_field=name)
            return value
        if name in _LIST_FIELDS:
            if not isinstance(value, (list, tuple)):
                raise ConfigError("must be a list of strings", config_field=name)
            return tuple(value)
        if name == 'sidebar_position':
            # 0 means "not set" for callers that send a blank form field
            if value == 0 or value == "":
                return None
            if isinstance(value, str) and value.strip().isdigit():
                return int(value.strip())
            return value
        return value

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase representation echoed by the API."""
        return {
            camel: list(getattr(self, name)) if name in _LIST_FIELDS else getattr(self, name)
            for camel, name in _CAMEL_TO_FIELD.items()
        }

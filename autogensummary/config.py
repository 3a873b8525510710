"""Options that control how the summary is generated."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

PREPROCESSOR_NAME = "auto-gen-summary"

README_FILE = "README.md"

OPT_FIRST_LINE_AS_LINK = "first-line-as-link-text"
OPT_INDEX_FIRST_LINE_AS_DIRECTORY_LINK = "index-first-line-as-directory-link-text"
OPT_DIR_WITHOUT_INDEX_BEHAVIOR = "directory-without-index-behavior"
OPT_DIRECTORY_INDEX_NAMES = "directory-index-names"


class ConfigError(ValueError):
    """Raised when the book configuration holds an invalid option."""


class DirectoryWithoutIndexBehavior(Enum):
    """What to do with a directory that has no index file."""

    IGNORE = "ignore"
    DRAFT = "draft"
    GENERATE_STUB_INDEX = "generate-stub-index"

    @classmethod
    def from_str(cls, s: Any) -> DirectoryWithoutIndexBehavior | None:
        """Return the behavior named by ``s``, or None if there is none."""
        try:
            return cls(s)
        except ValueError:
            return None


@dataclass
class AutoGenConfig:
    """Settings for summary generation.

    ``first_line_as_link_text``: use a file's first ``# `` heading as its title.
    ``directory_index_names``: file names that serve as a directory index.
    ``index_first_line_as_directory_link_text``: use the index heading as the
    directory title.
    ``directory_without_index_behavior``: handling of directories without index.
    ``generated_directory_index_name``: name of a generated stub index file.
    """

    first_line_as_link_text: bool = False
    directory_index_names: set[str] = field(default_factory=lambda: {README_FILE})
    index_first_line_as_directory_link_text: bool = False
    directory_without_index_behavior: DirectoryWithoutIndexBehavior = (
        DirectoryWithoutIndexBehavior.IGNORE
    )
    generated_directory_index_name: str = README_FILE

    def apply_config(self, mdbook_config: Mapping[str, Any]) -> None:
        """Read this preprocessor's options from a book configuration table."""
        preprocessors = mdbook_config.get("preprocessor")
        if not isinstance(preprocessors, Mapping):
            return
        cfg = preprocessors.get(PREPROCESSOR_NAME)
        if not isinstance(cfg, Mapping):
            return

        if OPT_FIRST_LINE_AS_LINK in cfg:
            value = cfg[OPT_FIRST_LINE_AS_LINK]
            self.first_line_as_link_text = value if isinstance(value, bool) else False

        if OPT_INDEX_FIRST_LINE_AS_DIRECTORY_LINK in cfg:
            value = cfg[OPT_INDEX_FIRST_LINE_AS_DIRECTORY_LINK]
            self.index_first_line_as_directory_link_text = (
                value if isinstance(value, bool) else False
            )

        if OPT_DIR_WITHOUT_INDEX_BEHAVIOR in cfg:
            value = cfg[OPT_DIR_WITHOUT_INDEX_BEHAVIOR]
            if not isinstance(value, str):
                raise ConfigError(
                    f"Config key '{OPT_DIR_WITHOUT_INDEX_BEHAVIOR}' must be a string"
                )
            behavior = DirectoryWithoutIndexBehavior.from_str(value)
            if behavior is None:
                raise ConfigError(
                    f"Config key '{OPT_DIR_WITHOUT_INDEX_BEHAVIOR}' must be one of "
                    "'ignore', 'draft', or 'generate-stub-index'"
                )
            self.directory_without_index_behavior = behavior

        if OPT_DIRECTORY_INDEX_NAMES in cfg:
            value = cfg[OPT_DIRECTORY_INDEX_NAMES]
            if not isinstance(value, list):
                raise ConfigError(
                    f"Config key '{OPT_DIRECTORY_INDEX_NAMES}' must be an array."
                )
            for item in value:
                if not isinstance(item, str):
                    raise ConfigError(
                        f"Item in array for config key {OPT_DIRECTORY_INDEX_NAMES} "
                        "is not a string."
                    )
            if not value:
                raise ConfigError(
                    f"Config key {OPT_DIRECTORY_INDEX_NAMES} must not be empty."
                )
            self.generated_directory_index_name = value[0]
            self.directory_index_names = set(value)
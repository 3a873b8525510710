import pytest

from autogensummary.config import (
    PREPROCESSOR_NAME,
    AutoGenConfig,
    ConfigError,
    DirectoryWithoutIndexBehavior,
)


def _book_config(options):
    return {"book": {"src": "src"}, "preprocessor": {PREPROCESSOR_NAME: options}}


def test_defaults():
    config = AutoGenConfig()
    assert config.first_line_as_link_text is False
    assert config.index_first_line_as_directory_link_text is False
    assert config.directory_without_index_behavior is DirectoryWithoutIndexBehavior.IGNORE
    assert config.directory_index_names == {"README.md"}
    assert config.generated_directory_index_name == "README.md"


def test_default_sets_are_independent():
    first = AutoGenConfig()
    second = AutoGenConfig()
    first.directory_index_names.add("index.md")
    assert second.directory_index_names == {"README.md"}


@pytest.mark.parametrize(
    "text, expected",
    [
        ("ignore", DirectoryWithoutIndexBehavior.IGNORE),
        ("draft", DirectoryWithoutIndexBehavior.DRAFT),
        ("generate-stub-index", DirectoryWithoutIndexBehavior.GENERATE_STUB_INDEX),
    ],
)
def test_from_str_known(text, expected):
    assert DirectoryWithoutIndexBehavior.from_str(text) is expected


@pytest.mark.parametrize("text", ["Draft", "gen-stub-index", "", "other"])
def test_from_str_unknown(text):
    assert DirectoryWithoutIndexBehavior.from_str(text) is None


def test_apply_without_preprocessor_section_keeps_defaults():
    config = AutoGenConfig()
    config.apply_config({"book": {"src": "src"}})
    assert config == AutoGenConfig()


def test_apply_with_other_preprocessor_keeps_defaults():
    config = AutoGenConfig()
    config.apply_config({"preprocessor": {"links": {"first-line-as-link-text": True}}})
    assert config == AutoGenConfig()


def test_apply_boolean_options():
    config = AutoGenConfig()
    config.apply_config(
        _book_config(
            {
                "first-line-as-link-text": True,
                "index-first-line-as-directory-link-text": True,
            }
        )
    )
    assert config.first_line_as_link_text is True
    assert config.index_first_line_as_directory_link_text is True


def test_apply_non_boolean_option_becomes_false():
    config = AutoGenConfig(first_line_as_link_text=True)
    config.apply_config(_book_config({"first-line-as-link-text": "yes"}))
    assert config.first_line_as_link_text is False


def test_apply_behavior():
    config = AutoGenConfig()
    config.apply_config(_book_config({"directory-without-index-behavior": "draft"}))
    assert config.directory_without_index_behavior is DirectoryWithoutIndexBehavior.DRAFT


def test_apply_unknown_behavior_raises():
    config = AutoGenConfig()
    with pytest.raises(ConfigError, match="must be one of"):
        config.apply_config(_book_config({"directory-without-index-behavior": "bogus"}))


def test_apply_non_string_behavior_raises():
    config = AutoGenConfig()
    with pytest.raises(ConfigError, match="must be a string"):
        config.apply_config(_book_config({"directory-without-index-behavior": 3}))


def test_apply_index_names_uses_first_for_generation():
    config = AutoGenConfig()
    config.apply_config(_book_config({"directory-index-names": ["index.md", "README.md"]}))
    assert config.directory_index_names == {"index.md", "README.md"}
    assert config.generated_directory_index_name == "index.md"


def test_apply_empty_index_names_raises():
    config = AutoGenConfig()
    with pytest.raises(ConfigError, match="must not be empty"):
        config.apply_config(_book_config({"directory-index-names": []}))


def test_apply_index_names_not_array_raises():
    config = AutoGenConfig()
    with pytest.raises(ConfigError, match="must be an array"):
        config.apply_config(_book_config({"directory-index-names": "index.md"}))


def test_apply_index_names_with_non_string_item_raises():
    config = AutoGenConfig()
    with pytest.raises(ConfigError, match="is not a string"):
        config.apply_config(_book_config({"directory-index-names": ["index.md", 1]}))
    assert config.directory_index_names == {"README.md"}
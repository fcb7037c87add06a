"""Behaviour of :func:`DocsBuilder.PackageMetadata.extract` on manifest text."""

from __future__ import annotations

import pytest

from DocsBuilder.PackageMetadata import PackageMetadata, extract

FULL_MANIFEST = """
[package]
name = "test"

[package.metadata.docs.rs]
features = [ "feature1", "feature2" ]
all-features = true
no-default-features = true
default-target = "x86_64-unknown-linux-gnu"
rustc-args = [ "--example-rustc-arg" ]
rustdoc-args = [ "--example-rustdoc-arg" ]
dependencies = [ "example-system-dependency" ]
"""

ARRAY_KEYS = {
    "features": "features",
    "rustc-args": "rustc_args",
    "rustdoc-args": "rustdoc_args",
    "dependencies": "dependencies",
}


def _with_settings(body: str) -> str:
    return f'[package]\nname = "test"\n\n[package.metadata.docs.rs]\n{body}\n'


def test_full_settings_table_is_extracted() -> None:
    """Every documented key is read into its matching record field."""

    metadata = extract(FULL_MANIFEST)

    assert metadata.features == ("feature1", "feature2")
    assert metadata.all_features is True
    assert metadata.no_default_features is True
    assert metadata.default_target == "x86_64-unknown-linux-gnu"
    assert metadata.rustc_args == ("--example-rustc-arg",)
    assert metadata.rustdoc_args == ("--example-rustdoc-arg",)
    assert metadata.dependencies == ("example-system-dependency",)


def test_manifest_without_settings_table_yields_defaults() -> None:
    metadata = extract('[package]\nname = "test"\n')

    assert metadata == PackageMetadata()
    assert metadata.features is None
    assert metadata.all_features is False
    assert metadata.no_default_features is False
    assert metadata.default_target is None
    assert metadata.rustc_args is None
    assert metadata.rustdoc_args is None
    assert metadata.dependencies is None


@pytest.mark.parametrize(
    "text",
    [
        "[package",
        "this is not toml",
        "[package]\nname = ",
        'features = ["unterminated',
        "[package.metadata.docs.rs]\nall-features = true\nall-features = false\n",
        pytest.param("x = " + "[" * 5000 + "]" * 5000, id="deeply-nested-array"),
        pytest.param("x = " + "[" * 50000, id="unclosed-nested-array"),
        pytest.param(
            "[package.metadata.docs.rs]\nall-features = true\nfeatures = " + "[" * 5000 + "]" * 5000,
            id="deeply-nested-settings-array",
        ),
    ],
)
def test_unparseable_documents_yield_defaults(text: str) -> None:
    assert extract(text) == PackageMetadata()


@pytest.mark.parametrize(
    "text",
    [
        "",
        'package = "not a table"',
        "[package]\nmetadata = 3",
        "[package.metadata]\ndocs = []",
        '[package.metadata.docs]\nrs = "x86_64-unknown-linux-gnu"',
        "[package.metadata.docs]\nrsx = { all-features = true }",
        "[metadata.docs.rs]\nall-features = true",
    ],
)
def test_missing_or_non_table_path_yields_defaults(text: str) -> None:
    """A missing step or a non-table at any depth falls back to the defaults."""

    assert extract(text) == PackageMetadata()


def test_settings_table_can_be_declared_inline() -> None:
    text = '[package]\nname = "test"\nmetadata.docs.rs = { all-features = true, features = ["a"] }\n'

    metadata = extract(text)

    assert metadata.all_features is True
    assert metadata.features == ("a",)


@pytest.mark.parametrize("key, field", sorted(ARRAY_KEYS.items()))
def test_string_arrays_preserve_order_and_count(key: str, field: str) -> None:
    metadata = extract(_with_settings(f'{key} = ["c", "a", "b", "a"]'))

    assert getattr(metadata, field) == ("c", "a", "b", "a")


@pytest.mark.parametrize("key, field", sorted(ARRAY_KEYS.items()))
@pytest.mark.parametrize(
    "value",
    ['["ok", 1]', '["ok", true]', '[["nested"]]', '["ok", { a = "b" }]', '"not-an-array"', "7"],
)
def test_invalid_arrays_are_discarded_entirely(key: str, field: str, value: str) -> None:
    """One bad element discards the whole array rather than just that element."""

    metadata = extract(_with_settings(f"{key} = {value}"))

    assert getattr(metadata, field) is None


def test_empty_array_is_distinct_from_absent() -> None:
    metadata = extract(_with_settings("features = []\ndependencies = []"))

    assert metadata.features == ()
    assert metadata.dependencies == ()
    assert metadata.rustc_args is None


@pytest.mark.parametrize("key", ["all-features", "no-default-features"])
@pytest.mark.parametrize("value", ['"true"', "1", "0", "[true]", "{ enabled = true }"])
def test_non_boolean_flags_keep_default(key: str, value: str) -> None:
    metadata = extract(_with_settings(f"{key} = {value}"))

    assert metadata.all_features is False
    assert metadata.no_default_features is False


@pytest.mark.parametrize("value", ["42", "true", '["x86_64-unknown-linux-gnu"]'])
def test_non_string_default_target_is_absent(value: str) -> None:
    assert extract(_with_settings(f"default-target = {value}")).default_target is None


def test_malformed_field_does_not_affect_siblings() -> None:
    metadata = extract(
        _with_settings(
            'features = ["ok", 2]\n'
            "all-features = true\n"
            'no-default-features = "yes"\n'
            'default-target = "wasm32-unknown-unknown"\n'
            'rustdoc-args = ["--cfg", "docsrs"]'
        )
    )

    assert metadata.features is None
    assert metadata.all_features is True
    assert metadata.no_default_features is False
    assert metadata.default_target == "wasm32-unknown-unknown"
    assert metadata.rustdoc_args == ("--cfg", "docsrs")


def test_underscored_keys_are_ignored() -> None:
    """Only the hyphenated on-disk keys are recognised."""

    metadata = extract(_with_settings('all_features = true\ndefault_target = "x"'))

    assert metadata == PackageMetadata()


def test_extraction_is_idempotent() -> None:
    first = extract(FULL_MANIFEST)
    second = extract(FULL_MANIFEST)

    assert first == second
    assert first is not second


def test_from_str_matches_extract() -> None:
    assert PackageMetadata.from_str(FULL_MANIFEST) == extract(FULL_MANIFEST)


def test_record_is_immutable() -> None:
    metadata = extract(FULL_MANIFEST)

    with pytest.raises(AttributeError):
        metadata.all_features = False  # type: ignore[misc]


def test_to_dict_renders_sequences_as_lists() -> None:
    payload = extract(FULL_MANIFEST).to_dict()

    assert payload == {
        "features": ["feature1", "feature2"],
        "all_features": True,
        "no_default_features": True,
        "default_target": "x86_64-unknown-linux-gnu",
        "rustc_args": ["--example-rustc-arg"],
        "rustdoc_args": ["--example-rustdoc-arg"],
        "dependencies": ["example-system-dependency"],
    }
    assert PackageMetadata().to_dict()["features"] is None

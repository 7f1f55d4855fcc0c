import pytest

from app.services.slugs import is_valid_slug, normalize_slug


@pytest.mark.parametrize(
    "slug", ["hello", "hello-world", "a1-b2-c3", "2024", "x", "typescript-generics"]
)
def test_is_valid_slug_accepts_well_formed(slug):
    assert is_valid_slug(slug) is True


@pytest.mark.parametrize(
    "slug",
    ["", "-hello", "hello-", "hello--world", "Hello", "hello world", "héllo", "a_b", "hello\n"],
)
def test_is_valid_slug_rejects_malformed(slug):
    assert is_valid_slug(slug) is False


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Hello World", "hello-world"),
        ("  --Hello__World!!  ", "hello-world"),
        ("AI Won't Tell You", "ai-won-t-tell-you"),
        ("already-valid", "already-valid"),
        ("C++ & Rust", "c-rust"),
        ("café", "caf"),
    ],
)
def test_normalize_slug(raw, expected):
    assert normalize_slug(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "---", "!!!", "ñ"])
def test_normalize_slug_returns_none_when_nothing_left(raw):
    assert normalize_slug(raw) is None


@pytest.mark.parametrize(
    "raw", ["Some Title", "a--b", "-x-", "UPPER_case 42", "émoji 🎉 post", "tab\tsep"]
)
def test_normalized_slugs_are_valid_and_stable(raw):
    slug = normalize_slug(raw)

    assert slug is not None
    assert is_valid_slug(slug)
    assert normalize_slug(slug) == slug

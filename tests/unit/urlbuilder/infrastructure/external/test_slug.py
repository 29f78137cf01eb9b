import pytest

from src.urlbuilder.infrastructure.external.slug import is_slug_safe


@pytest.mark.parametrize("value", ["music", "hello-world", "2024", "0", "true", "a1-b2"])
def test_slug_safe_values(value):
    assert is_slug_safe(value)


@pytest.mark.parametrize(
    "value",
    ["", "Music", "rock & roll", "café", "a_b", "-a", "a-", "hello--world", "a b", "2.5"],
)
def test_values_that_need_a_query_parameter(value):
    assert not is_slug_safe(value)

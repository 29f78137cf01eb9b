import pytest

from src.urlbuilder.domain.value_objects import SplitUrl


@pytest.mark.parametrize(
    "url, base, query, fragment",
    [
        ("/events", "/events", None, None),
        ("/events?a=1", "/events", "a=1", None),
        ("/events?", "/events", "", None),
        ("/events#top", "/events", None, "top"),
        ("/events?a=1#top", "/events", "a=1", "top"),
        ("#top", "", None, "top"),
        ("/a?b=c?d", "/a", "b=c?d", None),
        ("/a#b#c", "/a#b", None, "c"),
        ("https://example.com/x?y=1#z", "https://example.com/x", "y=1", "z"),
    ],
)
def test_parse(url, base, query, fragment):
    parts = SplitUrl.parse(url)
    assert (parts.base, parts.query, parts.fragment) == (base, query, fragment)
    assert str(parts) == url


def test_with_fragment():
    assert SplitUrl.parse("/x#f").with_fragment("/y?a=1") == "/y?a=1#f"
    assert SplitUrl.parse("/x").with_fragment("/y") == "/y"
    assert SplitUrl.parse("/x#").with_fragment("/y") == "/y#"

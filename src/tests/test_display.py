import pytest

from json_convert.display import ABSENT, to_display_string


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ABSENT),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (-7, "-7"),
        (1.5, "1.5"),
        (1.0, "1.0"),
        (0.1, "0.1"),
        ("plain text", "plain text"),
        ({"a": 1, "b": [True, None]}, '{"a":1,"b":[true,null]}'),
        (["é", 2], '["é",2]'),
    ],
)
def test_to_display_string(value: object, expected: str) -> None:
    assert to_display_string(value) == expected


def test_absent_marker_is_empty() -> None:
    assert ABSENT == ""

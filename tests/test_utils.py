import pytest

from pagenav.utils import bool_from_string
from pagenav.utils import int_from_string


@pytest.mark.parametrize(
    "val, expected",
    [
        (True, True),
        (0, False),
        ("Yes", True),
        ("true", True),
        ("no", False),
        ("0", False),
        ("maybe", None),
        (None, None),
    ],
)
def test_bool_from_string(val, expected):
    assert bool_from_string(val) is expected


@pytest.mark.parametrize(
    "val, expected",
    [
        (3, 3),
        (" 2 ", 2),
        ("-1", -1),
        ("x", 7),
        (None, 7),
        (True, 7),
    ],
)
def test_int_from_string(val, expected):
    assert int_from_string(val, 7) == expected

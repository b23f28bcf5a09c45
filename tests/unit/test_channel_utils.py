import pytest

from flowwire.channels.utils import group_by_size, truncate_label


def test_group_by_size_exact_multiple() -> None:
    assert group_by_size([1, 2, 3, 4, 5, 6], 3) == [[1, 2, 3], [4, 5, 6]]


def test_group_by_size_last_group_shorter() -> None:
    assert group_by_size(["a", "b", "c", "d", "e"], 2) == [["a", "b"], ["c", "d"], ["e"]]


def test_group_by_size_larger_than_input() -> None:
    assert group_by_size(["a", "b"], 3) == [["a", "b"]]


def test_group_by_size_empty() -> None:
    assert group_by_size([], 3) == []


def test_group_by_size_preserves_order() -> None:
    items = list(range(10))
    groups = group_by_size(items, 4)
    assert [item for group in groups for item in group] == items
    assert [len(group) for group in groups] == [4, 4, 2]


@pytest.mark.parametrize("size", [0, -1])
def test_group_by_size_rejects_non_positive(size: int) -> None:
    with pytest.raises(ValueError):
        group_by_size([1, 2], size)


def test_truncate_label_keeps_exact_limit() -> None:
    assert truncate_label("exactly20characters!", 20) == "exactly20characters!"


def test_truncate_label_cuts_long_text() -> None:
    result = truncate_label("this label is far too long", 20)
    assert result == "this label is far .."
    assert len(result) == 20


def test_truncate_label_default_limit_is_20() -> None:
    assert len(truncate_label("x" * 50)) == 20


def test_truncate_label_custom_limit() -> None:
    assert truncate_label("abcdefgh", 5) == "abc.."


def test_truncate_label_short_and_empty() -> None:
    assert truncate_label("Yes") == "Yes"
    assert truncate_label("") == ""

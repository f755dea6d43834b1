import pytest

from wordwave.data import WordRecord
from wordwave.helpers import weigh
from wordwave.utils import BadParameter


def test_empty_cloud():
    assert weigh([]) == []


def test_sizes_scale_between_bounds():
    records = [WordRecord(id="b", count=3), WordRecord(id="a", count=1), WordRecord(id="c", count=5)]
    cloud = weigh(records, min_size=10, max_size=50)
    assert [(w.word, w.count, w.size) for w in cloud] == [
        ("c", 5, 50),
        ("b", 3, 30),
        ("a", 1, 10),
    ]


def test_equal_counts_get_max_size_and_sort_by_word():
    cloud = weigh([WordRecord(id="z", count=2), WordRecord(id="m", count=2)], max_size=40)
    assert [(w.word, w.size) for w in cloud] == [("m", 40), ("z", 40)]


def test_inverted_bounds_rejected():
    with pytest.raises(ValueError):
        weigh([WordRecord(id="a", count=1)], min_size=50, max_size=10)


@pytest.mark.parametrize(
    "sizes",
    [
        {"min_size": float("nan")},
        {"max_size": float("nan")},
        {"max_size": float("inf")},
        {"min_size": float("-inf")},
    ],
)
def test_non_finite_sizes_rejected(sizes):
    with pytest.raises(BadParameter):
        weigh([WordRecord(id="a", count=1), WordRecord(id="b", count=3)], **sizes)

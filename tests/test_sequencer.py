# tests/test_sequencer.py
from adaptive_learn.models import ContentItem
from adaptive_learn.sequencer import group_by_subject, interleave, recommend_sequence


def test_empty_input():
    assert recommend_sequence([]) == []
    assert recommend_sequence(None) == []


def test_difficulty_order_and_interleaving(make_item):
    items = [
        make_item("a", subject="math", difficulty=3),
        make_item("b", subject="math", difficulty=1),
        make_item("c", subject="bio", difficulty=2),
        make_item("d", subject="math", difficulty=2),
        make_item("e", subject="bio", difficulty=1),
    ]
    assert [i.id for i in recommend_sequence(items)] == ["b", "e", "d", "c", "a"]


def test_dependency_comes_first(make_item):
    items = [
        make_item("x", subject="math", difficulty=1, depends_on=["y"]),
        make_item("y", subject="math", difficulty=5),
    ]
    assert [i.id for i in recommend_sequence(items)] == ["y", "x"]


def test_dependency_chain_is_not_resolved(make_item):
    # Only direct dependencies are compared, so c can land before b
    items = [
        make_item("c", subject="math", difficulty=1, depends_on=["b"]),
        make_item("a", subject="math", difficulty=3),
        make_item("b", subject="math", difficulty=2, depends_on=["a"]),
    ]
    assert [i.id for i in recommend_sequence(items)] == ["c", "a", "b"]


def test_missing_subject_grouped_as_general():
    items = [ContentItem(id="a"), ContentItem(id="b", subject="art")]
    groups = group_by_subject(items)
    assert list(groups) == ["general", "art"]


def test_no_consecutive_subject_while_others_remain(make_item):
    items = [make_item(f"m{n}", subject="math", difficulty=n) for n in range(4)]
    items.append(make_item("b0", subject="bio"))
    subjects = [i.subject for i in recommend_sequence(items)]
    assert subjects == ["math", "bio", "math", "math", "math"]


def test_interleave_uses_first_seen_subject_order():
    groups = {"b": [1, 2], "a": [3], "c": [4, 5, 6]}
    assert interleave(groups) == [1, 3, 4, 2, 5, 6]

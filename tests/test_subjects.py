import pytest

from texsolve.core.subjects import Subject, iter_subjects, resolve_subject


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Subject.PHYSICS, Subject.PHYSICS),
        ("mathematics", Subject.MATHEMATICS),
        ("  Chemistry ", Subject.CHEMISTRY),
        ("STATISTICS", Subject.STATISTICS),
        ("astronomy", Subject.GENERAL),
        ("", Subject.GENERAL),
        (None, Subject.GENERAL),
        (42, Subject.GENERAL),
    ],
)
def test_resolve_subject(value: object, expected: Subject) -> None:
    assert resolve_subject(value) is expected  # type: ignore[arg-type]


def test_iter_subjects_lists_closed_enumeration() -> None:
    assert [subject.value for subject in iter_subjects()] == [
        "general",
        "mathematics",
        "physics",
        "chemistry",
        "biology",
        "engineering",
        "statistics",
    ]


def test_subject_str_is_value() -> None:
    assert str(Subject.BIOLOGY) == "biology"

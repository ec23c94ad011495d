import pytest

from texsolve.core.subjects import Subject
from texsolve.core.templates import (
    BEGIN_DOCUMENT,
    DOCUMENT_CLASS,
    END_DOCUMENT,
    FIRST_PAGE_STYLE,
    HYPERREF_PACKAGE,
    PACKAGE_PROFILES,
    PACKAGE_SETTINGS,
    SHARED_PACKAGES,
    assemble,
    build_preamble,
    get_profile,
)


SUBJECT_INPUTS = [*Subject, "unknown-subject", "", None]


def test_every_subject_has_a_profile() -> None:
    assert set(PACKAGE_PROFILES) == set(Subject)
    for subject, profile in PACKAGE_PROFILES.items():
        assert profile.subject is subject
        assert profile.declarations


def test_profile_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        PACKAGE_PROFILES[Subject.GENERAL] = PACKAGE_PROFILES[Subject.PHYSICS]  # type: ignore[index]


@pytest.mark.parametrize("subject", ["unknown-subject", "", None, "ASTRONOMY"])
def test_unknown_subject_uses_general_profile(subject: object) -> None:
    assert get_profile(subject) is PACKAGE_PROFILES[Subject.GENERAL]  # type: ignore[arg-type]
    document = assemble(subject, "body")  # type: ignore[arg-type]
    assert PACKAGE_PROFILES[Subject.GENERAL].render() in document


@pytest.mark.parametrize("subject", SUBJECT_INPUTS)
def test_document_has_single_body_pair_closing_last(subject: object) -> None:
    document = assemble(subject, "Answer: $x = 1$")  # type: ignore[arg-type]

    assert document.startswith(DOCUMENT_CLASS)
    assert document.count(DOCUMENT_CLASS) == 1
    assert document.count(BEGIN_DOCUMENT) == 1
    assert document.count(END_DOCUMENT) == 1
    assert document.rstrip().endswith(END_DOCUMENT)


def test_sections_appear_in_fixed_order() -> None:
    profile = get_profile(Subject.PHYSICS)
    document = assemble(Subject.PHYSICS, "BODY-MARKER")

    positions = [
        document.index(DOCUMENT_CLASS),
        document.index(profile.render()),
        document.index(SHARED_PACKAGES),
        document.index(PACKAGE_SETTINGS),
        document.index(HYPERREF_PACKAGE),
        document.index(BEGIN_DOCUMENT),
        document.index(FIRST_PAGE_STYLE),
        document.index("BODY-MARKER"),
        document.index(END_DOCUMENT),
    ]
    assert positions == sorted(positions)


def test_hyperref_is_last_package() -> None:
    preamble = build_preamble(Subject.STATISTICS)
    last_package = [line for line in preamble.splitlines() if line.startswith("\\usepackage")][-1]
    assert last_package == HYPERREF_PACKAGE


def test_shared_packages_cover_common_features() -> None:
    for package in (
        "geometry",
        "graphicx",
        "luatexja-fontspec",
        "float",
        "booktabs",
        "subcaption",
        "enumitem",
        "fancyhdr",
        "xcolor",
    ):
        assert f"\\usepackage{{{package}}}" in SHARED_PACKAGES


def test_body_is_inserted_verbatim() -> None:
    body = "\\begin{align}\n  a &= b \\\\\n  c &= d\n\\end{align}"
    document = assemble(Subject.MATHEMATICS, body)
    assert f"\n{body}\n{END_DOCUMENT}" in document


def test_empty_body_still_yields_complete_document() -> None:
    document = assemble(Subject.GENERAL, "")
    assert document.startswith(DOCUMENT_CLASS)
    assert document.count(BEGIN_DOCUMENT) == 1
    assert document.rstrip().endswith(END_DOCUMENT)


@pytest.mark.parametrize(
    ("subject", "expected"),
    [
        (Subject.MATHEMATICS, ("amsmath", "amsthm", "mathtools", "tikz-cd")),
        (Subject.PHYSICS, ("siunitx", "physics", "braket", "tensor")),
        (Subject.CHEMISTRY, ("mhchem", "chemfig", "chemformula", "modiagram")),
        (Subject.BIOLOGY, ("tikz", "pgfplots", "xcolor")),
        (Subject.ENGINEERING, ("siunitx", "circuitikz", "steinmetz")),
        (Subject.STATISTICS, ("pgfplotstable", "array", "bm")),
        (Subject.GENERAL, ("amsmath", "amssymb", "tikz", "pgfplots")),
    ],
)
def test_profile_packages(subject: Subject, expected: tuple[str, ...]) -> None:
    packages = get_profile(subject).packages
    for name in expected:
        assert name in packages


def test_profile_render_starts_with_heading_comment() -> None:
    rendered = get_profile(Subject.CHEMISTRY).render()
    assert rendered.splitlines()[0] == "% --- Chemistry packages ---"
    assert "\\usepackage[version=4]{mhchem}" in rendered

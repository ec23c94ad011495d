"""Subject-aware LaTeX document template.

The document is assembled from named constants rather than a single literal
so that each section can be inspected and tested on its own:

``DOCUMENT_CLASS``
: A4 paper, 12pt, ``ltjsarticle`` (LuaLaTeX with Japanese typesetting).

``PACKAGE_PROFILES``
: One :class:`PackageProfile` per :class:`~texsolve.core.subjects.Subject`.

``SHARED_PACKAGES`` / ``PACKAGE_SETTINGS`` / ``HYPERREF_PACKAGE``
: Declarations common to every subject. ``hyperref`` must stay the last
  package loaded.

``BEGIN_DOCUMENT`` / ``FIRST_PAGE_STYLE`` / ``END_DOCUMENT``
: Body delimiters and the ``plain`` page style override.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
from types import MappingProxyType

from .subjects import Subject, resolve_subject


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PackageProfile:
    """Ordered package declarations dedicated to a subject."""

    subject: Subject
    heading: str
    declarations: tuple[str, ...]

    def render(self) -> str:
        """Return the profile as preamble lines."""
        return "\n".join((f"% --- {self.heading} ---", *self.declarations))

    @property
    def packages(self) -> tuple[str, ...]:
        """Return the package names loaded by the profile, in order."""
        names: list[str] = []
        for line in self.declarations:
            if not line.startswith("\\usepackage"):
                continue
            start = line.find("{")
            end = line.find("}", start)
            if start < 0 or end < 0:
                continue
            names.extend(name.strip() for name in line[start + 1 : end].split(","))
        return tuple(name for name in names if name)


DOCUMENT_CLASS = r"\documentclass[a4paper, 12pt]{ltjsarticle}"

_PROFILES: dict[Subject, PackageProfile] = {
    Subject.MATHEMATICS: PackageProfile(
        Subject.MATHEMATICS,
        "Mathematics packages",
        (
            r"\usepackage{amsmath, amssymb, amsthm}",
            r"\usepackage{mathrsfs}",
            r"\usepackage{mathtools}",
            r"\usepackage{bm}",
            r"\usepackage{cases}",
            r"\usepackage{tikz-cd}",
        ),
    ),
    Subject.PHYSICS: PackageProfile(
        Subject.PHYSICS,
        "Physics packages",
        (
            r"\usepackage{amsmath, amssymb}",
            r"\usepackage{siunitx}",
            r"\usepackage{physics}",
            r"\usepackage{bm}",
            r"\usepackage{braket}",
            r"\usepackage{tensor}",
        ),
    ),
    Subject.CHEMISTRY: PackageProfile(
        Subject.CHEMISTRY,
        "Chemistry packages",
        (
            r"\usepackage{amsmath, amssymb}",
            r"\usepackage[version=4]{mhchem}",
            r"\usepackage{chemfig}",
            r"\usepackage{chemformula}",
            r"\usepackage{bohr}",
            r"\usepackage{modiagram}",
        ),
    ),
    Subject.BIOLOGY: PackageProfile(
        Subject.BIOLOGY,
        "Biology packages",
        (
            r"\usepackage{amsmath, amssymb}",
            r"\usepackage{tikz}",
            r"\usetikzlibrary{shapes.geometric, arrows.meta, positioning}",
            r"\usepackage{pgfplots}",
            r"\usepackage{xcolor}",
        ),
    ),
    Subject.ENGINEERING: PackageProfile(
        Subject.ENGINEERING,
        "Engineering packages",
        (
            r"\usepackage{amsmath, amssymb}",
            r"\usepackage{siunitx}",
            r"\usepackage{tikz}",
            r"\usetikzlibrary{circuits.ee.IEC, positioning, arrows.meta}",
            r"\usepackage{pgfplots}",
            r"\usepackage{circuitikz}",
            r"\usepackage{steinmetz}",
        ),
    ),
    Subject.STATISTICS: PackageProfile(
        Subject.STATISTICS,
        "Statistics packages",
        (
            r"\usepackage{amsmath, amssymb, amsthm}",
            r"\usepackage{mathtools}",
            r"\usepackage{bm}",
            r"\usepackage{tikz}",
            r"\usepackage{pgfplots}",
            r"\usepackage{pgfplotstable}",
            r"\usepackage{array}",
        ),
    ),
    Subject.GENERAL: PackageProfile(
        Subject.GENERAL,
        "Base packages",
        (
            r"\usepackage{amsmath, amssymb}",
            r"\usepackage{tikz}",
            r"\usepackage{pgfplots}",
        ),
    ),
}

PACKAGE_PROFILES: Mapping[Subject, PackageProfile] = MappingProxyType(_PROFILES)

SHARED_PACKAGES = "\n".join(
    (
        "% --- Shared packages ---",
        r"\usepackage{geometry}",
        r"\usepackage{graphicx}",
        r"\usepackage{luatexja-fontspec}",
        r"\usepackage{float}",
        r"\usepackage{booktabs}",
        r"\usepackage{subcaption}",
        r"\usepackage{enumitem}",
        r"\usepackage{fancyhdr}",
        r"\usepackage{xcolor}",
    )
)

PACKAGE_SETTINGS = "\n".join(
    (
        "% --- Package settings ---",
        r"\geometry{left=20mm, right=20mm, top=25mm, bottom=25mm}",
        "",
        r"\setmainjfont{IPAexMincho}",
        r"\setsansjfont{IPAexGothic}",
        "",
        r"\pagestyle{fancy}",
        r"\fancyhf{}",
        r"\fancyhead[L]{\leftmark}",
        r"\fancyfoot[C]{\thepage}",
        r"\renewcommand{\headrulewidth}{0.4pt}",
    )
)

HYPERREF_PACKAGE = r"\usepackage[luatex, pdfencoding=auto, hidelinks]{hyperref}"

BEGIN_DOCUMENT = r"\begin{document}"

FIRST_PAGE_STYLE = "\n".join(
    (
        r"\fancypagestyle{plain}{",
        r"  \fancyhf{}",
        r"  \fancyfoot[C]{\thepage}",
        "}",
    )
)

END_DOCUMENT = r"\end{document}"


def get_profile(subject: Subject | str | None) -> PackageProfile:
    """Return the package profile for ``subject`` (``general`` when unknown)."""
    return PACKAGE_PROFILES[resolve_subject(subject)]


def build_preamble(subject: Subject | str | None) -> str:
    """Return every declaration placed before ``\\begin{document}``."""
    profile = get_profile(subject)
    sections = (
        DOCUMENT_CLASS,
        profile.render(),
        SHARED_PACKAGES,
        PACKAGE_SETTINGS,
        HYPERREF_PACKAGE,
    )
    return "\n\n".join(sections)


def assemble(subject: Subject | str | None, body: str) -> str:
    """Wrap ``body`` into a complete document for ``subject``.

    The body is inserted verbatim; its markup is not inspected.
    """
    profile = get_profile(subject)
    logger.debug("Assembling document with the %s profile.", profile.subject.value)
    return (
        f"{build_preamble(profile.subject)}\n\n"
        f"{BEGIN_DOCUMENT}\n"
        f"{FIRST_PAGE_STYLE}\n\n"
        f"{body or ''}\n"
        f"{END_DOCUMENT}\n"
    )


__all__ = [
    "BEGIN_DOCUMENT",
    "DOCUMENT_CLASS",
    "END_DOCUMENT",
    "FIRST_PAGE_STYLE",
    "HYPERREF_PACKAGE",
    "PACKAGE_PROFILES",
    "PACKAGE_SETTINGS",
    "SHARED_PACKAGES",
    "PackageProfile",
    "assemble",
    "build_preamble",
    "get_profile",
]

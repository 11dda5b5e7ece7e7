"""Tests for project root detection."""

from __future__ import annotations

from pathlib import Path

from pathabbrev.features.abbreviation import LocalFilesystemAdapter, ProjectRootDetector


class RecordingProbe:
    """In-memory probe remembering every path it was asked about."""

    def __init__(self, existing: set[str]) -> None:
        self.existing = existing
        self.calls: list[str] = []

    def exists(self, path: str) -> bool:
        self.calls.append(path)
        return path in self.existing


def test_detects_marker_directory(tmp_path: Path) -> None:
    """A directory holding a marker directory is a project root."""

    (tmp_path / "repo" / ".git").mkdir(parents=True)
    detector = ProjectRootDetector([".git"], LocalFilesystemAdapter())

    assert detector.is_project_root(str(tmp_path / "repo"))
    assert not detector.is_project_root(str(tmp_path))


def test_detects_marker_file(tmp_path: Path) -> None:
    """Marker files count as well as directories."""

    (tmp_path / "package.json").write_text("{}")
    detector = ProjectRootDetector([".git", "package.json"], LocalFilesystemAdapter())

    assert detector.is_project_root(str(tmp_path))


def test_missing_directory_is_not_a_project_root(tmp_path: Path) -> None:
    """Probing below a missing directory degrades to False."""

    detector = ProjectRootDetector([".git"], LocalFilesystemAdapter())

    assert not detector.is_project_root(str(tmp_path / "missing" / "deeper"))


def test_stops_at_first_marker_found() -> None:
    """Markers are probed in order until one exists."""

    probe = RecordingProbe({"/src/app/.hg"})
    detector = ProjectRootDetector([".git", ".hg", ".svn"], probe, separator="/")

    assert detector.is_project_root("/src/app")
    assert probe.calls == ["/src/app/.git", "/src/app/.hg"]


def test_empty_leading_segment_means_filesystem_root() -> None:
    """The empty first segment of an absolute path probes the root directory."""

    probe = RecordingProbe(set())
    detector = ProjectRootDetector([".git"], probe, separator="/")

    assert not detector.is_project_root("")
    assert not detector.is_project_root("/")
    assert probe.calls == ["/.git", "/.git"]


def test_no_markers_never_probes() -> None:
    """Without markers nothing is a project root."""

    probe = RecordingProbe(set())
    detector = ProjectRootDetector([], probe)

    assert not detector.is_project_root("/anything")
    assert probe.calls == []

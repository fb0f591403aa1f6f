"""Tests for domain/model/paths.py."""

import pytest

from sccdag.domain.model.paths import INF, PathResult, ShortestPaths


class TestPathResult:
    """Tests for PathResult."""

    def test_empty_means_not_found(self) -> None:
        result = PathResult.empty()
        assert not result.found
        assert result.length == 0
        assert result.start is None
        assert result.end is None

    def test_single_vertex_is_found(self) -> None:
        result = PathResult(path=(4,), length=0)
        assert result.found
        assert result.start == result.end == 4
        assert result != PathResult.empty()

    def test_empty_with_length_raises(self) -> None:
        with pytest.raises(ValueError, match="empty path must have length 0"):
            PathResult(path=(), length=3)

    def test_str(self) -> None:
        assert str(PathResult(path=(0, 1, 3), length=9)) == "Path: [0, 1, 3], Length: 9"


class TestShortestPaths:
    """Tests for ShortestPaths."""

    def make(self) -> ShortestPaths:
        # 0 → 1 → 3, 2 unreachable
        return ShortestPaths(source=0, distances=(0, 1, INF, 3), parents=(-1, 0, -1, 1))

    def test_reachability(self) -> None:
        sp = self.make()
        assert sp.is_reachable(3)
        assert not sp.is_reachable(2)
        assert sp.distance(2) == INF
        assert sp.reachable() == (0, 1, 3)

    def test_path_to(self) -> None:
        assert self.make().path_to(3) == PathResult(path=(0, 1, 3), length=3)

    def test_path_to_source(self) -> None:
        assert self.make().path_to(0) == PathResult(path=(0,), length=0)

    def test_path_to_unreachable_is_empty(self) -> None:
        assert self.make().path_to(2) == PathResult.empty()

    def test_size_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="differ in size"):
            ShortestPaths(source=0, distances=(0, 1), parents=(-1,))

    def test_source_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError, match="source 2 out of range"):
            ShortestPaths(source=2, distances=(0, 1), parents=(-1, 0))

    def test_nonzero_source_distance_raises(self) -> None:
        with pytest.raises(ValueError, match="source distance must be 0"):
            ShortestPaths(source=0, distances=(1,), parents=(-1,))

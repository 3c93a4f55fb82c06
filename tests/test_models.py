"""Tests for the depwatch data model."""

from depwatch.models import ClassificationResult, PackageNode, PackageStats


class TestPackageNode:

    def test_defaults(self):
        node = PackageNode(name="github.com/a/b")

        assert node.internal is False
        assert node.children == []
        assert node.resolved is True

    def test_children_lists_are_independent(self):
        first = PackageNode(name="a")
        second = PackageNode(name="b")
        first.children.append(PackageNode(name="c"))

        assert second.children == []

    def test_iter_names_is_pre_order(self):
        tree = PackageNode(
            name="root",
            children=[
                PackageNode(name="a", children=[PackageNode(name="a1"), PackageNode(name="a2")]),
                PackageNode(name="b"),
            ],
        )

        assert tree.iter_names() == ["root", "a", "a1", "a2", "b"]


class TestClassificationResult:

    def test_total_count_and_dict(self):
        result = ClassificationResult(direct=["a", "b"], indirect=["c"])

        assert result.total_count == 3
        assert result.to_dict() == {"direct": ["a", "b"], "indirect": ["c"], "total": 3}


class TestPackageStats:

    def test_from_api(self):
        stats = PackageStats.from_api({
            "Package": "github.com/gorilla/mux",
            "StarCount": 120,
            "Imported": ["github.com/x/y", "github.com/z/w"],
            "StaticRank": 42,
        })

        assert stats.package == "github.com/gorilla/mux"
        assert stats.star_count == 120
        assert stats.imported_count == 2
        assert stats.static_rank == 42

    def test_from_api_with_missing_and_null_fields(self):
        stats = PackageStats.from_api({"Package": "github.com/a/b", "Imported": None})

        assert stats.star_count == 0
        assert stats.imported == []
        assert stats.static_rank == 0

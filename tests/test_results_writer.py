"""Tests for result serialization."""

import json

import pytest

from checkout_scraper.models import ListingCandidate, ProductDetail
from checkout_scraper.services.results_writer import serialize_candidates, write_results


def candidates():
    first = ListingCandidate(link="/listing/1", name="Shirt", price="$25.00")
    first.attach_detail(ProductDetail(name="Shirt", price="$25.00", description=None,
                                      availableSizes=["S", "M"], images=["a.jpg", None]))
    second = ListingCandidate(link="/listing/3", name="Hat", price="$5.00")
    return [first, None, second]


class TestSerialize:
    def test_shapes(self):
        payload = serialize_candidates(candidates())

        assert payload[0]["detail"] == {
            "name": "Shirt",
            "price": "$25.00",
            "description": None,
            "availableSizes": ["S", "M"],
            "images": ["a.jpg", None],
        }
        assert payload[1] is None
        assert payload[2] == {"link": "/listing/3", "name": "Hat", "price": "$5.00"}

    def test_detail_attached_once(self):
        candidate = candidates()[0]
        with pytest.raises(ValueError):
            candidate.attach_detail(ProductDetail())


class TestWriteResults:
    def test_json_overwrites(self, tmp_path):
        path = tmp_path / "result.json"

        write_results(candidates(), path)
        write_results(candidates()[:1], path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert len(data) == 1
        assert data[0]["link"] == "/listing/1"

    def test_jsonl_appends_one_line_per_run(self, tmp_path):
        path = tmp_path / "result.jsonl"

        write_results(candidates(), path, "jsonl")
        write_results([], path, "jsonl")

        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert len(json.loads(lines[0])) == 3
        assert json.loads(lines[1]) == []

    def test_creates_parent_directory(self, tmp_path):
        path = write_results([], tmp_path / "out" / "result.json")
        assert json.loads(path.read_text(encoding="utf-8")) == []

    def test_unknown_format(self, tmp_path):
        with pytest.raises(ValueError):
            write_results([], tmp_path / "result.csv", "csv")

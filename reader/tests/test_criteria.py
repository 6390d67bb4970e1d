"""
Tests for the criteria WHERE-clause builder and the summary row mapper.
"""

from datetime import datetime, timedelta, timezone

import pytest

from reader.database.converters import row_to_summary, to_db_timestamp
from reader.database.criteria import ArticleCriteria, build_where


class TestBuildWhere:
    """Tests for build_where."""

    def test_empty_criteria_only_filters_deleted(self):
        """The soft-delete predicate is always present."""
        where, params = build_where(ArticleCriteria())
        assert where == " WHERE a.delete_date IS NULL"
        assert params == {}

    def test_predicates_follow_fixed_order(self):
        """Predicates appear in id, guid, title, url, date, feed order."""
        where, params = build_where(ArticleCriteria(
            feed_id="f1",
            url="https://example.com/x",
            title="T",
            id="a1",
            publication_date_min=datetime(2024, 1, 1),
            guid_in=["g1"],
        ))
        assert where == (
            " WHERE a.delete_date IS NULL"
            " AND a.id = :id"
            " AND a.guid IN (:guid_in_0)"
            " AND a.title = :title"
            " AND a.url = :url"
            " AND a.publication_date > :publication_date_min"
            " AND a.feed_id = :feed_id"
        )
        assert params == {
            "id": "a1",
            "guid_in_0": "g1",
            "title": "T",
            "url": "https://example.com/x",
            "publication_date_min": "2024-01-01T00:00:00.000000",
            "feed_id": "f1",
        }

    def test_guid_in_binds_each_member(self):
        where, params = build_where(ArticleCriteria(guid_in=["b", "a"]))
        assert "a.guid IN (:guid_in_0, :guid_in_1)" in where
        assert params == {"guid_in_0": "b", "guid_in_1": "a"}

    def test_guid_in_rejects_single_string(self):
        """A lone GUID must be wrapped in a collection."""
        with pytest.raises(TypeError, match="guid_in"):
            ArticleCriteria(guid_in="urn:a")

    def test_empty_guid_in_is_false(self):
        where, params = build_where(ArticleCriteria(guid_in=[]))
        assert where.endswith(" AND 1 = 0")
        assert params == {}

    def test_unset_fields_add_nothing(self):
        where, params = build_where(ArticleCriteria(title="T"))
        assert where == " WHERE a.delete_date IS NULL AND a.title = :title"
        assert params == {"title": "T"}


class TestRowMapping:
    """Tests for positional row mapping."""

    def test_row_to_summary(self):
        row = (
            "id1", "https://example.com/1", "urn:1", "Title", None, "desc",
            None, None, None, 2048, "audio/ogg", "2024-01-01T08:00:00.000000", "feed1",
        )
        summary = row_to_summary(row)
        assert summary.id == "id1"
        assert summary.creator is None
        assert summary.comment_count is None
        assert summary.enclosure_length == 2048
        assert summary.enclosure_type == "audio/ogg"
        assert summary.publication_date == datetime(2024, 1, 1, 8, 0)
        assert summary.feed_id == "feed1"

    def test_timestamp_text_sorts_chronologically(self):
        """Fixed precision keeps lexical and time order aligned."""
        earlier = to_db_timestamp(datetime(2024, 1, 1, 0, 0, 0))
        later = to_db_timestamp(datetime(2024, 1, 1, 0, 0, 0, 1))
        assert earlier < later
        assert to_db_timestamp(None) is None

    def test_aware_timestamp_stored_as_utc(self):
        """Offsets are folded into naive UTC text."""
        plus_five = timezone(timedelta(hours=5))
        assert to_db_timestamp(datetime(2024, 1, 1, 5, 0, tzinfo=plus_five)) == "2024-01-01T00:00:00.000000"
        assert to_db_timestamp(datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)) == "2024-01-01T00:00:00.000000"

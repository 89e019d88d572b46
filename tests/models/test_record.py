"""Unit tests for models.record module."""

from dataclasses import FrozenInstanceError

import pytest

from file_inventory.models.record import FileRecord, FileStat


def _record(**overrides) -> FileRecord:
    values = dict(
        file_name="photo.jpg",
        file_size=1024,
        mime_type="image/jpeg",
        file_extension="jpg",
        path="/photos/photo.jpg",
        created_time=None,
        modified_time=1700000000,
        accessed_time=1700000100,
        exif_data={"Make": "Canon"},
    )
    values.update(overrides)
    return FileRecord(**values)


class TestFileStat:
    """Tests for FileStat dataclass."""

    def test_timestamps_default_to_none(self):
        """Test that only size is required."""
        stat = FileStat(size=10)

        assert stat.size == 10
        assert stat.created_time is None
        assert stat.modified_time is None
        assert stat.accessed_time is None


class TestFileRecord:
    """Tests for FileRecord dataclass."""

    def test_to_dict_keys_in_document_order(self):
        """Test that to_dict() produces the document fields in order."""
        result = _record().to_dict()

        assert list(result) == [
            "file_name",
            "file_size",
            "mime_type",
            "file_extension",
            "path",
            "created_time",
            "modified_time",
            "accessed_time",
            "exif_data",
        ]

    def test_to_dict_values(self):
        """Test to_dict() values, including missing timestamps."""
        result = _record().to_dict()

        assert result["file_name"] == "photo.jpg"
        assert result["file_size"] == 1024
        assert result["created_time"] is None
        assert result["modified_time"] == 1700000000
        assert result["exif_data"] == {"Make": "Canon"}

    def test_to_dict_keeps_empty_exif_distinct_from_none(self):
        """Test that an empty EXIF mapping is not collapsed into None."""
        assert _record(exif_data={}).to_dict()["exif_data"] == {}
        assert _record(exif_data=None).to_dict()["exif_data"] is None

    def test_record_is_frozen(self):
        """Test that records cannot be mutated after construction."""
        record = _record()

        with pytest.raises(FrozenInstanceError):
            record.file_size = 0

    @pytest.mark.parametrize(
        "mime_type,expected",
        [
            ("image/jpeg", True),
            ("image/x-canon-cr2", True),
            ("text/plain", False),
            ("application/octet-stream", False),
        ],
    )
    def test_is_image(self, mime_type, expected):
        """Test image detection from the MIME category."""
        assert _record(mime_type=mime_type).is_image is expected

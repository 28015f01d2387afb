import pytest

from janitor.trip.domain.value_object import BagId


class TestBagId:
    def test_str_returns_value(self):
        assert str(BagId(value="bag-1")) == "bag-1"

    def test_empty_id_raises_error(self):
        with pytest.raises(ValueError, match="BagId cannot be empty"):
            BagId(value="")

    def test_generate_returns_unique_ids(self):
        assert BagId.generate() != BagId.generate()

# tests/test_equality_and_comparison.py
"""
Equality uses the raw digit string; ordering uses birth date then serial.
"""
import pytest

from egypt_national_id import NationalId


class TestEquality:

    @pytest.mark.unit
    @pytest.mark.smoke
    def test_same_national_id_is_equal(self):
        id1 = NationalId("30101011234565")
        id2 = NationalId("30101011234565")

        assert id1 == id2
        assert not (id1 != id2)
        assert id1 is not id2

    @pytest.mark.unit
    def test_different_national_ids_are_not_equal(self):
        id1 = NationalId("30101011234565")
        id2 = NationalId("30101011234668", validate_checksum=False)

        assert id1 != id2

    @pytest.mark.unit
    def test_comparing_with_other_types(self):
        nid = NationalId("30101011234565")

        assert nid != None  # noqa: E711
        assert nid != "30101011234565"
        with pytest.raises(TypeError):
            nid < "30101011234565"

    @pytest.mark.unit
    def test_hash_is_same_for_equal_ids(self):
        id1 = NationalId("30101011234565")
        id2 = NationalId("30101011234565")

        assert hash(id1) == hash(id2)

    @pytest.mark.unit
    def test_checksum_flag_does_not_affect_equality(self):
        assert NationalId("30101011234565") == NationalId("30101011234565", validate_checksum=False)

    @pytest.mark.unit
    def test_can_be_used_in_set(self):
        id1 = NationalId("30101011234565")
        id2 = NationalId("30101011234565")
        id3 = NationalId("30101021234565", validate_checksum=False)

        ids = {id1, id2, id3}

        assert len(ids) == 2
        assert id1 in ids
        assert id3 in ids

    @pytest.mark.unit
    def test_can_be_dict_key(self):
        counts = {NationalId("30101010123458"): 1}

        assert counts[NationalId("30101010123458")] == 1


class TestOrdering:

    @pytest.mark.unit
    def test_older_sorts_first(self):
        older = NationalId("29001011234567", validate_checksum=False)  # 1990
        younger = NationalId("30001011234567", validate_checksum=False)  # 2000

        assert older < younger
        assert older <= younger
        assert younger > older
        assert younger >= older

    @pytest.mark.unit
    def test_serial_breaks_ties(self):
        id1 = NationalId("30101011200007")  # serial 0000
        id2 = NationalId("30101011200019")  # serial 0001

        assert id1 < id2
        assert not id2 < id1

    @pytest.mark.unit
    def test_same_id_is_order_equal(self):
        id1 = NationalId("30101011234565")
        id2 = NationalId("30101011234565")

        assert id1 <= id2 and id1 >= id2
        assert not id1 < id2 and not id1 > id2

    @pytest.mark.unit
    @pytest.mark.regression
    def test_order_equal_but_not_equal(self):
        """
        Same birth date and serial, different governorate: neither sorts
        before the other, yet they are distinct values.
        """
        cairo = NationalId("30101010134562")  # 2001-01-01, Cairo, serial 3456
        dakahlia = NationalId("30101011234565")  # 2001-01-01, Dakahlia, serial 3456

        assert cairo.sort_key == dakahlia.sort_key
        assert cairo <= dakahlia and cairo >= dakahlia
        assert not cairo < dakahlia and not cairo > dakahlia
        assert cairo != dakahlia
        assert len({cairo, dakahlia}) == 2

    @pytest.mark.unit
    def test_can_be_sorted(self):
        id1 = NationalId("30001011234567", validate_checksum=False)  # 2000
        id2 = NationalId("29001011234567", validate_checksum=False)  # 1990
        id3 = NationalId("31001011234567", validate_checksum=False)  # 2010

        assert sorted([id1, id2, id3]) == [id2, id1, id3]
        assert min(id1, id2, id3) == id2
        assert max(id1, id2, id3) == id3

    @pytest.mark.unit
    def test_birth_date_dominates_serial(self):
        earlier_high_serial = NationalId("29601010100029", validate_checksum=False)
        later_low_serial = NationalId("29701010100013")

        assert earlier_high_serial < later_low_serial

    @pytest.mark.unit
    def test_to_string_returns_raw(self):
        assert str(NationalId("30101011234565")) == "30101011234565"

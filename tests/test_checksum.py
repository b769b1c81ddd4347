# tests/test_checksum.py
import pytest

from egypt_national_id.checksum import WEIGHTS, compute_check_digit, validate_checksum


class TestCheckDigit:

    @pytest.mark.unit
    @pytest.mark.smoke
    @pytest.mark.parametrize("national_id", [
        "30101010123458",
        "30101011234565",
        "30101011200007",
        "30101011200019",
    ])
    def test_reference_ids_are_checksum_valid(self, national_id):
        """IDs used as valid throughout the reference test data"""
        assert compute_check_digit(national_id[:13]) == int(national_id[13])
        assert validate_checksum(national_id)

    @pytest.mark.unit
    def test_weighted_sum_modulo_10(self):
        # 3*2 + 0*7 + 1*6 + 0*5 + 1*4 + 0*3 + 1*2 + 0*7 + 1*6 + 2*5 + 3*4 + 4*3 + 5*2 = 68
        assert compute_check_digit("3010101012345") == 8

    @pytest.mark.unit
    def test_weights_cover_thirteen_digits(self):
        assert len(WEIGHTS) == 13

    @pytest.mark.unit
    def test_all_zero_prefix(self):
        assert compute_check_digit("0000000000000") == 0

    @pytest.mark.unit
    def test_serial_change_moves_check_digit(self):
        # last weight is 2: serial 0000 -> 0001 adds 2
        assert compute_check_digit("3010101120000") == 7
        assert compute_check_digit("3010101120001") == 9

    @pytest.mark.unit
    def test_deterministic(self):
        prefix = "2850615250013"
        assert len({compute_check_digit(prefix) for _ in range(10)}) == 1

    @pytest.mark.unit
    @pytest.mark.parametrize("prefix", ["", "123", "30101010123458", "301010101234a", None])
    def test_compute_rejects_malformed_prefix(self, prefix):
        with pytest.raises(ValueError):
            compute_check_digit(prefix)


class TestValidateChecksum:

    @pytest.mark.unit
    def test_wrong_check_digit(self):
        assert not validate_checksum("30101010123459")
        assert not validate_checksum("30101021234565")

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["", "abc123", "3010101012345", "301010101234588", None, 12])
    def test_malformed_input_is_false_not_error(self, raw):
        assert validate_checksum(raw) is False

    @pytest.mark.unit
    def test_only_checksum_is_checked(self):
        # month 13 does not matter to the checksum predicate
        raw = "3011301012345"
        full = raw + str(compute_check_digit(raw))
        assert validate_checksum(full)

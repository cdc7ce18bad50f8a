import pytest

from monitoringrange.format import fmt_perf_float


class TestFmtPerfFloat:
    @pytest.mark.parametrize(
        "value, text",
        [
            (10.0, "10"),
            (10, "10"),
            (1.5, "1.5"),
            (-3.0, "-3"),
            (0.1, "0.1"),
            (12345.678, "12345.678"),
            (2.8e9, "2800000000"),
            (1e-07, "0.0000001"),
            (1e22, "10000000000000000000000"),
        ],
    )
    def test_finite(self, value, text):
        assert text == fmt_perf_float(value)

    def test_round_trips(self):
        assert 0.30000000000000004 == float(fmt_perf_float(0.30000000000000004))

    def test_pos_infinity_is_empty(self):
        assert "" == fmt_perf_float(float("inf"))

    def test_neg_infinity_is_tilde(self):
        assert "~" == fmt_perf_float(float("-inf"))

    def test_nan(self):
        assert "nan" == fmt_perf_float(float("nan"))

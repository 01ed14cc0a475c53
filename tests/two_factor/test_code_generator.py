from src.geo_attendance.geo_attendance.two_factor import code_generator
from src.geo_attendance.geo_attendance.two_factor.code_generator import generate_numeric_code


def test_codes_are_six_digits():
    for _ in range(200):
        code = generate_numeric_code()
        assert len(code) == 6
        assert code.isdigit()


def test_leading_zero_is_kept(monkeypatch):
    digits = iter("012345")
    monkeypatch.setattr(code_generator.secrets, "choice", lambda _: next(digits))

    assert generate_numeric_code() == "012345"
